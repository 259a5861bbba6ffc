"""
magnitude_namer — suffixes and names for idle-game number magnitudes

    >>> from magnitude_namer import encode, decode
    >>> encode(132).record.suffix
    'dQDR'
    >>> decode("1.5dQDR").exponent
    132
"""

from magnitude_namer.core.domain import (
    EXPONENT_STEP,
    FINITE_MAX_EXPONENT,
    FINITE_MIN_EXPONENT,
    INFINITE_MIN_EXPONENT,
    MagnitudeRecord,
    NamingTier,
    ParseErrorKind,
    tier_for,
)
from magnitude_namer.core.naming import (
    SHADOWED_INFINITE_CODES,
    BatchConfig,
    BatchPage,
    BatchProducer,
    DecodeResult,
    EncodeResult,
    SuffixParseError,
    batch,
    decode,
    encode,
    format_number,
    full_name_for,
    generate_all_finite,
    suffix_for,
)

__version__ = "0.1.0"

__all__ = [
    # Domain
    "EXPONENT_STEP",
    "FINITE_MIN_EXPONENT",
    "FINITE_MAX_EXPONENT",
    "INFINITE_MIN_EXPONENT",
    "MagnitudeRecord",
    "NamingTier",
    "ParseErrorKind",
    "tier_for",
    # Codec
    "SHADOWED_INFINITE_CODES",
    "EncodeResult",
    "DecodeResult",
    "SuffixParseError",
    "encode",
    "decode",
    "suffix_for",
    "full_name_for",
    # Batch
    "BatchConfig",
    "BatchPage",
    "BatchProducer",
    "batch",
    "generate_all_finite",
    # Formatting
    "format_number",
]
