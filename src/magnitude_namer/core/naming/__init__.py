"""
Core naming modules

Кодирование и декодирование порядков: табличные тиры, бесконечный тир,
маршрутизация, постраничная выдача и форматирование чисел.
"""

# Finite tiers (10^3 .. 10^303)
from magnitude_namer.core.naming.finite import (
    compound_coordinates,
    finite_exponent,
    finite_full_name,
    finite_suffix,
)

# Infinite tier (> 10^303)
from magnitude_namer.core.naming.infinite import (
    decode_bijective,
    encode_bijective,
    infinite_exponent,
    infinite_full_name,
    infinite_position,
    infinite_suffix,
)

# Codec
from magnitude_namer.core.naming.codec import (
    SHADOWED_INFINITE_CODES,
    DecodeResult,
    EncodeResult,
    SuffixParseError,
    decode,
    encode,
    full_name_for,
    is_round_trip,
    suffix_for,
)

# Batch producer
from magnitude_namer.core.naming.batch import (
    BatchConfig,
    BatchPage,
    BatchProducer,
    batch,
    generate_all_finite,
)

# Formatting
from magnitude_namer.core.naming.formatting import format_number

__all__ = [
    # Finite
    "compound_coordinates",
    "finite_suffix",
    "finite_full_name",
    "finite_exponent",
    # Infinite
    "encode_bijective",
    "decode_bijective",
    "infinite_position",
    "infinite_suffix",
    "infinite_full_name",
    "infinite_exponent",
    # Codec
    "SHADOWED_INFINITE_CODES",
    "EncodeResult",
    "DecodeResult",
    "SuffixParseError",
    "encode",
    "decode",
    "suffix_for",
    "full_name_for",
    "is_round_trip",
    # Batch
    "BatchConfig",
    "BatchPage",
    "BatchProducer",
    "batch",
    "generate_all_finite",
    # Formatting
    "format_number",
]
