"""
Domain models and value objects.

Contains the naming tables and the MagnitudeRecord value type.
"""

from magnitude_namer.core.domain.record import (
    MagnitudeRecord,
    NamingTier,
    ParseErrorKind,
    is_valid_exponent,
    tier_for,
)
from magnitude_namer.core.domain.tables import (
    COMPOUND_MIN_EXPONENT,
    COMPOUND_POSITIONS,
    COMPOUND_TOKENS,
    EXPONENT_STEP,
    FINITE_MAX_EXPONENT,
    FINITE_MIN_EXPONENT,
    INFINITE_ALPHABET,
    INFINITE_BASE,
    INFINITE_MIN_EXPONENT,
    SHORT_NAMES,
    SHORT_SUFFIXES,
    STANDARD_NAMES,
    STANDARD_SUFFIXES,
    TENS_ROOT_WORDS,
    TENS_ROOTS,
    UNIT_PREFIX_WORDS,
    UNIT_PREFIXES,
)

__all__ = [
    # Domain bounds
    "EXPONENT_STEP",
    "FINITE_MIN_EXPONENT",
    "FINITE_MAX_EXPONENT",
    "COMPOUND_MIN_EXPONENT",
    "COMPOUND_POSITIONS",
    "INFINITE_MIN_EXPONENT",
    "INFINITE_ALPHABET",
    "INFINITE_BASE",
    # Tables
    "STANDARD_NAMES",
    "SHORT_NAMES",
    "UNIT_PREFIXES",
    "UNIT_PREFIX_WORDS",
    "TENS_ROOTS",
    "TENS_ROOT_WORDS",
    "STANDARD_SUFFIXES",
    "SHORT_SUFFIXES",
    "COMPOUND_TOKENS",
    # Record model
    "MagnitudeRecord",
    "NamingTier",
    "ParseErrorKind",
    "is_valid_exponent",
    "tier_for",
]
