"""
MagnitudeRecord — Модель записи о порядке величины

Immutable Pydantic модель: exponent, научная запись, суффикс, полное имя.
Соответствует JSON Schema контракту magnitude_record.json.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .tables import (
    COMPOUND_MIN_EXPONENT,
    EXPONENT_STEP,
    FINITE_MAX_EXPONENT,
    FINITE_MIN_EXPONENT,
    SHORT_NAMES,
    STANDARD_NAMES,
)


# =============================================================================
# ENUMS
# =============================================================================


class NamingTier(str, Enum):
    """Тир именования — непересекающиеся поддиапазоны домена exponent."""

    STANDARD = "STANDARD"  # Tier 1: k, M, B, T
    SHORT = "SHORT"  # Tier 2: q, Q, s, S, O, N, d
    COMPOUND = "COMPOUND"  # Tier 3: prefix + root
    INFINITE = "INFINITE"  # Tier 4: a, b, ..., aa, ...


class ParseErrorKind(str, Enum):
    """
    Причина отказа декодера.

    INVALID_FORMAT — во входной строке нет завершающего буквенного хвоста.
    NO_MATCH — хвост есть, но не соответствует ни одному тиру.
    """

    INVALID_FORMAT = "INVALID_FORMAT"
    NO_MATCH = "NO_MATCH"


# =============================================================================
# TIER ROUTING
# =============================================================================


def is_valid_exponent(exponent: object) -> bool:
    """
    Проверка, что exponent — целое число, кратное шагу, и не меньше 3.

    bool отклоняется явно (True == 1 в Python).
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        return False
    return exponent >= FINITE_MIN_EXPONENT and exponent % EXPONENT_STEP == 0


def tier_for(exponent: object) -> Optional[NamingTier]:
    """
    Определение тира для exponent.

    Returns:
        NamingTier или None, если exponent вне схемы именования
        (не int, не кратен 3, меньше 3)
    """
    if not is_valid_exponent(exponent):
        return None
    if exponent in STANDARD_NAMES:
        return NamingTier.STANDARD
    if exponent in SHORT_NAMES:
        return NamingTier.SHORT
    if COMPOUND_MIN_EXPONENT <= exponent <= FINITE_MAX_EXPONENT:
        return NamingTier.COMPOUND
    return NamingTier.INFINITE


# =============================================================================
# MAGNITUDE RECORD
# =============================================================================


class MagnitudeRecord(BaseModel):
    """
    Запись о порядке величины.

    Immutable модель (frozen=True). Для заданного exponent suffix и full_name
    однозначно определены: повторное кодирование даёт идентичные строки.
    """

    exponent: int = Field(
        ..., ge=FINITE_MIN_EXPONENT, multiple_of=EXPONENT_STEP, description="Степень десяти"
    )
    scientific: str = Field(..., description="Научная запись: '1e' + exponent")
    suffix: str = Field(..., min_length=1, description="Короткий суффикс (например, 'dQDR')")
    full_name: str = Field(..., min_length=1, description="Полное имя (например, 'Duoquadragintillion')")

    model_config = {"frozen": True}

    @field_validator("scientific")
    @classmethod
    def validate_scientific(cls, v: str, info) -> str:
        """Научная запись всегда '1e{exponent}'."""
        exponent = info.data.get("exponent")
        if exponent is not None and v != f"1e{exponent}":
            raise ValueError(f"scientific {v!r} does not match exponent {exponent} (expected '1e{exponent}')")
        return v

    @property
    def tier(self) -> NamingTier:
        """Тир, к которому относится запись."""
        return tier_for(self.exponent)

    @property
    def is_finite(self) -> bool:
        """True для табличных тиров (exponent ≤ 303)."""
        return self.exponent <= FINITE_MAX_EXPONENT
