"""
Finite — Кодирование/декодирование табличных порядков (10^3..10^303)

Алгоритм кодирования:
1. Прямой поиск в таблицах Tier 1 (k, M, B, T) и Tier 2 (q ... d)
2. Tier 3 (36 ≤ exponent ≤ 303):
       position = (exponent - 36) / 3
       units    = position mod 10
       tens     = position div 10
       suffix    = UNIT_PREFIXES[units] + TENS_ROOTS[tens]
       full_name = capitalize_first(UNIT_PREFIX_WORDS[units] + TENS_ROOT_WORDS[tens])
3. Иначе → "" (нет имени для этого exponent)

units = 0 даёт пустой префикс: suffix — это сам корень ("Dc", "Vg", ...),
имя — корень с заглавной буквой ("Decillion"). Имя 10^36 совпадает с
именем 10^33 из Tier 2 — так устроена исходная схема, это сохраняется.
"""

from typing import Optional

from magnitude_namer.core.domain.record import is_valid_exponent
from magnitude_namer.core.domain.tables import (
    COMPOUND_MIN_EXPONENT,
    COMPOUND_TOKENS,
    EXPONENT_STEP,
    FINITE_MAX_EXPONENT,
    SHORT_NAMES,
    SHORT_SUFFIXES,
    STANDARD_NAMES,
    STANDARD_SUFFIXES,
    TENS_ROOT_WORDS,
    TENS_ROOTS,
    UNIT_PREFIX_WORDS,
    UNIT_PREFIXES,
)


# =============================================================================
# TIER 3 COORDINATES
# =============================================================================


def compound_coordinates(exponent: int) -> Optional[tuple[int, int]]:
    """
    Координаты Tier 3: (units, tens).

    Args:
        exponent: Степень десяти

    Returns:
        (units, tens) или None, если exponent вне [36, 303] или не кратен 3

    Examples:
        >>> compound_coordinates(36)
        (0, 0)
        >>> compound_coordinates(132)
        (2, 3)
        >>> compound_coordinates(303)
        (9, 8)
    """
    if not is_valid_exponent(exponent):
        return None
    if not COMPOUND_MIN_EXPONENT <= exponent <= FINITE_MAX_EXPONENT:
        return None

    position = (exponent - COMPOUND_MIN_EXPONENT) // EXPONENT_STEP
    tens, units = divmod(position, len(UNIT_PREFIXES))
    return (units, tens)


def _capitalize_first(name: str) -> str:
    # str.capitalize() понизил бы регистр остальных букв
    return name[:1].upper() + name[1:]


# =============================================================================
# ENCODER
# =============================================================================


def finite_suffix(exponent: int) -> str:
    """
    Суффикс для exponent ∈ [3, 303].

    Returns:
        Суффикс или "" если exponent не имеет табличного имени
    """
    if not is_valid_exponent(exponent):
        return ""
    if exponent in STANDARD_NAMES:
        return STANDARD_NAMES[exponent][0]
    if exponent in SHORT_NAMES:
        return SHORT_NAMES[exponent][0]

    coords = compound_coordinates(exponent)
    if coords is None:
        return ""
    units, tens = coords
    if tens >= len(TENS_ROOTS):
        return ""
    return UNIT_PREFIXES[units] + TENS_ROOTS[tens]


def finite_full_name(exponent: int) -> str:
    """
    Полное имя для exponent ∈ [3, 303].

    Returns:
        Имя с заглавной первой буквой или "" если exponent не имеет табличного имени
    """
    if not is_valid_exponent(exponent):
        return ""
    if exponent in STANDARD_NAMES:
        return STANDARD_NAMES[exponent][1]
    if exponent in SHORT_NAMES:
        return SHORT_NAMES[exponent][1]

    coords = compound_coordinates(exponent)
    if coords is None:
        return ""
    units, tens = coords
    if tens >= len(TENS_ROOT_WORDS):
        return ""
    return _capitalize_first(UNIT_PREFIX_WORDS[units] + TENS_ROOT_WORDS[tens])


# =============================================================================
# DECODER
# =============================================================================


def finite_exponent(suffix: str) -> Optional[int]:
    """
    Обратное преобразование для табличных тиров: suffix → exponent.

    Порядок: Tier 1, Tier 2, затем Tier 3 (точное совпадение с токеном
    prefix + root). Сравнение строго с учётом регистра.

    Returns:
        exponent или None, если suffix не найден ни в одной таблице

    Examples:
        >>> finite_exponent("k")
        3
        >>> finite_exponent("dQDR")
        132
        >>> finite_exponent("D") is None
        True
    """
    if suffix in STANDARD_SUFFIXES:
        return STANDARD_SUFFIXES[suffix]
    if suffix in SHORT_SUFFIXES:
        return SHORT_SUFFIXES[suffix]
    return COMPOUND_TOKENS.get(suffix)
