"""Форматирование чисел с суффиксом порядка: 1.5e132 → "1.50dQDR"."""

import math

from magnitude_namer.core.domain.tables import EXPONENT_STEP, FINITE_MIN_EXPONENT
from magnitude_namer.core.naming.codec import suffix_for


def format_number(value: float, precision: int = 2) -> str:
    """
    Компактная запись числа: мантисса + суффикс.

    Args:
        value: Число (float или int; int любой величины)
        precision: Знаков после запятой в мантиссе

    Returns:
        Строка вида "1.50M"; при |value| < 1000 — без суффикса

    Raises:
        ValueError: Если value — NaN/Inf или precision < 0

    Examples:
        >>> format_number(1234567)
        '1.23M'
        >>> format_number(999.999)
        '1.00k'
        >>> format_number(999999.9)
        '1.00M'
        >>> format_number(-2.5e15, precision=1)
        '-2.5q'
        >>> format_number(10**309)
        '1.00b'
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    # int произвольной длины не переводится в float: 10**400 остаётся точным
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"value must be finite (not NaN/Inf), got {value}")

    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if round(magnitude, precision) < 10**FINITE_MIN_EXPONENT:
        return f"{sign}{magnitude:.{precision}f}"

    exponent = (int(math.floor(math.log10(magnitude))) // EXPONENT_STEP) * EXPONENT_STEP
    mantissa = magnitude / 10**exponent

    # log10 около степени десяти может ошибиться на единицу
    if mantissa < 1:
        exponent -= EXPONENT_STEP
        mantissa = magnitude / 10**exponent
    # округление 999.995 → "1000.00" переносится в следующий порядок
    if round(mantissa, precision) >= 10**EXPONENT_STEP:
        exponent += EXPONENT_STEP
        mantissa = magnitude / 10**exponent

    return f"{sign}{mantissa:.{precision}f}{suffix_for(exponent)}"
