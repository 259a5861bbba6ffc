"""
Infinite — Открытое продолжение схемы за пределами 10^303

position = (exponent - 306) / 3, нумерация с нуля: 10^306 → "a".

Суффикс — bijective base-26 (как имена колонок в таблицах):
    a, b, ..., z, aa, ab, ..., az, ba, ..., zz, aaa, ...
На каждом шаге: буква 'a' + position mod 26, затем position = position div 26 - 1.
Нулевой цифры нет, поэтому нет коллизий "za" / "aaa", как у обычной base-26.

Полного латинского имени нет: используется метка "Level N (10^E)".
"""

from typing import Optional

from magnitude_namer.core.domain.record import is_valid_exponent
from magnitude_namer.core.domain.tables import (
    EXPONENT_STEP,
    INFINITE_ALPHABET,
    INFINITE_BASE,
    INFINITE_MIN_EXPONENT,
)


def infinite_position(exponent: int) -> Optional[int]:
    """
    Позиция в бесконечном тире (0 для 10^306).

    Returns:
        position или None, если exponent не принадлежит бесконечному тиру
    """
    if not is_valid_exponent(exponent) or exponent < INFINITE_MIN_EXPONENT:
        return None
    return (exponent - INFINITE_MIN_EXPONENT) // EXPONENT_STEP


def encode_bijective(position: int) -> str:
    """
    Bijective base-26: 0 → "a", 25 → "z", 26 → "aa", 701 → "zz", 702 → "aaa".

    Raises:
        ValueError: Если position отрицательная
    """
    if position < 0:
        raise ValueError(f"position must be non-negative, got {position}")

    letters = []
    while position >= 0:
        position, remainder = divmod(position, INFINITE_BASE)
        letters.append(INFINITE_ALPHABET[remainder])
        position -= 1
    return "".join(reversed(letters))


def decode_bijective(code: str) -> Optional[int]:
    """
    Обратное к encode_bijective: "a" → 0, "aa" → 26.

    Returns:
        position или None, если code пустой или содержит не a–z
    """
    if not code:
        return None

    position = 0
    for char in code:
        digit = INFINITE_ALPHABET.find(char)
        if digit < 0:
            return None
        position = position * INFINITE_BASE + digit + 1
    return position - 1


def infinite_suffix(exponent: int) -> str:
    """Суффикс бесконечного тира или "" для exponent вне тира."""
    position = infinite_position(exponent)
    if position is None:
        return ""
    return encode_bijective(position)


def infinite_full_name(exponent: int) -> str:
    """Синтетическая метка "Level N (10^E)" или "" для exponent вне тира."""
    position = infinite_position(exponent)
    if position is None:
        return ""
    return f"Level {position + 1} (10^{exponent})"


def infinite_exponent(code: str) -> Optional[int]:
    """
    exponent для кода бесконечного тира.

    Examples:
        >>> infinite_exponent("a")
        306
        >>> infinite_exponent("aa")
        384
        >>> infinite_exponent("Aa") is None
        True
    """
    position = decode_bijective(code)
    if position is None:
        return None
    return INFINITE_MIN_EXPONENT + position * EXPONENT_STEP
