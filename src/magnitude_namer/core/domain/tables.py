"""
Tables — Таблицы схемы именования порядков

Единственный источник данных для всех тиров:
- Tier 1 (STANDARD): 10^3..10^12 — k, M, B, T
- Tier 2 (SHORT): 10^15..10^33 — однобуквенные латинские сокращения
- Tier 3 (COMPOUND): 10^36..10^303 — unit prefix + tens root
- Tier 4 (INFINITE): > 10^303 — bijective base-26 (a, b, ..., z, aa, ...)

Все таблицы неизменяемы (MappingProxyType / tuple) и строятся один раз при импорте.
Обратные таблицы (suffix → exponent) выводятся из прямых, а не дублируются вручную.

РЕГИСТР ВАЖЕН: "d" (Decillion, 10^33) и "D" — разные строки; "q" и "Q" —
разные порядки. Никаких case-insensitive сравнений.
"""

from types import MappingProxyType
from typing import Final, Mapping


# =============================================================================
# ГРАНИЦЫ ДОМЕНА
# =============================================================================

# Шаг между соседними именованными порядками
EXPONENT_STEP: Final[int] = 3

# Конечная (табличная) часть домена: [3, 303]
FINITE_MIN_EXPONENT: Final[int] = 3
FINITE_MAX_EXPONENT: Final[int] = 303

# Начало составных латинских имён (Tier 3)
COMPOUND_MIN_EXPONENT: Final[int] = 36

# Первый порядок бесконечного тира: position 0 → "a"
INFINITE_MIN_EXPONENT: Final[int] = 306

# Размер алфавита бесконечного тира
INFINITE_ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz"
INFINITE_BASE: Final[int] = len(INFINITE_ALPHABET)


# =============================================================================
# TIER 1 / TIER 2: ФИКСИРОВАННЫЕ ТАБЛИЦЫ
# =============================================================================

# exponent → (suffix, full_name)
STANDARD_NAMES: Final[Mapping[int, tuple[str, str]]] = MappingProxyType(
    {
        3: ("k", "Thousand"),
        6: ("M", "Million"),
        9: ("B", "Billion"),
        12: ("T", "Trillion"),
    }
)

SHORT_NAMES: Final[Mapping[int, tuple[str, str]]] = MappingProxyType(
    {
        15: ("q", "Quadrillion"),
        18: ("Q", "Quintillion"),
        21: ("s", "Sextillion"),
        24: ("S", "Septillion"),
        27: ("O", "Octillion"),
        30: ("N", "Nonillion"),
        33: ("d", "Decillion"),
    }
)


# =============================================================================
# TIER 3: UNIT PREFIXES / TENS ROOTS
# =============================================================================

# units (0..9) → сокращение; units=0 → пустой префикс
UNIT_PREFIXES: Final[tuple[str, ...]] = ("", "U", "d", "t", "q", "Q", "s", "S", "o", "n")

UNIT_PREFIX_WORDS: Final[tuple[str, ...]] = (
    "",
    "un",
    "duo",
    "tre",
    "quattuor",
    "quin",
    "sex",
    "septen",
    "octo",
    "novem",
)

# tens (0..8) → сокращение корня. "QDR" — трёхбуквенный корень (tens=3)
TENS_ROOTS: Final[tuple[str, ...]] = ("Dc", "Vg", "Tg", "QDR", "Qn", "Sx", "Sp", "Oc", "No")

TENS_ROOT_WORDS: Final[tuple[str, ...]] = (
    "decillion",
    "vigintillion",
    "trigintillion",
    "quadragintillion",
    "quinquagintillion",
    "sexagintillion",
    "septuagintillion",
    "octogintillion",
    "nonagintillion",
)

# Количество позиций Tier 3: 9 корней × 10 префиксов = 90 (exponent 36..303)
COMPOUND_POSITIONS: Final[int] = len(TENS_ROOTS) * len(UNIT_PREFIXES)


# =============================================================================
# ОБРАТНЫЕ ТАБЛИЦЫ (suffix → exponent)
# =============================================================================


def _invert_fixed(table: Mapping[int, tuple[str, str]]) -> Mapping[str, int]:
    """Обратная таблица для Tier 1/2: suffix → exponent."""
    inverted: dict[str, int] = {}
    for exponent, (suffix, _) in table.items():
        if suffix in inverted:
            raise ValueError(f"Duplicate suffix {suffix!r} at exponents {inverted[suffix]} and {exponent}")
        inverted[suffix] = exponent
    return MappingProxyType(inverted)


def _build_compound_tokens() -> Mapping[str, int]:
    """
    Построение таблицы токенов Tier 3: (prefix + root) → exponent.

    Каждый токен — полный зарегистрированный префикс (или пустая строка) плюс
    полный корень. Поиск по этой таблице эквивалентен проверке "suffix
    заканчивается корнем, а остаток — целиком зарегистрированный префикс",
    но без перебора и без частичных совпадений ("Q" vs "QDR", "Qn").

    Raises:
        ValueError: Если две пары (prefix, root) дают одинаковую строку
    """
    tokens: dict[str, int] = {}
    for tens, root in enumerate(TENS_ROOTS):
        for units, prefix in enumerate(UNIT_PREFIXES):
            token = prefix + root
            exponent = COMPOUND_MIN_EXPONENT + (tens * len(UNIT_PREFIXES) + units) * EXPONENT_STEP
            if token in tokens:
                raise ValueError(
                    f"Ambiguous compound token {token!r}: exponents {tokens[token]} and {exponent}"
                )
            tokens[token] = exponent
    return MappingProxyType(tokens)


STANDARD_SUFFIXES: Final[Mapping[str, int]] = _invert_fixed(STANDARD_NAMES)
SHORT_SUFFIXES: Final[Mapping[str, int]] = _invert_fixed(SHORT_NAMES)
COMPOUND_TOKENS: Final[Mapping[str, int]] = _build_compound_tokens()
