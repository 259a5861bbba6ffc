"""
Codec — Маршрутизация exponent ↔ suffix по тирам

Публичные операции:
- encode(exponent) → EncodeResult (record или not_found)
- decode(text) → DecodeResult (exponent или ParseErrorKind)
- suffix_for / full_name_for → строка или ""

Ошибки являются значениями, а не исключениями: вызывающий код различает
"нет имени" (encode), INVALID_FORMAT и NO_MATCH (decode).
SuffixParseError поднимается только по явному запросу (exponent_or_raise).

ПОРЯДОК ДЕКОДИРОВАНИЯ:
1. Завершающий ASCII-буквенный хвост (проход с конца строки); нет хвоста → INVALID_FORMAT
2. Tier 1 → Tier 2 → Tier 3 (точное совпадение, с учётом регистра)
3. Только a–z → бесконечный тир
4. Иначе → NO_MATCH

Коды бесконечного тира "d", "k", "q", "s" совпадают с суффиксами Tier 1/2
и декодируются в табличный порядок; бесконечное прочтение возвращается
в DecodeResult.alternative_exponent.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping, Optional

from magnitude_namer.core.domain.record import MagnitudeRecord, ParseErrorKind, is_valid_exponent
from magnitude_namer.core.domain.tables import (
    FINITE_MAX_EXPONENT,
    INFINITE_MIN_EXPONENT,
    SHORT_SUFFIXES,
    STANDARD_SUFFIXES,
)
from magnitude_namer.core.naming.finite import finite_exponent, finite_full_name, finite_suffix
from magnitude_namer.core.naming.infinite import (
    encode_bijective,
    infinite_exponent,
    infinite_full_name,
    infinite_suffix,
)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

def _split_trailing_letters(text: str) -> tuple[str, str]:
    """
    (префикс, максимальный ASCII-буквенный хвост) за один проход с конца.

    >>> _split_trailing_letters("1.5dQDR")
    ('1.5', 'dQDR')
    """
    start = len(text)
    while start > 0 and text[start - 1].isascii() and text[start - 1].isalpha():
        start -= 1
    return text[:start], text[start:]


def _find_shadowed_codes() -> Mapping[str, int]:
    """Коды бесконечного тира, совпадающие с суффиксами Tier 1/2: code → exponent."""
    fixed = set(STANDARD_SUFFIXES) | set(SHORT_SUFFIXES)
    longest = max(len(s) for s in fixed)
    shadowed: dict[str, int] = {}
    position = 0
    while True:
        code = encode_bijective(position)
        if len(code) > longest:
            break
        if code in fixed:
            shadowed[code] = infinite_exponent(code)
        position += 1
    return MappingProxyType(shadowed)


# {"d": 315, "k": 336, "q": 354, "s": 360}
SHADOWED_INFINITE_CODES: Final[Mapping[str, int]] = _find_shadowed_codes()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SuffixParseError(Exception):
    """
    Строка не может быть декодирована в exponent.

    Поднимается только DecodeResult.exponent_or_raise(); decode() сам по себе
    никогда не бросает исключений.
    """

    def __init__(self, kind: ParseErrorKind, text: object):
        self.kind = kind
        self.text = text
        super().__init__(f"Cannot decode {text!r}: {kind.value}")


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class EncodeResult:
    """Результат encode()."""

    exponent: object
    record: Optional[MagnitudeRecord]

    # Причина отказа ("" если record найден)
    error: str = ""

    @property
    def found(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class DecodeResult:
    """Результат decode()."""

    text: object
    exponent: Optional[int]
    error: Optional[ParseErrorKind]

    # Извлечённый буквенный хвост ("" при INVALID_FORMAT)
    suffix: str = ""

    # Числовая часть перед суффиксом ("1.5" в "1.5dQDR"), None если её нет
    # или она не является числом
    mantissa: Optional[float] = None

    # Бесконечное прочтение затенённого кода ("d" → 315), иначе None
    alternative_exponent: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def exponent_or_raise(self) -> int:
        """
        exponent или исключение.

        Raises:
            SuffixParseError: Если декодирование не удалось
        """
        if self.error is not None:
            raise SuffixParseError(self.error, self.text)
        return self.exponent


# =============================================================================
# ENCODER
# =============================================================================


def suffix_for(exponent: int) -> str:
    """Суффикс для любого тира или "" если exponent вне схемы."""
    if not is_valid_exponent(exponent):
        return ""
    if exponent <= FINITE_MAX_EXPONENT:
        return finite_suffix(exponent)
    return infinite_suffix(exponent)


def full_name_for(exponent: int) -> str:
    """Полное имя для любого тира или "" если exponent вне схемы."""
    if not is_valid_exponent(exponent):
        return ""
    if exponent <= FINITE_MAX_EXPONENT:
        return finite_full_name(exponent)
    return infinite_full_name(exponent)


def encode(exponent: int) -> EncodeResult:
    """
    Кодирование exponent в MagnitudeRecord.

    Args:
        exponent: Степень десяти (int, кратная 3, ≥ 3)

    Returns:
        EncodeResult с record, либо record=None и причиной в error

    Examples:
        >>> encode(3).record.suffix
        'k'
        >>> encode(306).record.suffix
        'a'
        >>> encode(305).found
        False
    """
    if not is_valid_exponent(exponent):
        return EncodeResult(
            exponent=exponent,
            record=None,
            error=f"not_found: {exponent!r} is not an integer multiple of 3 >= 3",
        )

    suffix = suffix_for(exponent)
    full_name = full_name_for(exponent)
    if not suffix or not full_name:
        return EncodeResult(
            exponent=exponent,
            record=None,
            error=f"not_found: no name defined for exponent {exponent}",
        )

    return EncodeResult(
        exponent=exponent,
        record=MagnitudeRecord(
            exponent=exponent,
            scientific=f"1e{exponent}",
            suffix=suffix,
            full_name=full_name,
        ),
    )


# =============================================================================
# DECODER
# =============================================================================


def _parse_mantissa(prefix: str) -> Optional[float]:
    prefix = prefix.strip()
    if not prefix:
        return None
    try:
        return float(prefix)
    except ValueError:
        return None


def decode(text: str) -> DecodeResult:
    """
    Декодирование суффикса (возможно, с числовой частью) в exponent.

    Args:
        text: Например "dQDR", "1.5dQDR", "250 k", "aa"

    Returns:
        DecodeResult; при ошибке exponent=None и error=INVALID_FORMAT | NO_MATCH

    Examples:
        >>> decode("1.5dQDR").exponent
        132
        >>> decode("123").error
        <ParseErrorKind.INVALID_FORMAT: 'INVALID_FORMAT'>
        >>> decode("Zz").error
        <ParseErrorKind.NO_MATCH: 'NO_MATCH'>
    """
    if not isinstance(text, str):
        return DecodeResult(text=text, exponent=None, error=ParseErrorKind.INVALID_FORMAT)

    stripped = text.strip()
    prefix, suffix = _split_trailing_letters(stripped)
    if not suffix:
        return DecodeResult(text=text, exponent=None, error=ParseErrorKind.INVALID_FORMAT)

    mantissa = _parse_mantissa(prefix)

    exponent = finite_exponent(suffix)
    if exponent is not None:
        return DecodeResult(
            text=text,
            exponent=exponent,
            error=None,
            suffix=suffix,
            mantissa=mantissa,
            alternative_exponent=SHADOWED_INFINITE_CODES.get(suffix),
        )

    exponent = infinite_exponent(suffix)
    if exponent is not None:
        return DecodeResult(text=text, exponent=exponent, error=None, suffix=suffix, mantissa=mantissa)

    return DecodeResult(
        text=text, exponent=None, error=ParseErrorKind.NO_MATCH, suffix=suffix, mantissa=mantissa
    )


def is_round_trip(exponent: int) -> bool:
    """
    Проверка обратимости: decode(suffix_for(e)) возвращает e
    (для затенённых кодов через alternative_exponent).
    """
    suffix = suffix_for(exponent)
    if not suffix:
        return False
    result = decode(suffix)
    if result.exponent == exponent:
        return True
    return exponent >= INFINITE_MIN_EXPONENT and result.alternative_exponent == exponent
