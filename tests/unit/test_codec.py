"""
Тесты для маршрутизации encode / decode

Проверяет:
1. Известные значения по всем тирам
2. Not-found для exponent вне схемы
3. Ошибки декодера: INVALID_FORMAT / NO_MATCH
4. Числовую часть (мантиссу) перед суффиксом
5. Обратимость decode(encode(e).suffix) == e
6. Затенённые коды бесконечного тира (d, k, q, s)
"""

import pytest

from magnitude_namer import (
    SHADOWED_INFINITE_CODES,
    NamingTier,
    ParseErrorKind,
    SuffixParseError,
    decode,
    encode,
    full_name_for,
    suffix_for,
    tier_for,
)
from magnitude_namer.core.naming import is_round_trip


# =============================================================================
# ENCODE
# =============================================================================


class TestEncode:
    """encode(exponent) → EncodeResult"""

    def test_thousand(self) -> None:
        result = encode(3)
        assert result.found
        assert result.error == ""
        assert result.record.suffix == "k"
        assert result.record.full_name == "Thousand"
        assert result.record.scientific == "1e3"

    def test_decillion_compound(self) -> None:
        record = encode(36).record
        assert (record.suffix, record.full_name) == ("Dc", "Decillion")

    def test_duoquadragintillion(self) -> None:
        record = encode(132).record
        assert (record.suffix, record.full_name) == ("dQDR", "Duoquadragintillion")
        assert record.scientific == "1e132"

    def test_unquadragintillion(self) -> None:
        """position = (129 - 36) / 3 = 31 → units=1, tens=3"""
        record = encode(129).record
        assert (record.suffix, record.full_name) == ("UQDR", "Unquadragintillion")

    def test_vigintillion(self) -> None:
        record = encode(66).record
        assert (record.suffix, record.full_name) == ("Vg", "Vigintillion")

    def test_finite_boundary(self) -> None:
        record = encode(303).record
        assert (record.suffix, record.full_name) == ("nNo", "Novemnonagintillion")

    def test_infinite_tier(self) -> None:
        assert encode(306).record.suffix == "a"
        assert encode(309).record.suffix == "b"
        assert encode(306 + 25 * 3).record.suffix == "z"
        assert encode(306 + 26 * 3).record.suffix == "aa"
        assert encode(306).record.full_name == "Level 1 (10^306)"

    def test_idempotent(self) -> None:
        """Повторный вызов даёт идентичные строки"""
        for exponent in (3, 36, 132, 303, 306, 3306):
            first = encode(exponent).record
            second = encode(exponent).record
            assert first == second
            assert first.suffix == second.suffix
            assert first.full_name == second.full_name

    def test_not_multiple_of_three(self) -> None:
        result = encode(305)
        assert not result.found
        assert result.record is None
        assert result.error.startswith("not_found")

    def test_zero(self) -> None:
        result = encode(0)
        assert not result.found
        assert "not_found" in result.error

    def test_negative_and_non_int(self) -> None:
        assert not encode(-3).found
        assert not encode(3.0).found  # type: ignore
        assert not encode(None).found  # type: ignore

    def test_suffix_and_name_helpers(self) -> None:
        assert suffix_for(6) == "M"
        assert full_name_for(6) == "Million"
        assert suffix_for(384) == "aa"
        assert suffix_for(305) == ""
        assert full_name_for(0) == ""


class TestTierRouting:
    """tier_for"""

    def test_tiers(self) -> None:
        assert tier_for(3) == NamingTier.STANDARD
        assert tier_for(12) == NamingTier.STANDARD
        assert tier_for(15) == NamingTier.SHORT
        assert tier_for(33) == NamingTier.SHORT
        assert tier_for(36) == NamingTier.COMPOUND
        assert tier_for(303) == NamingTier.COMPOUND
        assert tier_for(306) == NamingTier.INFINITE

    def test_outside_scheme(self) -> None:
        assert tier_for(0) is None
        assert tier_for(305) is None
        assert tier_for(True) is None  # type: ignore

    def test_record_tier_property(self) -> None:
        assert encode(132).record.tier == NamingTier.COMPOUND
        assert encode(132).record.is_finite
        assert not encode(306).record.is_finite


# =============================================================================
# DECODE
# =============================================================================


class TestDecode:
    """decode(text) → DecodeResult"""

    def test_bare_suffixes(self) -> None:
        assert decode("k").exponent == 3
        assert decode("T").exponent == 12
        assert decode("Q").exponent == 18
        assert decode("Dc").exponent == 36
        assert decode("QDR").exponent == 126
        assert decode("QQDR").exponent == 141
        assert decode("nNo").exponent == 303

    def test_numeric_prefix(self) -> None:
        result = decode("1.5dQDR")
        assert result.ok
        assert result.exponent == 132
        assert result.suffix == "dQDR"
        assert result.mantissa == pytest.approx(1.5)

    def test_whitespace(self) -> None:
        result = decode("  250 k ")
        assert result.exponent == 3
        assert result.mantissa == pytest.approx(250.0)

    def test_non_numeric_prefix(self) -> None:
        """Нечисловая часть перед суффиксом не мешает декодированию"""
        result = decode("abc!dQDR")
        assert result.exponent == 132
        assert result.mantissa is None

    def test_no_prefix_mantissa_none(self) -> None:
        assert decode("M").mantissa is None

    def test_infinite_codes(self) -> None:
        assert decode("a").exponent == 306
        assert decode("aa").exponent == 384
        assert decode("3.2zz").exponent == 306 + 3 * 701

    def test_lowercase_compound_is_infinite_code(self) -> None:
        """Только строчные буквы → бесконечный тир, даже если похоже на Tier 3"""
        result = decode("dqdr")
        assert result.ok
        assert result.exponent > 303

    def test_invalid_format_trailing_digits(self) -> None:
        result = decode("1.5xyz123")
        assert not result.ok
        assert result.exponent is None
        assert result.error == ParseErrorKind.INVALID_FORMAT
        assert result.suffix == ""

    def test_invalid_format_digits_only(self) -> None:
        assert decode("123").error == ParseErrorKind.INVALID_FORMAT
        assert decode("").error == ParseErrorKind.INVALID_FORMAT
        assert decode("   ").error == ParseErrorKind.INVALID_FORMAT

    def test_invalid_format_non_string(self) -> None:
        assert decode(None).error == ParseErrorKind.INVALID_FORMAT  # type: ignore
        assert decode(129).error == ParseErrorKind.INVALID_FORMAT  # type: ignore

    def test_no_match_mixed_case(self) -> None:
        result = decode("Zz")
        assert result.error == ParseErrorKind.NO_MATCH
        assert result.exponent is None
        assert result.suffix == "Zz"

    def test_no_match_unregistered(self) -> None:
        assert decode("D").error == ParseErrorKind.NO_MATCH
        assert decode("xQDR").error == ParseErrorKind.NO_MATCH
        assert decode("UUDc").error == ParseErrorKind.NO_MATCH
        assert decode("K").error == ParseErrorKind.NO_MATCH

    def test_exponent_or_raise(self) -> None:
        assert decode("dQDR").exponent_or_raise() == 132

        with pytest.raises(SuffixParseError, match="NO_MATCH") as exc_info:
            decode("Zz").exponent_or_raise()
        assert exc_info.value.kind == ParseErrorKind.NO_MATCH
        assert exc_info.value.text == "Zz"

        with pytest.raises(SuffixParseError, match="INVALID_FORMAT"):
            decode("42").exponent_or_raise()

    def test_long_input_without_suffix(self) -> None:
        """Длинная строка без буквенного хвоста разбирается за линейное время"""
        assert decode("a" * 100_000 + "1").error == ParseErrorKind.INVALID_FORMAT

    def test_long_letter_run_before_number(self) -> None:
        result = decode("x" * 100_000 + "1.5k")
        assert result.exponent == 3
        assert result.suffix == "k"
        assert result.mantissa is None


# =============================================================================
# ROUND TRIP
# =============================================================================


class TestRoundTrip:
    """Инвариант: decode(encode(e).suffix) == e"""

    def test_shadowed_codes(self) -> None:
        """Однобуквенные коды, совпадающие с Tier 1/2"""
        assert dict(SHADOWED_INFINITE_CODES) == {"d": 315, "k": 336, "q": 354, "s": 360}

    def test_finite_range(self) -> None:
        for exponent in range(3, 304, 3):
            assert decode(encode(exponent).record.suffix).exponent == exponent

    def test_infinite_range(self) -> None:
        shadowed = set(SHADOWED_INFINITE_CODES.values())
        for exponent in range(306, 306 + 3 * 1001, 3):
            result = decode(encode(exponent).record.suffix)
            if exponent in shadowed:
                assert result.alternative_exponent == exponent
                assert result.exponent <= 303
            else:
                assert result.exponent == exponent
                assert result.alternative_exponent is None

    def test_is_round_trip_helper(self) -> None:
        for exponent in range(3, 306 + 3 * 1001, 3):
            assert is_round_trip(exponent)
        assert not is_round_trip(305)

    def test_shadowed_decodes_to_finite(self) -> None:
        result = decode("d")
        assert result.exponent == 33
        assert result.alternative_exponent == 315
        assert decode("k").exponent == 3
