# tests\core\test_use_cases.py
from decimal import Decimal

import pytest

from numwords.adapters.normalizer import DecimalNormalizer
from numwords.core.domain.exceptions import (
    DomainError,
    InvalidInputError,
    LanguageNotFoundError,
    NonFiniteInputError,
    ScaleOverflowError,
)
from numwords.core.domain.grammar import get_profile
from numwords.core.domain.models import ConversionOptions, DecimalSeparatorStyle, Format
from numwords.core.use_cases.convert_number import ConvertNumber


class TestConvertNumber:

    def test_execute_success(self, container, mock_repo, mock_normalizer):
        """
        Scenario: A valid number is normalized and the profile is found.
        Expected: The use case renders it and consults both ports once.
        """
        # Arrange
        container.profile_repository.override(mock_repo)
        container.normalizer.override(mock_normalizer)
        mock_normalizer.normalize.return_value = Decimal(42)
        use_case = container.convert_number_use_case()

        # Act
        result = use_case.execute(42, "en")

        # Assert
        assert result == "forty-two"
        mock_repo.get.assert_called_once_with("en")
        mock_normalizer.normalize.assert_called_once_with(42)

    def test_invalid_input_returns_not_a_number(self, mock_repo, mock_normalizer):
        """
        Scenario: The normalizer rejects the input and no fallback is given.
        Expected: The profile's not-a-number token is returned.
        """
        mock_normalizer.normalize.side_effect = InvalidInputError("abc")
        use_case = ConvertNumber(mock_repo, mock_normalizer)

        assert use_case.execute("abc", "en") == get_profile("en").not_a_number

    def test_invalid_input_returns_fallback(self, mock_repo, mock_normalizer):
        mock_normalizer.normalize.side_effect = InvalidInputError("abc")
        use_case = ConvertNumber(mock_repo, mock_normalizer)

        assert use_case.execute("abc", "en", fallback="n/a") == "n/a"

    def test_default_fallback(self, mock_repo, mock_normalizer):
        """A configured default fallback applies when the caller passes none."""
        mock_normalizer.normalize.side_effect = InvalidInputError(None)
        use_case = ConvertNumber(mock_repo, mock_normalizer, default_fallback="?")

        assert use_case.execute(None, "en") == "?"

    @pytest.mark.parametrize("negative, attr", [(False, "infinity"), (True, "negative_infinity")])
    def test_non_finite_input(self, mock_repo, mock_normalizer, negative, attr):
        mock_normalizer.normalize.side_effect = NonFiniteInputError(negative)
        use_case = ConvertNumber(mock_repo, mock_normalizer)

        assert use_case.execute("inf", "en", fallback="ignored") == getattr(get_profile("en"), attr)

    def test_unknown_language(self, use_case):
        """
        Scenario: The language tag has no registered profile.
        Expected: LanguageNotFoundError propagates to the caller.
        """
        with pytest.raises(LanguageNotFoundError):
            use_case.execute(1, "xx")

    def test_scale_overflow_raises_without_fallback(self, use_case):
        with pytest.raises(ScaleOverflowError):
            use_case.execute(10 ** 60, "en")

    def test_scale_overflow_returns_fallback(self, use_case):
        assert use_case.execute(10 ** 60, "en", fallback="too big") == "too big"

    def test_unexpected_failure_is_wrapped(self, use_case, monkeypatch):
        """
        Scenario: A formatter throws an unexpected exception.
        Expected: The use case logs it and wraps it in a DomainError.
        """
        def _boom(self, magnitude, options):
            raise RuntimeError("formatter crash")

        monkeypatch.setattr("numwords.core.use_cases.convert_number.StandardFormatter.format", _boom)

        with pytest.raises(DomainError) as excinfo:
            use_case.execute(5, "en")

        assert "Unexpected conversion failure" in str(excinfo.value)


class TestConversionProperties:
    """End-to-end properties of the real use case."""

    def test_zero(self, use_case):
        assert use_case.execute(0, "en") == "zero"
        assert use_case.execute("-0", "en") == "zero"

    def test_idempotent(self, use_case):
        first = use_case.execute(987_654_321, "ru")
        assert use_case.execute(987_654_321, "ru") == first

    @pytest.mark.parametrize("value, expected", [
        (999, "nine hundred ninety-nine"),
        (1000, "one thousand"),
        (1001, "one thousand one"),
    ])
    def test_scale_boundaries(self, use_case, value, expected):
        assert use_case.execute(value, "en") == expected

    @pytest.mark.parametrize("value", [
        123456789012345678901234567891,
        "123456789012345678901234567891",
        Decimal("123456789012345678901234567891"),
    ])
    def test_integers_beyond_default_decimal_precision(self, use_case, value):
        """
        Scenario: A 30-digit integer, longer than the 28-digit default Decimal context.
        Expected: Every digit is read, nothing is rounded away.
        """
        text = use_case.execute(value, "en")
        assert text.startswith("one hundred twenty-three octillion")
        assert text.endswith("eight hundred ninety-one")

    def test_largest_supported_value(self, use_case):
        text = use_case.execute(10**51 - 1, "en")
        assert text.startswith("nine hundred ninety-nine quindecillion")
        assert text.endswith("nine hundred ninety-nine")

    def test_negative_large_value(self, use_case):
        assert use_case.execute(-(10**30) - 1, "en") == "minus one nonillion one"

    def test_large_currency_amount(self, use_case):
        assert use_case.execute(10**27, "en", ConversionOptions(currency=True)) == "one octillion dollars"
        text = use_case.execute("1000000000000000000000000000.05", "en", ConversionOptions(currency=True))
        assert text == "one octillion dollars and five cents"

    @pytest.mark.parametrize("gender, one, two", [
        ("masculine", "один", "два"),
        ("feminine", "одна", "две"),
        ("neuter", "одно", "два"),
    ])
    def test_gendered_one_and_two(self, use_case, gender, one, two):
        options = ConversionOptions(gender=gender)
        assert use_case.execute(1, "ru", options) == one
        assert use_case.execute(2, "ru", options) == two

    @pytest.mark.parametrize("value, expected", [
        (1, "один рубль"),
        (2, "два рубля"),
        (4, "четыре рубля"),
        (5, "пять рублей"),
        (11, "одиннадцать рублей"),
        (20, "двадцать рублей"),
        (21, "двадцать один рубль"),
        (22, "двадцать два рубля"),
    ])
    def test_slavic_count_classes(self, use_case, value, expected):
        assert use_case.execute(value, "ru", ConversionOptions(currency=True)) == expected

    def test_currency_zero(self, use_case):
        assert use_case.execute(0, "en", ConversionOptions(currency=True)) == "zero dollars"

    def test_negative_single_space(self, use_case):
        assert use_case.execute(-42, "en") == "minus forty-two"
        options = ConversionOptions(negative_prefix="  negative  ")
        assert use_case.execute(-42, "en", options) == "negative forty-two"

    def test_empty_negative_prefix(self, use_case):
        assert use_case.execute(-7, "en", ConversionOptions(negative_prefix="")) == "seven"

    def test_negative_currency(self, use_case):
        assert use_case.execute("-1.50", "en", ConversionOptions(currency=True)) == "minus one dollar and fifty cents"

    def test_point_style(self, use_case):
        options = ConversionOptions(decimal_separator=DecimalSeparatorStyle.POINT)
        assert use_case.execute(1.50, "en", options) == "one point five"
        assert use_case.execute("1.50", "en", options) == "one point five"

    def test_negative_year(self, use_case):
        options = ConversionOptions(format=Format.YEAR)
        assert use_case.execute(-44, "en", options) == "forty-four BC"

    def test_currency_wins_over_year(self, use_case):
        options = ConversionOptions(currency=True, format=Format.YEAR)
        assert use_case.execute(2, "en", options) == "two dollars"

    def test_round_currency_setting(self, mock_repo):
        use_case = ConvertNumber(mock_repo, DecimalNormalizer(), round_currency=True)
        assert use_case.execute("1.999", "en", ConversionOptions(currency=True)) == "two dollars"
