# tests\adapters\test_normalizer.py
from decimal import Decimal

import pytest

from numwords.adapters.normalizer import DecimalNormalizer
from numwords.core.domain.exceptions import InvalidInputError, NonFiniteInputError


@pytest.fixture
def normalizer():
    return DecimalNormalizer()


class TestDecimalNormalizer:
    @pytest.mark.parametrize("value, expected", [
        (42, Decimal(42)),
        (-7, Decimal(-7)),
        (1.5, Decimal("1.5")),
        (0.1, Decimal("0.1")),
        ("  12.50 ", Decimal("12.50")),
        ("-3", Decimal(-3)),
        (Decimal("2.25"), Decimal("2.25")),
    ])
    def test_accepted_inputs(self, normalizer, value, expected):
        assert normalizer.normalize(value) == expected

    def test_float_uses_shortest_repr(self, normalizer):
        """0.1 must not turn into its binary expansion."""
        assert str(normalizer.normalize(0.1)) == "0.1"

    def test_string_keeps_trailing_zeros(self, normalizer):
        assert str(normalizer.normalize("1.50")) == "1.50"

    @pytest.mark.parametrize("value", [None, True, False, "abc", "", "1,5", [], object()])
    def test_rejected_inputs(self, normalizer, value):
        with pytest.raises(InvalidInputError):
            normalizer.normalize(value)

    @pytest.mark.parametrize("value", [float("nan"), "NaN", Decimal("NaN")])
    def test_nan(self, normalizer, value):
        with pytest.raises(InvalidInputError):
            normalizer.normalize(value)

    @pytest.mark.parametrize("value, negative", [
        (float("inf"), False),
        (float("-inf"), True),
        ("Infinity", False),
        (Decimal("-Infinity"), True),
    ])
    def test_infinities(self, normalizer, value, negative):
        with pytest.raises(NonFiniteInputError) as excinfo:
            normalizer.normalize(value)
        assert excinfo.value.negative is negative
