# tests\integration\test_languages.py
"""
End-to-end samples through the public API for every shipped language.
"""
import pytest

import numwords
from numwords import ConversionOptions, DecimalSeparatorStyle, Format, Lang, NumberConverter

CURRENCY = ConversionOptions(currency=True)
YEAR = ConversionOptions(format=Format.YEAR)


@pytest.mark.parametrize("lang, value, expected", [
    ("en", 0, "zero"),
    ("en", 42, "forty-two"),
    ("en", 1001, "one thousand one"),
    ("en-GB", 101, "one hundred and one"),
    ("en-GB", 1001, "one thousand and one"),
    ("de", 21, "einundzwanzig"),
    ("de", 2024, "zweitausendvierundzwanzig"),
    ("de", 1_000_000, "eine Million"),
    ("ru", 1000, "одна тысяча"),
    ("ru", 21_000, "двадцать одна тысяча"),
    ("pl", 1000, "jeden tysiąc"),
    ("bg", 1001, "хиляда и едно"),
    ("bg", 105, "сто и пет"),
    ("fr", 21, "vingt et un"),
    ("fr", 80, "quatre-vingts"),
    ("fr", 200_000, "deux cent mille"),
    ("es", 100, "cien"),
    ("es", 1_000_000_000, "mil millones"),
    ("ko", 12_345, "만이천삼백사십오"),
    ("zu", 2000, "izinkulungwane ezimbili"),
    ("zu", 101_001, "izinkulungwane eziyikhulu nanye nanye"),
])
def test_cardinals(lang, value, expected):
    assert numwords.convert(value, lang) == expected


@pytest.mark.parametrize("lang, value, expected", [
    ("en", 0, "zero dollars"),
    ("en", 1.5, "one dollar and fifty cents"),
    ("ru", 0, "ноль рублей"),
    ("pl", 21, "dwadzieścia jeden złotych"),
    ("bg", 0, "нула лева"),
    ("de", 1, "ein Euro"),
    ("de", 0, "null Euro"),
    ("fr", 0, "zéro euro"),
    ("fr", 10_000_000, "dix millions d'euros"),
    ("es", 1001, "mil un euros"),
    ("ko", 1, "일 원"),
    ("zu", 2, "amaRandi amabili"),
])
def test_currency(lang, value, expected):
    assert numwords.convert(value, lang, CURRENCY) == expected


@pytest.mark.parametrize("lang, value, expected", [
    ("en", 1984, "nineteen eighty-four"),
    ("en", 1905, "nineteen hundred five"),
    ("en", 2024, "twenty twenty-four"),
    ("de", 1984, "neunzehnhundertvierundachtzig"),
    ("ko", -100, "기원전 백"),
])
def test_years(lang, value, expected):
    assert numwords.convert(value, lang, YEAR) == expected


def test_korean_fraction():
    assert numwords.convert(0.5, Lang.KO) == "영 점 오"


def test_korean_negative():
    assert numwords.convert(-1, Lang.KO) == "마이너스 일"


def test_invalid_input_fallback():
    assert numwords.convert("twelve", "en", fallback="n/a") == "n/a"
    assert numwords.convert("twelve", "ru") == "Не число"


def test_infinity():
    assert numwords.convert(float("-inf"), "de") == "Negativ Unendlich"


class TestNumberConverter:
    def test_bound_language(self):
        converter = NumberConverter(Lang.RU)
        assert converter(2, ConversionOptions(gender="feminine")) == "две"
        assert converter.convert(5, CURRENCY) == "пять рублей"

    def test_instance_fallback(self):
        converter = NumberConverter(Lang.EN, fallback="?")
        assert converter.convert(None) == "?"
        assert converter.convert(None, fallback="!") == "!"

    def test_set_lang(self):
        converter = NumberConverter(Lang.EN)
        converter.set_lang(Lang.FR)
        assert converter(1) == "un"

    def test_set_lang_by_code(self):
        converter = NumberConverter(Lang.EN)
        assert converter.set_lang_by_code("es") is True
        assert converter.lang == Lang.ES

    def test_set_lang_by_code_unknown(self):
        converter = NumberConverter(Lang.EN)
        with pytest.raises(numwords.LanguageNotFoundError):
            converter.set_lang_by_code("xx")

    def test_set_lang_by_code_fallback(self):
        converter = NumberConverter(Lang.RU)
        assert converter.set_lang_by_code("xx", fallback_to_default=True, default=Lang.DE) is False
        assert converter.lang == Lang.DE

    def test_set_lang_by_code_safe(self):
        """Unknown codes leave the current language untouched."""
        converter = NumberConverter(Lang.BG)
        assert converter.set_lang_by_code_safe("xx") is False
        assert converter.lang == Lang.BG

    def test_available_languages(self):
        assert "zu" in NumberConverter.available_languages()

    def test_point_style_option(self):
        options = ConversionOptions(decimal_separator=DecimalSeparatorStyle.POINT)
        assert NumberConverter(Lang.EN)(1.50, options) == "one point five"


def test_british_and_is_selected_by_language():
    assert numwords.convert(101, Lang.EN) == "one hundred one"
    assert numwords.convert(101, Lang.EN_GB) == "one hundred and one"
    assert NumberConverter(Lang.EN_GB)(1001) == "one thousand and one"
