import pytest

from edgecache.locales.country import Country, countries_list
from edgecache.locales.iso import IsoLang, iso_list
from edgecache.locales.locale import Locale, locales_list
from edgecache.locales.webname import (
    LanguageCode,
    language_code_list,
    try_language_code_from_string,
)

_ALL_VALUES = [code.value for code in LanguageCode]


@pytest.mark.parametrize(
    "code, country",
    [
        ("aa", "et"),
        ("iq", "ae"),
        ("us", "gb"),
        ("zu", "tr"),
        ("ln", "cd"),
        ("ta", "lk"),
        ("er", "cn"),
        ("te", "in"),
    ],
)
def test_country_mapping(code, country):
    assert LanguageCode(code).country() == Country(country)


@pytest.mark.parametrize(
    "code, iso",
    [
        ("am", "ku"),
        ("au", "en"),
        ("ir", "fa"),
        ("km", "km"),
        ("ta", "si"),
        ("sp", "sp"),
        ("hk", "zh"),
    ],
)
def test_iso_lang_mapping(code, iso):
    assert LanguageCode(code).iso_lang() == IsoLang(iso)


@pytest.mark.parametrize(
    "code, locale",
    [
        ("aa", "am_ET"),
        ("am", "ku_IQ"),
        ("gb", "en_GB"),
        ("sd", "ne_NP"),
        ("er", "aa_ER"),
        ("zh", "zh_CN"),
        ("pe", "es_PE"),
    ],
)
def test_locale_mapping(code, locale):
    assert LanguageCode(code).locale() == Locale(locale)


@pytest.mark.parametrize("value", _ALL_VALUES)
def test_every_code_has_all_mappings(value):
    code = LanguageCode(value)
    assert code.country() in countries_list()
    assert code.iso_lang() in iso_list()
    assert code.locale() in locales_list()


@pytest.mark.parametrize("value", _ALL_VALUES)
def test_iso_lang_agrees_with_locale(value):
    code = LanguageCode(value)
    assert code.iso_lang() == code.locale().iso_lang()


@pytest.mark.parametrize("value", [code.value for code in language_code_list()])
def test_listed_codes_round_trip_through_locale(value):
    code = LanguageCode(value)
    assert code.locale().language_code() == code


@pytest.mark.parametrize("code", language_code_list())
def test_listed_codes_parse(code):
    assert try_language_code_from_string(code.value) is code


@pytest.mark.parametrize("value", ["au", "gb", "iq", "us", "ir", "kr", "zh", "tg", "uk", "sq"])
def test_alias_codes_are_not_accepted(value):
    assert try_language_code_from_string(value) is None
    assert LanguageCode(value).value == value


@pytest.mark.parametrize("value", ["", "xx", "EN", "en_GB"])
def test_unknown_strings_rejected(value):
    assert try_language_code_from_string(value) is None


def test_list_has_no_duplicates_and_order():
    codes = language_code_list()
    assert len(codes) == len(set(codes))
    assert codes[0] is LanguageCode.AMHARIC
    assert codes[-1] is LanguageCode.CANTONESE


def test_list_is_a_fresh_copy():
    first = language_code_list()
    first.clear()
    assert language_code_list()


def test_code_compares_as_string():
    assert LanguageCode.ENGLISH == "en"
    assert LanguageCode("ua") is LanguageCode.UKRAINIAN


def test_invalid_code_raises():
    with pytest.raises(ValueError):
        LanguageCode("qq")