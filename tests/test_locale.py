import pytest

from edgecache.locales.iso import IsoLang, iso_list
from edgecache.locales.locale import Locale, locales_list, try_locale_from_string
from edgecache.locales.translators import TranslatorsName


def test_try_from_string_known():
    assert try_locale_from_string("ru_RU") is Locale.RUSSIAN_RUSSIA
    assert try_locale_from_string("ta_LK") is Locale.TAMIL_SRILANKA


@pytest.mark.parametrize("value", ["", "ru", "RU_ru", "xx_XX", "en-GB"])
def test_try_from_string_unknown(value):
    assert try_locale_from_string(value) is None


def test_every_listed_locale_round_trips_through_string():
    for loc in locales_list():
        assert try_locale_from_string(loc.value) is loc


def test_locales_list_order_and_uniqueness():
    listed = locales_list()
    assert listed[0] is Locale.AFAR_ETHIOPIA
    assert listed[-1] is Locale.TAMIL_SRILANKA
    assert listed[11] is Locale.AFAR_ERITREA
    assert len(set(listed)) == len(listed) == len(Locale)


def test_locales_list_returns_fresh_list():
    first = locales_list()
    first.clear()
    assert len(locales_list()) == len(Locale)


@pytest.mark.parametrize(
    "loc, expected",
    [
        (Locale.AFAR_ERITREA, IsoLang.CHINESE),
        (Locale.SERBIAN_SERBIA_LATIN, IsoLang.SERBIAN_LATIN),
        (Locale.TAMIL_SRILANKA, IsoLang.SINHALA),
        (Locale.ENGLISH_CANADA, IsoLang.ENGLISH),
        (Locale.KURDISH_SORANI, IsoLang.KURDISH),
        (Locale.PERUVIAN_SPANISH, IsoLang.SPANISH),
    ],
)
def test_iso_lang(loc, expected):
    assert loc.iso_lang() is expected


def test_iso_lang_always_known():
    known = set(iso_list())
    for loc in Locale:
        assert loc.iso_lang() in known


def test_iso_locales_map_back_to_their_language():
    for lang in iso_list():
        for loc in lang.locales():
            assert try_locale_from_string(loc.value).iso_lang() is lang


@pytest.mark.parametrize(
    "loc, expected",
    [
        (Locale.AMHARIC_ETHIOPIA, TranslatorsName.AMHARIC),
        (Locale.KURDISH_TURKEY, TranslatorsName.KURMANJI_KURDISH),
        (Locale.KURDISH_ZAZA, TranslatorsName.KURDISH_ZAZA),
        (Locale.KURDISH_BADINI, TranslatorsName.KURDISH_BADINI),
        (Locale.KURDISH_SORANI, TranslatorsName.SORANI_KURDISH),
        (Locale.NEPALI_NEPAL, TranslatorsName.NEPALI),
        (Locale.SINDHI_INDIA, TranslatorsName.NEPALI),
        (Locale.ZULU_SOUTHAFRICA, TranslatorsName.KURDISH_ZAZA),
        (Locale.CHINESE_TAIWAN, TranslatorsName.TRADITIONAL_CHINESE),
    ],
)
def test_translators_name(loc, expected):
    assert loc.translators_name() is expected


@pytest.mark.parametrize(
    "loc",
    [
        Locale.RUSSIAN_RUSSIA,
        Locale.ENGLISH_UNITED_KINGDOM,
        Locale.CHINESE_HONG_KONG,
        Locale.KURDISH_ZAZA,
        Locale.KURDISH_BADINI,
        Locale.TAMIL_SRILANKA,
    ],
)
def test_translators_name_round_trip(loc):
    assert loc.translators_name().locale() is loc


@pytest.mark.parametrize(
    "loc, expected",
    [
        (Locale.RUSSIAN_RUSSIA, "ru"),
        (Locale.ENGLISH_UNITED_KINGDOM, "en"),
        (Locale.KURDISH_BADINI, "am"),
        (Locale.ZULU_SOUTHAFRICA, "zu"),
        (Locale.AFAR_ERITREA, "er"),
        (Locale.SINDHI_INDIA, "sd"),
        (Locale.SPANISH_MEXICO, "mx"),
        (Locale.TAMIL_SRILANKA, "ta"),
    ],
)
def test_language_code(loc, expected):
    assert loc.language_code() == expected


def test_language_codes_are_two_letters():
    for loc in locales_list():
        code = loc.language_code()
        assert len(code.value) == 2
        assert code.value.islower()


def test_locale_is_a_string():
    assert Locale.GERMAN_GERMANY == "de_DE"
    assert Locale("fr_FR") is Locale.FRENCH_FRANCE


def test_unknown_locale_construction_raises():
    with pytest.raises(ValueError):
        Locale("zz_ZZ")