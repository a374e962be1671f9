import pytest

from edgecache.locales.iso import IsoLang, iso_list, try_iso_lang_from_string


@pytest.mark.parametrize(
    "code, expected",
    [("en", IsoLang.ENGLISH), ("ru", IsoLang.RUSSIAN), ("sp", IsoLang.SERBIAN_LATIN), ("km", IsoLang.CAMBODIA)],
)
def test_known_codes(code, expected):
    assert try_iso_lang_from_string(code) is expected


@pytest.mark.parametrize("code", ["xx", "EN", "", "en_GB"])
def test_unknown_codes(code):
    assert try_iso_lang_from_string(code) is None


def test_every_language_round_trips_through_its_code():
    for lang in IsoLang:
        assert try_iso_lang_from_string(lang.value) is lang


def test_iso_list_holds_every_language_once():
    langs = iso_list()
    assert len(langs) == len(set(langs))
    assert set(langs) == set(IsoLang)


def test_iso_list_order_follows_source():
    langs = iso_list()
    assert langs[0] is IsoLang.AFAR
    assert langs[-1] is IsoLang.ZULU
    assert langs.index(IsoLang.SPANISH) < langs.index(IsoLang.POLISH)


def test_iso_list_is_a_fresh_copy():
    langs = iso_list()
    langs.clear()
    assert iso_list()[0] is IsoLang.AFAR


def test_english_locales():
    assert [loc.value for loc in IsoLang.ENGLISH.locales()] == ["en_GB", "en_CA", "en_IN", "en_NZ"]


def test_chinese_locales():
    assert [loc.value for loc in IsoLang.CHINESE.locales()] == ["zh_CN", "zh_HK", "zh_TW"]


def test_uzbek_locale_is_listed_twice():
    assert [loc.value for loc in IsoLang.UZBEK.locales()] == ["uz_UZ", "uz_UZ"]


def test_every_language_has_a_locale_starting_with_a_language_prefix():
    for lang in iso_list():
        locales = IsoLang(lang.value).locales()
        assert locales
        assert all("_" in loc.value for loc in locales)


def test_kurdish_maps_to_turkey():
    assert [loc.value for loc in IsoLang.KURDISH.locales()] == ["ku_TR"]