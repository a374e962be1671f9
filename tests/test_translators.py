import pytest

from edgecache.locales.translators import (
    TranslatorsName,
    translators_list,
    try_translators_name_from_string,
)

_UNLISTED = {
    TranslatorsName.TAJIK_TAJIKISTAN,
    TranslatorsName.UZBEK_LATIN,
    TranslatorsName.UZBEK_LATIN_UZBEKISTAN,
}


@pytest.mark.parametrize(
    "name, expected",
    [
        (TranslatorsName.CANTONESE, "aa_ER"),
        (TranslatorsName.AMHARIC, "am_ET"),
        (TranslatorsName.KURDISH_BADINI, "ku_IQ"),
        (TranslatorsName.SORANI_KURDISH, "ku_IR"),
        (TranslatorsName.KURMANJI_KURDISH, "ku_TR"),
        (TranslatorsName.NEPALI, "ne_NP"),
        (TranslatorsName.KURDISH_ZAZA, "ku_GE"),
        (TranslatorsName.TAJIK_TAJIKISTAN, "tg_TJ"),
        (TranslatorsName.UZBEK_LATIN, "uz_UZ"),
        (TranslatorsName.UZBEK_LATIN_UZBEKISTAN, "uz_UZ"),
        (TranslatorsName.TAMIL_SRI_LANKA, "ta_LK"),
        (TranslatorsName.ENGLISH, "en_GB"),
    ],
)
def test_locale_mapping(name, expected):
    assert name.locale().value == expected


@pytest.mark.parametrize("value", [name.value for name in TranslatorsName])
def test_every_name_has_a_locale(value):
    assert TranslatorsName(value).locale().value.count("_") == 1


def test_try_from_string_known():
    assert try_translators_name_from_string("ru_RU") is TranslatorsName.RUSSIAN
    assert try_translators_name_from_string("aa_ER") is TranslatorsName.CANTONESE


@pytest.mark.parametrize("value", ["tj_TJ", "uz_Latn", "uz_Latn_UZ", "", "xx_XX", "RU_ru"])
def test_try_from_string_rejected(value):
    assert try_translators_name_from_string(value) is None


def test_list_round_trips_through_string():
    for name in translators_list():
        assert try_translators_name_from_string(name.value) is name


def test_list_excludes_only_unlisted_names():
    listed = translators_list()
    assert len(listed) == len(set(listed))
    assert set(listed) == set(TranslatorsName) - _UNLISTED


def test_list_order_starts_with_source_order():
    listed = translators_list()
    assert listed[0] is TranslatorsName.CANTONESE
    assert listed[-1] is TranslatorsName.TAMIL_SRI_LANKA


def test_list_is_a_fresh_copy():
    first = translators_list()
    first.clear()
    assert translators_list()[0] is TranslatorsName.CANTONESE


def test_values_are_strings():
    assert TranslatorsName.PORTUGUESE_BRAZIL == "pt_BR"
    assert TranslatorsName("uz_Latn") is TranslatorsName.UZBEK_LATIN