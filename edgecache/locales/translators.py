"""Locale names used by translation services."""

from __future__ import annotations

from enum import Enum, unique
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Optional, Tuple

if TYPE_CHECKING:
    from .locale import Locale


@unique
class TranslatorsName(str, Enum):
    """Locale identifier as understood by translation services."""

    ALBANIAN = "sq_AL"
    AMHARIC = "aa_ET"
    ARABIC_UAE = "ar_AE"
    ARMENIAN = "hy_AM"
    AZERBAIJANI = "az_AZ"
    BELARUSIAN = "be_BY"
    BENGALI = "bn_BD"
    BOSNIAN = "bs_BA"
    BULGARIAN = "bg_BG"
    BURMESE = "my_MM"
    CANADIAN_ENGLISH = "en_CA"
    CANTONESE = "aa_ER"
    CANTONESE_KATON = "zh_HK"
    CHINESE = "zh_CN"
    CROATIAN = "hr_HR"
    CZECH_CZECHIA = "cs_CZ"
    DANISH = "da_DK"
    DUTCH = "nl_NL"
    ENGLISH = "en_GB"
    ESTONIAN = "et_EE"
    FINNISH = "fi_FI"
    FRENCH = "fr_FR"
    GEORGIAN_GEORGIA = "ka_GE"
    GERMAN = "de_DE"
    GREEK = "el_GR"
    HAITIAN_CREOLE = "ht_HT"
    HEBREW = "he_IL"
    HINDI = "hi_IN"
    HUNGARIAN = "hu_HU"
    ICELANDIC = "is_IS"
    INDIAN_ENGLISH = "en_IN"
    INDONESIAN = "id_ID"
    ITALIAN = "it_IT"
    JAPANESE = "ja_JP"
    KAZAKH = "kk_KZ"
    KHMER = "km_KH"
    KOREAN = "ko_KR"
    KURDISH_ZAZA = "zu_ZA"
    KURDISH_BADINI = "am_ET"
    KURMANJI_KURDISH = "ne_NP"
    KYRGYZ = "ky_KG"
    LAO = "lo_LA"
    LATVIAN = "lv_LV"
    LINGALA = "ln_CD"
    LITHUANIAN = "lt_LT"
    MACEDONIAN = "mk_MK"
    MALAY = "ms_MY"
    MEXICAN_SPANISH = "es_MX"
    MONGOLIAN = "mn_MN"
    NEPALI = "sd_IN"
    NEW_ZEALAND_ENGLISH = "en_NZ"
    NORWEGIAN = "nb_NO"
    PERSIAN_IRAN = "fa_IR"
    PERUVIAN_SPANISH = "es_PE"
    POLISH = "pl_PL"
    PORTUGUESE = "pt_PT"
    PORTUGUESE_BRAZIL = "pt_BR"
    ROMANIAN = "ro_RO"
    RUSSIAN = "ru_RU"
    SERBIAN_SERBIA = "sr_RS"
    SERBIAN_SERBIA_LATIN = "sr_SP"
    SINHALA = "si_LK"
    SLOVAK = "sk_SK"
    SLOVENIAN = "sl_SI"
    SOMALI = "so_SO"
    SORANI_KURDISH = "ku_TR"
    SPANISH = "es_ES"
    SWAHILI = "sw_KE"
    SWEDISH_SWEDEN = "sv_SE"
    TAGALOG = "tl_PH"
    TAJIK = "tg_TJ"
    TAJIK_TAJIKISTAN = "tj_TJ"
    TAMIL_SRI_LANKA = "ta_LK"
    THAI = "th_TH"
    TELUGU = "te_TE"
    TRADITIONAL_CHINESE = "zh_TW"
    TURKISH = "tr_TR"
    UKRAINIAN = "uk_UA"
    URDU = "ur_PK"
    UZBEK = "uz_UZ"
    UZBEK_LATIN = "uz_Latn"
    UZBEK_LATIN_UZBEKISTAN = "uz_Latn_UZ"
    VIETNAMESE = "vi_VN"

    def locale(self) -> "Locale":
        """The locale this translator name corresponds to."""
        from .locale import Locale

        return Locale(_LOCALES[self])


_LOCALES: Dict[TranslatorsName, str] = {
    TranslatorsName.CANTONESE: "aa_ER",
    TranslatorsName.AMHARIC: "am_ET",
    TranslatorsName.ALBANIAN: "sq_AL",
    TranslatorsName.KURDISH_BADINI: "ku_IQ",
    TranslatorsName.ARABIC_UAE: "ar_AE",
    TranslatorsName.ARMENIAN: "hy_AM",
    TranslatorsName.AZERBAIJANI: "az_AZ",
    TranslatorsName.BELARUSIAN: "be_BY",
    TranslatorsName.BENGALI: "bn_BD",
    TranslatorsName.BOSNIAN: "bs_BA",
    TranslatorsName.BULGARIAN: "bg_BG",
    TranslatorsName.BURMESE: "my_MM",
    TranslatorsName.KHMER: "km_KH",
    TranslatorsName.CHINESE: "zh_CN",
    TranslatorsName.CANTONESE_KATON: "zh_HK",
    TranslatorsName.TRADITIONAL_CHINESE: "zh_TW",
    TranslatorsName.CROATIAN: "hr_HR",
    TranslatorsName.CZECH_CZECHIA: "cs_CZ",
    TranslatorsName.DANISH: "da_DK",
    TranslatorsName.DUTCH: "nl_NL",
    TranslatorsName.CANADIAN_ENGLISH: "en_CA",
    TranslatorsName.INDIAN_ENGLISH: "en_IN",
    TranslatorsName.NEW_ZEALAND_ENGLISH: "en_NZ",
    TranslatorsName.ENGLISH: "en_GB",
    TranslatorsName.ESTONIAN: "et_EE",
    TranslatorsName.FINNISH: "fi_FI",
    TranslatorsName.FRENCH: "fr_FR",
    TranslatorsName.GEORGIAN_GEORGIA: "ka_GE",
    TranslatorsName.GERMAN: "de_DE",
    TranslatorsName.GREEK: "el_GR",
    TranslatorsName.HAITIAN_CREOLE: "ht_HT",
    TranslatorsName.HEBREW: "he_IL",
    TranslatorsName.HINDI: "hi_IN",
    TranslatorsName.HUNGARIAN: "hu_HU",
    TranslatorsName.ICELANDIC: "is_IS",
    TranslatorsName.INDONESIAN: "id_ID",
    TranslatorsName.ITALIAN: "it_IT",
    TranslatorsName.JAPANESE: "ja_JP",
    TranslatorsName.KAZAKH: "kk_KZ",
    TranslatorsName.KOREAN: "ko_KR",
    TranslatorsName.SORANI_KURDISH: "ku_IR",
    TranslatorsName.KYRGYZ: "ky_KG",
    TranslatorsName.LAO: "lo_LA",
    TranslatorsName.LATVIAN: "lv_LV",
    TranslatorsName.LINGALA: "ln_CD",
    TranslatorsName.LITHUANIAN: "lt_LT",
    TranslatorsName.MACEDONIAN: "mk_MK",
    TranslatorsName.MALAY: "ms_MY",
    TranslatorsName.MONGOLIAN: "mn_MN",
    TranslatorsName.KURMANJI_KURDISH: "ku_TR",
    TranslatorsName.NORWEGIAN: "nb_NO",
    TranslatorsName.PERSIAN_IRAN: "fa_IR",
    TranslatorsName.PERUVIAN_SPANISH: "es_PE",
    TranslatorsName.POLISH: "pl_PL",
    TranslatorsName.PORTUGUESE_BRAZIL: "pt_BR",
    TranslatorsName.PORTUGUESE: "pt_PT",
    TranslatorsName.ROMANIAN: "ro_RO",
    TranslatorsName.RUSSIAN: "ru_RU",
    TranslatorsName.SERBIAN_SERBIA: "sr_RS",
    TranslatorsName.SERBIAN_SERBIA_LATIN: "sr_SP",
    TranslatorsName.NEPALI: "ne_NP",
    TranslatorsName.SINHALA: "si_LK",
    TranslatorsName.SLOVAK: "sk_SK",
    TranslatorsName.SLOVENIAN: "sl_SI",
    TranslatorsName.SOMALI: "so_SO",
    TranslatorsName.MEXICAN_SPANISH: "es_MX",
    TranslatorsName.SPANISH: "es_ES",
    TranslatorsName.SWAHILI: "sw_KE",
    TranslatorsName.SWEDISH_SWEDEN: "sv_SE",
    TranslatorsName.TAGALOG: "tl_PH",
    TranslatorsName.TAJIK: "tg_TJ",
    TranslatorsName.THAI: "th_TH",
    TranslatorsName.TELUGU: "te_TE",
    TranslatorsName.TURKISH: "tr_TR",
    TranslatorsName.UKRAINIAN: "uk_UA",
    TranslatorsName.URDU: "ur_PK",
    TranslatorsName.UZBEK: "uz_UZ",
    TranslatorsName.VIETNAMESE: "vi_VN",
    TranslatorsName.KURDISH_ZAZA: "ku_GE",
    TranslatorsName.TAJIK_TAJIKISTAN: "tg_TJ",
    TranslatorsName.TAMIL_SRI_LANKA: "ta_LK",
    TranslatorsName.UZBEK_LATIN: "uz_UZ",
    TranslatorsName.UZBEK_LATIN_UZBEKISTAN: "uz_UZ",
}

_T = TranslatorsName
_LISTED: Tuple[TranslatorsName, ...] = (
    _T.CANTONESE, _T.AMHARIC, _T.ALBANIAN, _T.ARABIC_UAE,
    _T.ARMENIAN, _T.AZERBAIJANI, _T.BELARUSIAN, _T.BENGALI,
    _T.BOSNIAN, _T.BULGARIAN, _T.BURMESE, _T.KHMER,
    _T.CHINESE, _T.CANTONESE_KATON, _T.TRADITIONAL_CHINESE,
    _T.CROATIAN, _T.CZECH_CZECHIA, _T.DANISH, _T.DUTCH,
    _T.CANADIAN_ENGLISH, _T.INDIAN_ENGLISH, _T.NEW_ZEALAND_ENGLISH,
    _T.ENGLISH, _T.ESTONIAN, _T.FINNISH, _T.FRENCH,
    _T.GEORGIAN_GEORGIA, _T.GERMAN, _T.GREEK,
    _T.HAITIAN_CREOLE, _T.HEBREW, _T.HINDI, _T.HUNGARIAN,
    _T.ICELANDIC, _T.INDONESIAN, _T.ITALIAN, _T.JAPANESE,
    _T.KAZAKH, _T.KOREAN, _T.KURMANJI_KURDISH,
    _T.KURDISH_ZAZA, _T.KURDISH_BADINI, _T.SORANI_KURDISH,
    _T.KYRGYZ, _T.LAO, _T.LATVIAN, _T.LINGALA,
    _T.LITHUANIAN, _T.MACEDONIAN, _T.MALAY, _T.MONGOLIAN,
    _T.NEPALI, _T.NORWEGIAN, _T.PERSIAN_IRAN,
    _T.PERUVIAN_SPANISH, _T.POLISH, _T.PORTUGUESE_BRAZIL,
    _T.PORTUGUESE, _T.ROMANIAN, _T.RUSSIAN,
    _T.SERBIAN_SERBIA, _T.SERBIAN_SERBIA_LATIN, _T.SINHALA,
    _T.SLOVAK, _T.SLOVENIAN, _T.SOMALI,
    _T.MEXICAN_SPANISH, _T.SPANISH, _T.SWAHILI,
    _T.SWEDISH_SWEDEN, _T.TAGALOG, _T.TAJIK, _T.THAI,
    _T.TELUGU, _T.TURKISH, _T.UKRAINIAN, _T.URDU,
    _T.UZBEK, _T.VIETNAMESE, _T.TAMIL_SRI_LANKA,
)
del _T

_ACCEPTED: FrozenSet[str] = frozenset(name.value for name in _LISTED)


def try_translators_name_from_string(value: str) -> Optional[TranslatorsName]:
    """Return the translator name for ``value``, or None if it is not accepted."""
    if value not in _ACCEPTED:
        return None
    return TranslatorsName(value)


def translators_list() -> List[TranslatorsName]:
    """All translator names accepted from strings."""
    return list(_LISTED)