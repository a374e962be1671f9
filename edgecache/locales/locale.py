"""Language and region locale identifiers."""

from __future__ import annotations

from enum import Enum, unique
from typing import TYPE_CHECKING, Dict, List, Optional

from .iso import IsoLang
from .translators import TranslatorsName

if TYPE_CHECKING:
    from .webname import LanguageCode


@unique
class Locale(str, Enum):
    """Locale written as ``<language>_<REGION>``."""

    AFAR_ETHIOPIA = "aa_ET"
    ALBANIAN_ALBANIA = "sq_AL"
    AMHARIC_ETHIOPIA = "am_ET"
    ARABIC_UAE = "ar_AE"
    ARMENIAN_ARMENIA = "hy_AM"
    AZERBAIJANI_AZERBAIJAN = "az_AZ"
    BELARUSIAN_BELARUS = "be_BY"
    BENGALI_BANGLADESH = "bn_BD"
    BOSNIAN_BOSNIA = "bs_BA"
    BULGARIAN_BULGARIA = "bg_BG"
    BURMESE_MYANMAR = "my_MM"
    AFAR_ERITREA = "aa_ER"
    CENTRAL_KHMER = "km_KH"
    CHINESE_CHINA = "zh_CN"
    CHINESE_HONG_KONG = "zh_HK"
    CHINESE_TAIWAN = "zh_TW"
    CROATIAN_CROATIA = "hr_HR"
    CZECH_CZECH_REPUBLIC = "cs_CZ"
    DANISH_DENMARK = "da_DK"
    DUTCH_NETHERLANDS = "nl_NL"
    ENGLISH_CANADA = "en_CA"
    ENGLISH_INDIA = "en_IN"
    ENGLISH_NEW_ZEALAND = "en_NZ"
    ENGLISH_UNITED_KINGDOM = "en_GB"
    ESTONIAN_ESTONIA = "et_EE"
    FINNISH_FINLAND = "fi_FI"
    FRENCH_FRANCE = "fr_FR"
    GEORGIAN_GEORGIA = "ka_GE"
    GERMAN_GERMANY = "de_DE"
    GREEK_GREECE = "el_GR"
    HAITIAN_HAITI = "ht_HT"
    HEBREW_ISRAEL = "he_IL"
    HINDI_INDIA = "hi_IN"
    HUNGARIAN_HUNGARY = "hu_HU"
    ICELANDIC_ICELAND = "is_IS"
    INDONESIAN_INDONESIA = "id_ID"
    ITALIAN_ITALY = "it_IT"
    JAPANESE_JAPAN = "ja_JP"
    KAZAKH_KAZAKHSTAN = "kk_KZ"
    KOREAN_SOUTH_KOREA = "ko_KR"
    KURDISH_TURKEY = "ku_TR"
    KURDISH_ZAZA = "ku_GE"
    KURDISH_BADINI = "ku_IQ"
    KURDISH_SORANI = "ku_IR"
    KYRGYZ = "ky_KG"
    LAO = "lo_LA"
    LATVIAN_LATVIA = "lv_LV"
    LINGALA_CONGO = "ln_CD"
    LITHUANIAN_LITHUANIA = "lt_LT"
    MACEDONIAN_MACEDONIA = "mk_MK"
    MALAY_MALAYSIA = "ms_MY"
    MONGOLIAN_MONGOLIA = "mn_MN"
    NEPALI_NEPAL = "ne_NP"
    NORWEGIAN_BOKMAL_NORWAY = "nb_NO"
    PERSIAN_IRAN = "fa_IR"
    PERUVIAN_SPANISH = "es_PE"
    POLISH_POLAND = "pl_PL"
    PORTUGUESE_BRAZIL = "pt_BR"
    PORTUGUESE_PORTUGAL = "pt_PT"
    ROMANIAN_ROMANIA = "ro_RO"
    RUSSIAN_RUSSIA = "ru_RU"
    SERBIAN_SERBIA = "sr_RS"
    SERBIAN_SERBIA_LATIN = "sr_SP"
    SINDHI_INDIA = "sd_IN"
    SINHALA_SRILANKA = "si_LK"
    SLOVAK_SLOVAKIA = "sk_SK"
    SLOVENIAN_SLOVENIA = "sl_SI"
    SOMALI_SOMALIA = "so_SO"
    SPANISH_MEXICO = "es_MX"
    SPANISH_SPAIN = "es_ES"
    SWAHILI_KENYA = "sw_KE"
    SWEDISH_SWEDEN = "sv_SE"
    TAGALOG_PHILIPPINES = "tl_PH"
    TAJIK_TAJIKISTAN = "tg_TJ"
    THAI_THAILAND = "th_TH"
    TELUGU = "te_TE"
    TURKISH_TURKEY = "tr_TR"
    UKRAINIAN_UKRAINE = "uk_UA"
    URDU_PAKISTAN = "ur_PK"
    UZBEK_UZBEKISTAN = "uz_UZ"
    VIETNAMESE_VIETNAM = "vi_VN"
    ZULU_SOUTHAFRICA = "zu_ZA"
    TAMIL_SRILANKA = "ta_LK"

    @property
    def _language_part(self) -> str:
        return self.value.split("_", 1)[0]

    def language_code(self) -> "LanguageCode":
        """The short web language code used for this locale."""
        from .webname import LanguageCode

        return LanguageCode(_LANGUAGE_CODES[self.value])

    def iso_lang(self) -> IsoLang:
        """The ISO language of this locale."""
        override = _ISO_OVERRIDES.get(self.value)
        if override is not None:
            return override
        return IsoLang(self._language_part)

    def translators_name(self) -> TranslatorsName:
        """The name translation services use for this locale."""
        return TranslatorsName(_TRANSLATOR_OVERRIDES.get(self.value, self.value))


_LANGUAGE_CODES: Dict[str, str] = {
    "aa_ER": "er",
    "aa_ET": "aa",
    "sq_AL": "al",
    "am_ET": "aa",
    "ar_AE": "ar",
    "hy_AM": "hy",
    "az_AZ": "az",
    "be_BY": "by",
    "bn_BD": "bn",
    "bs_BA": "bs",
    "bg_BG": "bg",
    "my_MM": "my",
    "km_KH": "km",
    "zh_CN": "cn",
    "zh_HK": "hk",
    "zh_TW": "tw",
    "hr_HR": "hr",
    "cs_CZ": "cs",
    "da_DK": "da",
    "nl_NL": "nl",
    "en_CA": "ca",
    "en_IN": "in",
    "en_NZ": "nz",
    "en_GB": "en",
    "et_EE": "et",
    "fi_FI": "fi",
    "fr_FR": "fr",
    "ka_GE": "ka",
    "de_DE": "de",
    "el_GR": "el",
    "ht_HT": "ht",
    "he_IL": "he",
    "hi_IN": "hi",
    "hu_HU": "hu",
    "is_IS": "is",
    "id_ID": "id",
    "it_IT": "it",
    "ja_JP": "ja",
    "kk_KZ": "kz",
    "ko_KR": "ko",
    "ku_TR": "ne",
    "ku_GE": "zu",
    "ku_IQ": "am",
    "ku_IR": "ku",
    "ky_KG": "ky",
    "lo_LA": "lo",
    "lv_LV": "lv",
    "ln_CD": "ln",
    "lt_LT": "lt",
    "mk_MK": "mk",
    "ms_MY": "ms",
    "mn_MN": "mn",
    "ne_NP": "sd",
    "nb_NO": "nb",
    "fa_IR": "fa",
    "es_PE": "pe",
    "pl_PL": "pl",
    "pt_BR": "br",
    "pt_PT": "pt",
    "ro_RO": "ro",
    "ru_RU": "ru",
    "sr_RS": "sr",
    "sr_SP": "sp",
    "sd_IN": "sd",
    "si_LK": "si",
    "sk_SK": "sk",
    "sl_SI": "sl",
    "so_SO": "so",
    "es_MX": "mx",
    "es_ES": "es",
    "sw_KE": "sw",
    "sv_SE": "sv",
    "tl_PH": "tl",
    "tg_TJ": "tj",
    "th_TH": "th",
    "te_TE": "te",
    "tr_TR": "tr",
    "uk_UA": "ua",
    "ur_PK": "ur",
    "uz_UZ": "uz",
    "vi_VN": "vi",
    "zu_ZA": "zu",
    "ta_LK": "ta",
}

# Locales whose ISO language is not simply their language part.
_ISO_OVERRIDES: Dict[str, IsoLang] = {
    "aa_ER": IsoLang.CHINESE,
    "sr_SP": IsoLang.SERBIAN_LATIN,
    "ta_LK": IsoLang.SINHALA,
}

# Locales whose translator name differs from the locale itself.
_TRANSLATOR_OVERRIDES: Dict[str, str] = {
    "am_ET": "aa_ET",
    "ku_TR": "ne_NP",
    "ku_GE": "zu_ZA",
    "ku_IQ": "am_ET",
    "ku_IR": "ku_TR",
    "ne_NP": "sd_IN",
}


def try_locale_from_string(value: str) -> Optional[Locale]:
    """Return the locale for ``value``, or None if it is not a known locale."""
    try:
        return Locale(value)
    except ValueError:
        return None


def locales_list() -> List[Locale]:
    """All known locales in declaration order."""
    return list(Locale)