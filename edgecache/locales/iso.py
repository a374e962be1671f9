"""ISO 639-1 language codes."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from .locale import Locale


class IsoLang(str, Enum):
    """Two-letter ISO language code."""

    AFAR = "aa"
    ALBANIAN = "sq"
    AMHARIC = "am"
    ARABIC = "ar"
    ARMENIAN = "hy"
    AZERBAIJANI = "az"
    BELARUSIAN = "be"
    BENGALI = "bn"
    BOSNIAN = "bs"
    BULGARIAN = "bg"
    BURMESE = "my"
    CHINESE = "zh"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ESTONIAN = "et"
    FINNISH = "fi"
    FRENCH = "fr"
    GEORGIAN = "ka"
    GERMAN = "de"
    GREEK = "el"
    HAITIAN = "ht"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KAZAKH = "kk"
    CAMBODIA = "km"
    KOREAN = "ko"
    KURDISH = "ku"
    KYRGYZ = "ky"
    LAO = "lo"
    LATVIAN = "lv"
    LINGALA = "ln"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAY = "ms"
    MONGOLIAN = "mn"
    NEPALI = "ne"
    NORWEGIAN_BOKMAL = "nb"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SERBIAN_LATIN = "sp"
    SINDHI = "sd"
    SINHALA = "si"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SOMALI = "so"
    SPANISH = "es"
    SWAHILI = "sw"
    SWEDISH = "sv"
    TAGALOG = "tl"
    TAJIK = "tg"
    THAI = "th"
    TELUGU = "te"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    UZBEK = "uz"
    VIETNAMESE = "vi"
    ZULU = "zu"

    def locales(self) -> List["Locale"]:
        """Locales that use this language, most common first."""
        from .locale import Locale

        return [Locale(code) for code in _LOCALES[self]]


_LOCALES: Dict[IsoLang, Tuple[str, ...]] = {
    IsoLang.AFAR: ("aa_ET",),
    IsoLang.AMHARIC: ("am_ET",),
    IsoLang.ARABIC: ("ar_AE",),
    IsoLang.AZERBAIJANI: ("az_AZ",),
    IsoLang.BELARUSIAN: ("be_BY",),
    IsoLang.BULGARIAN: ("bg_BG",),
    IsoLang.BENGALI: ("bn_BD",),
    IsoLang.BOSNIAN: ("bs_BA",),
    IsoLang.CZECH: ("cs_CZ",),
    IsoLang.DANISH: ("da_DK",),
    IsoLang.GERMAN: ("de_DE",),
    IsoLang.GREEK: ("el_GR",),
    IsoLang.ENGLISH: ("en_GB", "en_CA", "en_IN", "en_NZ"),
    IsoLang.SPANISH: ("es_ES", "es_MX"),
    IsoLang.ESTONIAN: ("et_EE",),
    IsoLang.PERSIAN: ("fa_IR",),
    IsoLang.FINNISH: ("fi_FI",),
    IsoLang.FRENCH: ("fr_FR",),
    IsoLang.HEBREW: ("he_IL",),
    IsoLang.HINDI: ("hi_IN",),
    IsoLang.CROATIAN: ("hr_HR",),
    IsoLang.HAITIAN: ("ht_HT",),
    IsoLang.HUNGARIAN: ("hu_HU",),
    IsoLang.ARMENIAN: ("hy_AM",),
    IsoLang.INDONESIAN: ("id_ID",),
    IsoLang.ICELANDIC: ("is_IS",),
    IsoLang.ITALIAN: ("it_IT",),
    IsoLang.JAPANESE: ("ja_JP",),
    IsoLang.GEORGIAN: ("ka_GE",),
    IsoLang.KAZAKH: ("kk_KZ",),
    IsoLang.CAMBODIA: ("km_KH",),
    IsoLang.KOREAN: ("ko_KR",),
    IsoLang.KURDISH: ("ku_TR",),
    IsoLang.LINGALA: ("ln_CD",),
    IsoLang.KYRGYZ: ("ky_KG",),
    IsoLang.LAO: ("lo_LA",),
    IsoLang.LITHUANIAN: ("lt_LT",),
    IsoLang.LATVIAN: ("lv_LV",),
    IsoLang.MACEDONIAN: ("mk_MK",),
    IsoLang.MONGOLIAN: ("mn_MN",),
    IsoLang.MALAY: ("ms_MY",),
    IsoLang.BURMESE: ("my_MM",),
    IsoLang.NORWEGIAN_BOKMAL: ("nb_NO",),
    IsoLang.NEPALI: ("ne_NP",),
    IsoLang.DUTCH: ("nl_NL",),
    IsoLang.POLISH: ("pl_PL",),
    IsoLang.PORTUGUESE: ("pt_BR", "pt_PT"),
    IsoLang.ROMANIAN: ("ro_RO",),
    IsoLang.RUSSIAN: ("ru_RU",),
    IsoLang.SINDHI: ("sd_IN",),
    IsoLang.SINHALA: ("si_LK",),
    IsoLang.SLOVAK: ("sk_SK",),
    IsoLang.SLOVENIAN: ("sl_SI",),
    IsoLang.SOMALI: ("so_SO",),
    IsoLang.ALBANIAN: ("sq_AL",),
    IsoLang.SERBIAN: ("sr_RS",),
    IsoLang.SERBIAN_LATIN: ("sr_SP",),
    IsoLang.SWEDISH: ("sv_SE",),
    IsoLang.SWAHILI: ("sw_KE",),
    IsoLang.TAJIK: ("tg_TJ",),
    IsoLang.THAI: ("th_TH",),
    IsoLang.TELUGU: ("te_TE",),
    IsoLang.TAGALOG: ("tl_PH",),
    IsoLang.TURKISH: ("tr_TR",),
    IsoLang.UKRAINIAN: ("uk_UA",),
    IsoLang.URDU: ("ur_PK",),
    IsoLang.UZBEK: ("uz_UZ", "uz_UZ"),
    IsoLang.VIETNAMESE: ("vi_VN",),
    IsoLang.CHINESE: ("zh_CN", "zh_HK", "zh_TW"),
    IsoLang.ZULU: ("zu_ZA",),
}

_ISO_ORDER: Tuple[IsoLang, ...] = (
    IsoLang.AFAR, IsoLang.ALBANIAN, IsoLang.AMHARIC, IsoLang.ARABIC, IsoLang.ARMENIAN,
    IsoLang.AZERBAIJANI, IsoLang.BELARUSIAN, IsoLang.BENGALI, IsoLang.BOSNIAN,
    IsoLang.BULGARIAN, IsoLang.BURMESE, IsoLang.CAMBODIA, IsoLang.CHINESE,
    IsoLang.CROATIAN, IsoLang.CZECH, IsoLang.DANISH, IsoLang.DUTCH, IsoLang.ENGLISH,
    IsoLang.ESTONIAN, IsoLang.FINNISH, IsoLang.FRENCH, IsoLang.GEORGIAN, IsoLang.GERMAN,
    IsoLang.GREEK, IsoLang.HAITIAN, IsoLang.HEBREW, IsoLang.HINDI, IsoLang.HUNGARIAN,
    IsoLang.ICELANDIC, IsoLang.INDONESIAN, IsoLang.ITALIAN, IsoLang.JAPANESE,
    IsoLang.KAZAKH, IsoLang.KOREAN, IsoLang.KURDISH, IsoLang.KYRGYZ, IsoLang.LAO,
    IsoLang.LATVIAN, IsoLang.LINGALA, IsoLang.LITHUANIAN, IsoLang.MACEDONIAN,
    IsoLang.MALAY, IsoLang.MONGOLIAN, IsoLang.NEPALI, IsoLang.NORWEGIAN_BOKMAL,
    IsoLang.PERSIAN, IsoLang.SPANISH, IsoLang.POLISH, IsoLang.PORTUGUESE,
    IsoLang.ROMANIAN, IsoLang.RUSSIAN, IsoLang.SERBIAN, IsoLang.SERBIAN_LATIN,
    IsoLang.SINDHI, IsoLang.SINHALA, IsoLang.SLOVAK, IsoLang.SLOVENIAN, IsoLang.SOMALI,
    IsoLang.SWAHILI, IsoLang.SWEDISH, IsoLang.TAGALOG, IsoLang.TAJIK, IsoLang.THAI,
    IsoLang.TELUGU, IsoLang.TURKISH, IsoLang.UKRAINIAN, IsoLang.URDU, IsoLang.UZBEK,
    IsoLang.VIETNAMESE, IsoLang.ZULU,
)


def try_iso_lang_from_string(value: str) -> Optional[IsoLang]:
    """Return the language for ``value``, or None if it is not a known code."""
    try:
        return IsoLang(value)
    except ValueError:
        return None


def iso_list() -> List[IsoLang]:
    """All known languages."""
    return list(_ISO_ORDER)