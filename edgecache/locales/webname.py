"""Short language codes used on the web."""

from __future__ import annotations

from enum import Enum, unique
from typing import Dict, FrozenSet, List, Optional, Tuple

from .country import Country
from .iso import IsoLang
from .locale import Locale


@unique
class LanguageCode(str, Enum):
    """Short language code as used in web addresses and site settings."""

    AMHARIC = "aa"
    ALBANIAN = "al"
    KURDISH = "am"  # Kurdish (Badini)
    ARABIAN = "ar"
    ENGLISH_AUSTRALIA = "au"
    AZERBAIJANIAN = "az"
    BULGARIAN = "bg"
    BENGALI = "bn"
    PORTUGUESE_BRAZIL = "br"
    BOSNIAN = "bs"
    BELARUSIAN = "by"
    CANADIAN = "ca"
    CHINESE = "cn"
    CZECH = "cs"
    DANISH = "da"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    ENGLISH_BRITAIN = "gb"
    SPANISH = "es"
    SPANISH_PERUVIAN = "pe"
    ESTONIAN = "et"
    IRANIAN = "fa"
    FINNISH = "fi"
    FRENCH = "fr"
    HEBREW = "he"
    HINDU = "hi"
    CANTONESE_HONG_KONG = "hk"
    CROATIAN = "hr"
    HAITIAN_CREOLE = "ht"
    HUNGARIAN = "hu"
    ARMENIAN = "hy"
    INDONESIAN = "id"
    INDIAN = "in"
    IRAQI = "iq"
    ICELANDIC = "is"
    ITALIAN = "it"
    JAPANESE = "ja"
    GEORGIAN = "ka"
    KHMER = "km"
    KOREAN = "ko"
    KURDISH_SORANI = "ku"
    KAZAKH = "kz"
    LINGALA = "ln"
    LAO = "lo"
    KYRGYZ = "ky"
    LITHUANIAN = "lt"
    LATVIAN = "lv"
    MACEDONIAN = "mk"
    MONGOLIAN = "mn"
    MALAY = "ms"
    MEXICAN = "mx"
    BURMESE = "my"
    NORWEGIAN = "nb"
    KURDISH_KURMANCI = "ne"
    DUTCH = "nl"
    NEW_ZEALAND = "nz"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    NEPALI = "sd"
    SINHALESE = "si"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SERBIAN = "sr"
    SERBIAN_LATIN = "sp"
    SWEDISH = "sv"
    SWAHILI = "sw"
    THAI = "th"
    TELUGU = "te"
    TAJIK = "tj"
    TAGALOG = "tl"
    TURKISH = "tr"
    CHINESE_TAIWAN = "tw"
    UKRAINIAN = "ua"
    URDU = "ur"
    ENGLISH_USA = "us"
    UZBEK = "uz"
    VIETNAMESE = "vi"
    IRAN = "ir"
    KURDISH_ZAZA = "zu"
    KOREAN_KR = "kr"
    KOREAN_ZH = "zh"
    TAJIK_TG = "tg"
    UKRAINIAN_UK = "uk"
    ALBANIAN_SQ = "sq"
    SOMALI = "so"
    CANTONESE = "er"
    TAMIL = "ta"

    def country(self) -> Country:
        """The country this language code is associated with."""
        return _COUNTRIES[self]

    def iso_lang(self) -> IsoLang:
        """The ISO language behind this code."""
        return _ISO_LANGS[self]

    def locale(self) -> Locale:
        """The locale this code stands for."""
        return _LOCALES[self]


_W = LanguageCode

_COUNTRIES: Dict[LanguageCode, Country] = {
    _W.AMHARIC: Country.ETHIOPIA,
    _W.ARABIAN: Country.UAE,
    _W.IRAQI: Country.UAE,
    _W.AZERBAIJANIAN: Country.AZERBAIJAN,
    _W.BELARUSIAN: Country.BELARUS,
    _W.BULGARIAN: Country.BULGARIA,
    _W.BENGALI: Country.BANGLADESH,
    _W.BOSNIAN: Country.BOSNIA,
    _W.CZECH: Country.CZECH_REPUBLIC,
    _W.DANISH: Country.DENMARK,
    _W.GERMAN: Country.GERMANY,
    _W.GREEK: Country.GREECE,
    _W.CANADIAN: Country.CANADA,
    _W.ENGLISH_BRITAIN: Country.UNITED_KINGDOM,
    _W.ENGLISH_AUSTRALIA: Country.UNITED_KINGDOM,
    _W.ENGLISH: Country.UNITED_KINGDOM,
    _W.ENGLISH_USA: Country.UNITED_KINGDOM,
    _W.INDIAN: Country.INDIA,
    _W.HINDU: Country.INDIA,
    _W.NEPALI: Country.NEPAL,
    _W.NEW_ZEALAND: Country.NEW_ZEALAND,
    _W.SPANISH: Country.SPAIN,
    _W.SPANISH_PERUVIAN: Country.PERU,
    _W.MEXICAN: Country.MEXICO,
    _W.ESTONIAN: Country.ESTONIA,
    _W.IRANIAN: Country.IRAN,
    _W.IRAN: Country.IRAN,
    _W.FINNISH: Country.FINLAND,
    _W.FRENCH: Country.FRANCE,
    _W.HEBREW: Country.ISRAEL,
    _W.CROATIAN: Country.CROATIA,
    _W.HAITIAN_CREOLE: Country.HAITI,
    _W.HUNGARIAN: Country.HUNGARY,
    _W.ARMENIAN: Country.ARMENIA,
    _W.INDONESIAN: Country.INDONESIA,
    _W.ICELANDIC: Country.ICELAND,
    _W.ITALIAN: Country.ITALY,
    _W.JAPANESE: Country.JAPAN,
    _W.GEORGIAN: Country.GEORGIA,
    _W.KAZAKH: Country.KAZAKHSTAN,
    _W.KHMER: Country.CAMBODIA,
    _W.KOREAN: Country.KOREA,
    _W.KOREAN_KR: Country.KOREA,
    _W.KURDISH: Country.TURKEY,
    _W.KURDISH_KURMANCI: Country.TURKEY,
    _W.KURDISH_SORANI: Country.TURKEY,
    _W.KURDISH_ZAZA: Country.TURKEY,
    _W.TURKISH: Country.TURKEY,
    _W.LINGALA: Country.CONGO_KINSHASA,
    _W.KYRGYZ: Country.KYRGYZSTAN,
    _W.LAO: Country.LAOS,
    _W.LITHUANIAN: Country.LITHUANIA,
    _W.LATVIAN: Country.LATVIA,
    _W.MACEDONIAN: Country.MACEDONIA,
    _W.MONGOLIAN: Country.MONGOLIA,
    _W.MALAY: Country.MALAYSIA,
    _W.BURMESE: Country.MYANMAR,
    _W.NORWEGIAN: Country.NORWAY,
    _W.DUTCH: Country.NETHERLANDS,
    _W.POLISH: Country.POLAND,
    _W.PORTUGUESE_BRAZIL: Country.BRAZIL,
    _W.PORTUGUESE: Country.PORTUGAL,
    _W.ROMANIAN: Country.ROMANIA,
    _W.RUSSIAN: Country.RUSSIAN,
    _W.SINHALESE: Country.SRI_LANKA,
    _W.SLOVAK: Country.SLOVAKIA,
    _W.SLOVENIAN: Country.SLOVENIA,
    _W.ALBANIAN: Country.ALBANIA,
    _W.ALBANIAN_SQ: Country.ALBANIA,
    _W.SERBIAN: Country.SERBIA,
    _W.SERBIAN_LATIN: Country.SERBIA,
    _W.SWEDISH: Country.SWEDEN,
    _W.SWAHILI: Country.KENYA,
    _W.TAJIK: Country.TAJIKISTAN,
    _W.TAJIK_TG: Country.TAJIKISTAN,
    _W.TAMIL: Country.SRI_LANKA,
    _W.THAI: Country.THAILAND,
    _W.TELUGU: Country.INDIA,
    _W.TAGALOG: Country.PHILIPPINES,
    _W.UKRAINIAN: Country.UKRAINE,
    _W.UKRAINIAN_UK: Country.UKRAINE,
    _W.URDU: Country.PAKISTAN,
    _W.UZBEK: Country.UZBEKISTAN,
    _W.VIETNAMESE: Country.VIET_NAM,
    _W.CHINESE: Country.CHINA,
    _W.KOREAN_ZH: Country.CHINA,
    _W.CANTONESE: Country.CHINA,
    _W.CANTONESE_HONG_KONG: Country.HONG_KONG,
    _W.CHINESE_TAIWAN: Country.TAIWAN,
    _W.SOMALI: Country.SOMALIA,
}

_ISO_LANGS: Dict[LanguageCode, IsoLang] = {
    _W.AMHARIC: IsoLang.AMHARIC,
    _W.KURDISH: IsoLang.KURDISH,
    _W.ARABIAN: IsoLang.ARABIC,
    _W.IRAQI: IsoLang.ARABIC,
    _W.AZERBAIJANIAN: IsoLang.AZERBAIJANI,
    _W.BELARUSIAN: IsoLang.BELARUSIAN,
    _W.BULGARIAN: IsoLang.BULGARIAN,
    _W.BENGALI: IsoLang.BENGALI,
    _W.BOSNIAN: IsoLang.BOSNIAN,
    _W.CZECH: IsoLang.CZECH,
    _W.DANISH: IsoLang.DANISH,
    _W.GERMAN: IsoLang.GERMAN,
    _W.GREEK: IsoLang.GREEK,
    _W.CANADIAN: IsoLang.ENGLISH,
    _W.NEW_ZEALAND: IsoLang.ENGLISH,
    _W.INDIAN: IsoLang.ENGLISH,
    _W.ENGLISH_USA: IsoLang.ENGLISH,
    _W.ENGLISH: IsoLang.ENGLISH,
    _W.ENGLISH_AUSTRALIA: IsoLang.ENGLISH,
    _W.ENGLISH_BRITAIN: IsoLang.ENGLISH,
    _W.SPANISH: IsoLang.SPANISH,
    _W.MEXICAN: IsoLang.SPANISH,
    _W.SPANISH_PERUVIAN: IsoLang.SPANISH,
    _W.ESTONIAN: IsoLang.ESTONIAN,
    _W.IRANIAN: IsoLang.PERSIAN,
    _W.IRAN: IsoLang.PERSIAN,
    _W.FINNISH: IsoLang.FINNISH,
    _W.FRENCH: IsoLang.FRENCH,
    _W.HEBREW: IsoLang.HEBREW,
    _W.HINDU: IsoLang.HINDI,
    _W.CROATIAN: IsoLang.CROATIAN,
    _W.HAITIAN_CREOLE: IsoLang.HAITIAN,
    _W.HUNGARIAN: IsoLang.HUNGARIAN,
    _W.ARMENIAN: IsoLang.ARMENIAN,
    _W.INDONESIAN: IsoLang.INDONESIAN,
    _W.ICELANDIC: IsoLang.ICELANDIC,
    _W.ITALIAN: IsoLang.ITALIAN,
    _W.JAPANESE: IsoLang.JAPANESE,
    _W.GEORGIAN: IsoLang.GEORGIAN,
    _W.KAZAKH: IsoLang.KAZAKH,
    _W.KHMER: IsoLang.CAMBODIA,
    _W.KOREAN: IsoLang.KOREAN,
    _W.KOREAN_KR: IsoLang.KOREAN,
    _W.KURDISH_SORANI: IsoLang.KURDISH,
    _W.LINGALA: IsoLang.LINGALA,
    _W.KYRGYZ: IsoLang.KYRGYZ,
    _W.LAO: IsoLang.LAO,
    _W.LITHUANIAN: IsoLang.LITHUANIAN,
    _W.LATVIAN: IsoLang.LATVIAN,
    _W.MACEDONIAN: IsoLang.MACEDONIAN,
    _W.MONGOLIAN: IsoLang.MONGOLIAN,
    _W.MALAY: IsoLang.MALAY,
    _W.BURMESE: IsoLang.BURMESE,
    _W.NORWEGIAN: IsoLang.NORWEGIAN_BOKMAL,
    _W.KURDISH_KURMANCI: IsoLang.KURDISH,
    _W.DUTCH: IsoLang.DUTCH,
    _W.POLISH: IsoLang.POLISH,
    _W.PORTUGUESE_BRAZIL: IsoLang.PORTUGUESE,
    _W.PORTUGUESE: IsoLang.PORTUGUESE,
    _W.ROMANIAN: IsoLang.ROMANIAN,
    _W.RUSSIAN: IsoLang.RUSSIAN,
    _W.NEPALI: IsoLang.NEPALI,
    _W.SINHALESE: IsoLang.SINHALA,
    _W.SLOVAK: IsoLang.SLOVAK,
    _W.SLOVENIAN: IsoLang.SLOVENIAN,
    _W.ALBANIAN: IsoLang.ALBANIAN,
    _W.ALBANIAN_SQ: IsoLang.ALBANIAN,
    _W.SERBIAN: IsoLang.SERBIAN,
    _W.SERBIAN_LATIN: IsoLang.SERBIAN_LATIN,
    _W.SWEDISH: IsoLang.SWEDISH,
    _W.SWAHILI: IsoLang.SWAHILI,
    _W.TAJIK: IsoLang.TAJIK,
    _W.TAJIK_TG: IsoLang.TAJIK,
    _W.THAI: IsoLang.THAI,
    _W.TELUGU: IsoLang.TELUGU,
    _W.TAGALOG: IsoLang.TAGALOG,
    _W.TURKISH: IsoLang.TURKISH,
    _W.UKRAINIAN: IsoLang.UKRAINIAN,
    _W.UKRAINIAN_UK: IsoLang.UKRAINIAN,
    _W.URDU: IsoLang.URDU,
    _W.UZBEK: IsoLang.UZBEK,
    _W.VIETNAMESE: IsoLang.VIETNAMESE,
    _W.CHINESE: IsoLang.CHINESE,
    _W.CHINESE_TAIWAN: IsoLang.CHINESE,
    _W.KOREAN_ZH: IsoLang.CHINESE,
    _W.CANTONESE_HONG_KONG: IsoLang.CHINESE,
    _W.CANTONESE: IsoLang.CHINESE,
    _W.KURDISH_ZAZA: IsoLang.KURDISH,
    _W.SOMALI: IsoLang.SOMALI,
    _W.TAMIL: IsoLang.SINHALA,
}

_LOCALES: Dict[LanguageCode, Locale] = {
    _W.AMHARIC: Locale.AMHARIC_ETHIOPIA,
    _W.KURDISH: Locale.KURDISH_BADINI,
    _W.ARABIAN: Locale.ARABIC_UAE,
    _W.IRAQI: Locale.ARABIC_UAE,
    _W.AZERBAIJANIAN: Locale.AZERBAIJANI_AZERBAIJAN,
    _W.BELARUSIAN: Locale.BELARUSIAN_BELARUS,
    _W.BULGARIAN: Locale.BULGARIAN_BULGARIA,
    _W.BENGALI: Locale.BENGALI_BANGLADESH,
    _W.BOSNIAN: Locale.BOSNIAN_BOSNIA,
    _W.CZECH: Locale.CZECH_CZECH_REPUBLIC,
    _W.DANISH: Locale.DANISH_DENMARK,
    _W.GERMAN: Locale.GERMAN_GERMANY,
    _W.GREEK: Locale.GREEK_GREECE,
    _W.CANADIAN: Locale.ENGLISH_CANADA,
    _W.ENGLISH_BRITAIN: Locale.ENGLISH_UNITED_KINGDOM,
    _W.ENGLISH_AUSTRALIA: Locale.ENGLISH_UNITED_KINGDOM,
    _W.ENGLISH: Locale.ENGLISH_UNITED_KINGDOM,
    _W.ENGLISH_USA: Locale.ENGLISH_UNITED_KINGDOM,
    _W.INDIAN: Locale.ENGLISH_INDIA,
    _W.NEW_ZEALAND: Locale.ENGLISH_NEW_ZEALAND,
    _W.SPANISH: Locale.SPANISH_SPAIN,
    _W.SPANISH_PERUVIAN: Locale.PERUVIAN_SPANISH,
    _W.MEXICAN: Locale.SPANISH_MEXICO,
    _W.ESTONIAN: Locale.ESTONIAN_ESTONIA,
    _W.IRANIAN: Locale.PERSIAN_IRAN,
    _W.IRAN: Locale.PERSIAN_IRAN,
    _W.FINNISH: Locale.FINNISH_FINLAND,
    _W.FRENCH: Locale.FRENCH_FRANCE,
    _W.HEBREW: Locale.HEBREW_ISRAEL,
    _W.HINDU: Locale.HINDI_INDIA,
    _W.CROATIAN: Locale.CROATIAN_CROATIA,
    _W.HAITIAN_CREOLE: Locale.HAITIAN_HAITI,
    _W.HUNGARIAN: Locale.HUNGARIAN_HUNGARY,
    _W.ARMENIAN: Locale.ARMENIAN_ARMENIA,
    _W.INDONESIAN: Locale.INDONESIAN_INDONESIA,
    _W.ICELANDIC: Locale.ICELANDIC_ICELAND,
    _W.ITALIAN: Locale.ITALIAN_ITALY,
    _W.JAPANESE: Locale.JAPANESE_JAPAN,
    _W.GEORGIAN: Locale.GEORGIAN_GEORGIA,
    _W.KAZAKH: Locale.KAZAKH_KAZAKHSTAN,
    _W.KHMER: Locale.CENTRAL_KHMER,
    _W.KOREAN: Locale.KOREAN_SOUTH_KOREA,
    _W.KOREAN_KR: Locale.KOREAN_SOUTH_KOREA,
    _W.KURDISH_SORANI: Locale.KURDISH_SORANI,
    _W.LINGALA: Locale.LINGALA_CONGO,
    _W.KYRGYZ: Locale.KYRGYZ,
    _W.LAO: Locale.LAO,
    _W.LITHUANIAN: Locale.LITHUANIAN_LITHUANIA,
    _W.LATVIAN: Locale.LATVIAN_LATVIA,
    _W.MACEDONIAN: Locale.MACEDONIAN_MACEDONIA,
    _W.MONGOLIAN: Locale.MONGOLIAN_MONGOLIA,
    _W.MALAY: Locale.MALAY_MALAYSIA,
    _W.BURMESE: Locale.BURMESE_MYANMAR,
    _W.NORWEGIAN: Locale.NORWEGIAN_BOKMAL_NORWAY,
    _W.KURDISH_KURMANCI: Locale.KURDISH_TURKEY,
    _W.DUTCH: Locale.DUTCH_NETHERLANDS,
    _W.POLISH: Locale.POLISH_POLAND,
    _W.PORTUGUESE_BRAZIL: Locale.PORTUGUESE_BRAZIL,
    _W.PORTUGUESE: Locale.PORTUGUESE_PORTUGAL,
    _W.ROMANIAN: Locale.ROMANIAN_ROMANIA,
    _W.RUSSIAN: Locale.RUSSIAN_RUSSIA,
    _W.NEPALI: Locale.NEPALI_NEPAL,
    _W.SINHALESE: Locale.SINHALA_SRILANKA,
    _W.SLOVAK: Locale.SLOVAK_SLOVAKIA,
    _W.SLOVENIAN: Locale.SLOVENIAN_SLOVENIA,
    _W.ALBANIAN: Locale.ALBANIAN_ALBANIA,
    _W.ALBANIAN_SQ: Locale.ALBANIAN_ALBANIA,
    _W.SERBIAN: Locale.SERBIAN_SERBIA,
    _W.SERBIAN_LATIN: Locale.SERBIAN_SERBIA_LATIN,
    _W.SWEDISH: Locale.SWEDISH_SWEDEN,
    _W.SWAHILI: Locale.SWAHILI_KENYA,
    _W.TAJIK: Locale.TAJIK_TAJIKISTAN,
    _W.TAJIK_TG: Locale.TAJIK_TAJIKISTAN,
    _W.TAMIL: Locale.TAMIL_SRILANKA,
    _W.THAI: Locale.THAI_THAILAND,
    _W.TELUGU: Locale.TELUGU,
    _W.TAGALOG: Locale.TAGALOG_PHILIPPINES,
    _W.TURKISH: Locale.TURKISH_TURKEY,
    _W.UKRAINIAN: Locale.UKRAINIAN_UKRAINE,
    _W.UKRAINIAN_UK: Locale.UKRAINIAN_UKRAINE,
    _W.URDU: Locale.URDU_PAKISTAN,
    _W.UZBEK: Locale.UZBEK_UZBEKISTAN,
    _W.VIETNAMESE: Locale.VIETNAMESE_VIETNAM,
    _W.CHINESE: Locale.CHINESE_CHINA,
    _W.KOREAN_ZH: Locale.CHINESE_CHINA,
    _W.CANTONESE_HONG_KONG: Locale.CHINESE_HONG_KONG,
    _W.CHINESE_TAIWAN: Locale.CHINESE_TAIWAN,
    _W.KURDISH_ZAZA: Locale.KURDISH_ZAZA,
    _W.SOMALI: Locale.SOMALI_SOMALIA,
    _W.CANTONESE: Locale.AFAR_ERITREA,
}

_LISTED: Tuple[LanguageCode, ...] = (
    _W.AMHARIC, _W.ALBANIAN, _W.ARABIAN, _W.ARMENIAN,
    _W.AZERBAIJANIAN, _W.BELARUSIAN, _W.BENGALI, _W.BOSNIAN,
    _W.BULGARIAN, _W.BURMESE, _W.KHMER, _W.CHINESE,
    _W.CANTONESE_HONG_KONG, _W.CHINESE_TAIWAN, _W.CROATIAN, _W.CZECH,
    _W.DANISH, _W.DUTCH, _W.CANADIAN, _W.INDIAN, _W.NEW_ZEALAND,
    _W.ENGLISH, _W.ESTONIAN, _W.FINNISH, _W.FRENCH, _W.GEORGIAN,
    _W.GERMAN, _W.GREEK, _W.HAITIAN_CREOLE, _W.HEBREW, _W.HINDU,
    _W.HUNGARIAN, _W.ICELANDIC, _W.INDONESIAN, _W.ITALIAN,
    _W.JAPANESE, _W.KAZAKH, _W.KOREAN, _W.KURDISH_KURMANCI,
    _W.KURDISH_ZAZA, _W.KURDISH, _W.KURDISH_SORANI, _W.KYRGYZ,
    _W.LAO, _W.LATVIAN, _W.LINGALA, _W.LITHUANIAN, _W.MACEDONIAN,
    _W.MALAY, _W.MONGOLIAN, _W.NEPALI, _W.NORWEGIAN, _W.IRANIAN,
    _W.SPANISH_PERUVIAN, _W.POLISH, _W.PORTUGUESE_BRAZIL,
    _W.PORTUGUESE, _W.ROMANIAN, _W.RUSSIAN, _W.SERBIAN,
    _W.SERBIAN_LATIN, _W.SINHALESE, _W.SLOVAK, _W.SLOVENIAN,
    _W.SOMALI, _W.MEXICAN, _W.SPANISH, _W.SWAHILI, _W.SWEDISH,
    _W.TAGALOG, _W.TAJIK, _W.THAI, _W.TELUGU, _W.TURKISH,
    _W.UKRAINIAN, _W.URDU, _W.UZBEK, _W.VIETNAMESE, _W.TAMIL,
    _W.CANTONESE,
)
del _W

_ACCEPTED: FrozenSet[str] = frozenset(code.value for code in _LISTED)


def try_language_code_from_string(value: str) -> Optional[LanguageCode]:
    """Return the language code for ``value``, or None if it is not accepted."""
    if value not in _ACCEPTED:
        return None
    return LanguageCode(value)


def language_code_list() -> List[LanguageCode]:
    """All language codes accepted from strings."""
    return list(_LISTED)