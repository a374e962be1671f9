"""Two-letter country codes."""

from __future__ import annotations

from enum import Enum, unique
from typing import List


@unique
class Country(str, Enum):
    """Two-letter country code."""

    ABKHAZIA = "ab"
    AFGHANISTAN = "af"
    ALAND_ISLANDS = "ax"
    ALBANIA = "al"
    ALGERIA = "dz"
    AMERICAN_SAMOA = "as"
    ANDORRA = "ad"
    ANGOLA = "ao"
    ANGUILLA = "ai"
    ANTARCTICA = "aq"
    ANTIGUA = "ag"
    ARGENTINA = "ar"
    ARMENIA = "am"
    ARUBA = "aw"
    ASCENSION_ISLAND = "ac"
    AUSTRALIA = "au"
    AUSTRIA = "at"
    AZERBAIJAN = "az"
    BAHAMAS = "bs"
    BAHRAIN = "bh"
    BANGLADESH = "bd"
    BARBADOS = "bb"
    BELARUS = "by"
    BELGIUM = "be"
    BELIZE = "bz"
    BENIN = "bj"
    BERMUDA = "bm"
    BHUTAN = "bt"
    BOLIVIA = "bo"
    BONAIRE = "bq"
    BOSNIA = "ba"
    BOTSWANA = "bw"
    BOUVET_ISLAND = "bv"
    BRAZIL = "br"
    BRITISH_INDIAN_OCEAN_TERRITORY = "io"
    BRUNEI = "bn"
    BULGARIA = "bg"
    BURKINA_FASO = "bf"
    BURUNDI = "bi"
    CAR = "cf"
    CAMBODIA = "kh"
    CAMEROON = "cm"
    CANADA = "ca"
    CAPE_VERDE = "cv"
    CAYMAN_ISLANDS = "ky"
    CHAD = "td"
    CHANNEL_ISLANDS = "nn"
    CHILE = "cl"
    CHINA = "cn"
    CHRISTMAS_ISLAND = "cx"
    COCOS_ISLANDS = "cc"
    COLOMBIA = "co"
    COMOROS = "km"
    CONGO = "cg"
    CONGO_KINSHASA = "cd"
    COOK_ISLANDS = "ck"
    COSTA_RICA = "cr"
    CROATIA = "hr"
    CUBA = "cu"
    CURACAO = "cw"
    CYPRUS = "cy"
    CZECH_REPUBLIC = "cz"
    DENMARK = "dk"
    DJIBOUTI = "dj"
    DOMINICA = "dm"
    DOMINICAN_REPUBLIC = "do"
    EAST_TIMOR = "tp"
    ECUADOR = "ec"
    EGYPT = "eg"
    EL_SALVADOR = "sv"
    ENGLAND = "en"
    EQUATORIAL_GUINEA = "gq"
    ERITREA = "er"
    ESTONIA = "ee"
    ETHIOPIA = "et"
    FALKLAND_ISLANDS = "fk"
    FAROE_ISLANDS = "fo"
    FIJI = "fj"
    FINLAND = "fi"
    FRANCE = "fr"
    FRENCH_GUIANA = "gf"
    FRENCH_POLYNESIA = "pf"
    FRENCH_SOUTHERN_TERRITORIES = "tf"
    GABON = "ga"
    GAMBIA = "gm"
    GEORGIA = "ge"
    GERMANY = "de"
    GHANA = "gh"
    GIBRALTAR = "gi"
    GREAT_BRITAIN = "uk"
    GREECE = "gr"
    GREENLAND = "gl"
    GRENADA = "gd"
    GUADELOUPE = "gp"
    GUAM = "gu"
    GUATEMALA = "gt"
    GUERNSEY = "gg"
    GUINEA = "gn"
    GUINEA_BISSAU = "gw"
    GUYANA = "gy"
    HAITI = "ht"
    HAWAIIAN_ISLANDS = "gv"
    HEARD_ISLAND = "hm"
    HOLY_SEE = "va"
    HONDURAS = "hn"
    HONG_KONG = "hk"
    HUNGARY = "hu"
    ICELAND = "is"
    INDIA = "in"
    INDONESIA = "id"
    IRAN = "ir"
    IRAQ = "iq"
    IRELAND = "ie"
    ISLE_OF_MAN = "im"
    ISRAEL = "il"
    ITALY = "it"
    IVORY_COAST = "ci"
    JAMAICA = "jm"
    JAPAN = "jp"
    JERSEY = "je"
    JORDAN = "jo"
    KNDR = "kp"
    KAZAKHSTAN = "kz"
    KENYA = "ke"
    KIRIBATI = "ki"
    KOREA = "kr"
    KOSOVO = "xk"
    KUWAIT = "kw"
    KYRGYZSTAN = "kg"
    LAOS = "la"
    LATVIA = "lv"
    LEBANON = "lb"
    LESOTHO = "ls"
    LIBERIA = "lr"
    LIBYA = "ly"
    LIECHTENSTEIN = "li"
    LITHUANIA = "lt"
    LUXEMBOURG = "lu"
    MACAO = "mo"
    MACEDONIA = "mk"
    MADAGASCAR = "mg"
    MALAWI = "mw"
    MALAYSIA = "my"
    MALDIVES = "mv"
    MALI = "ml"
    MALTA = "mt"
    MARSHALL_ISLANDS = "mh"
    MARTINIQUE = "mq"
    MAURITANIA = "mr"
    MAURITIUS = "mu"
    MAYOTTE = "yt"
    MEXICO = "mx"
    MICRONESIA = "fm"
    MOLDOVA_REPUBLIC = "md"
    MONACO = "mc"
    MONGOLIA = "mn"
    MONTENEGRO = "me"
    MONTSERRAT = "ms"
    MOROCCO = "ma"
    MOZAMBIQUE = "mz"
    MYANMAR = "mm"
    NAMIBIA = "na"
    NAURU = "nr"
    NEDERLANDSE_ANTILLEN = "an"
    NEPAL = "np"
    NETHERLANDS = "nl"
    NEW_CALEDONIA = "nc"
    NEW_ZEALAND = "nz"
    NICARAGUA = "ni"
    NIGER = "ne"
    NIGERIA = "ng"
    NIUE = "nu"
    NORFOLK_ISLAND = "nf"
    NORTHERN_MARIANA_ISLANDS = "mp"
    NORWAY = "no"
    OMAN = "om"
    PAKISTAN = "pk"
    PALAU = "pw"
    PALESTINE_STATE = "ps"
    PANAMA = "pa"
    PAPUA_NEW_GUINEA = "pg"
    PARAGUAY = "py"
    PERU = "pe"
    PHILIPPINES = "ph"
    PITCAIRN = "pn"
    POLAND = "pl"
    PORTUGAL = "pt"
    PUERTO_RICO = "pr"
    QATAR = "qa"
    REUNION_ISLAND = "re"
    ROMANIA = "ro"
    RUSSIAN = "ru"
    RWANDA = "rw"
    SAINT_BARTHELEMY = "bl"
    SAINT_HELENA = "sh"
    SAINT_KITTS = "kn"
    SAINT_LUCIA = "lc"
    SAINT_MARTIN = "mf"
    SAINT_PIERRE = "pm"
    SAINT_VINCENT = "vc"
    SAMOA = "ws"
    SAN_MARINO = "sm"
    SAO_TOME = "st"
    SAUDI_ARABIA = "sa"
    SENEGAL = "sn"
    SERBIA = "rs"
    SERBIA_AND_MONTENEGRO = "cs"
    SEYCHELLES = "sc"
    SIERRA_LEONE = "sl"
    SINGAPORE = "sg"
    SINT_MAARTEN = "sx"
    SLOVAKIA = "sk"
    SLOVENIA = "si"
    SOLOMON_ISLANDS = "sb"
    SOMALIA = "so"
    SOUTH_AFRICA = "za"
    SOUTH_GEORGIA = "gs"
    SOUTH_OSSETIA = "os"
    SOUTH_SUDAN = "ss"
    SPAIN = "es"
    SRI_LANKA = "lk"
    SUDAN = "sd"
    SURINAME = "sr"
    SVALBARD = "sj"
    SWAZILAND = "sz"
    SWEDEN = "se"
    SWITZERLAND = "ch"
    SYRIAN_ARAB_REPUBLIC = "sy"
    TAIWAN = "tw"
    TAJIKISTAN = "tj"
    TANZANIA = "tz"
    THAILAND = "th"
    TIMOR_LESTE = "tl"
    TOGO = "tg"
    TOKELAU = "tk"
    TONGA = "to"
    TRINIDAD = "tt"
    TUNISIA = "tn"
    TURKEY = "tr"
    TURKMENISTAN = "tm"
    TURKS = "tc"
    TUVALU = "tv"
    UAE = "ae"
    USSR = "su"
    UGANDA = "ug"
    UKRAINE = "ua"
    UNITED_KINGDOM = "gb"
    UNITED_STATES = "us"
    UNITED_STATES_MINOR_OUTLYING_ISLANDS = "um"
    URUGUAY = "uy"
    UZBEKISTAN = "uz"
    VANUATU = "vu"
    VENEZUELA = "ve"
    VIET_NAM = "vn"
    VIRGIN_ISLANDS = "vi"
    VIRGIN_ISLANDS_BRITISH = "vg"
    WALLIS_FUTUNA = "wf"
    WESTERN_SAHARA = "eh"
    YEMEN = "ye"
    YUGOSLAVIA = "yu"
    ZAMBIA = "zm"
    ZIMBABWE = "zw"


def countries_list() -> List[Country]:
    """All known countries in declaration order."""
    return list(Country)