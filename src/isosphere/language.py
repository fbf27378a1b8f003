"""ISO 639-1 language codes and languages.

    LanguageCode  two-letter code, canonically lowercase ('en')
    Language      one member per language; descriptive fields resolve
                  through the process-wide table to a LanguageInfo

Member identifiers are uppercase (LanguageCode.EN) while values follow the
ISO 639-1 convention of lowercase. The countries where a language is spoken
are derived from the country table.

Data sources: https://www.iso.org/iso-639-language-code and
https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import TYPE_CHECKING

from isosphere.constants import DEFAULT_LOCALE
from isosphere.core.code_validation import lookup_alpha_member
from isosphere.diagnostics import InvalidCodeError, InvalidNameError
from isosphere.enums import Domain
from isosphere.registry import get_tables

if TYPE_CHECKING:
    from isosphere.country import CountryCode

__all__ = [
    "Language",
    "LanguageCode",
    "LanguageInfo",
]


class LanguageCode(StrEnum):
    """ISO 639-1 language code.

    Members are lowercase strings: str(LanguageCode.EN) == "en". Lookup by
    value is case-insensitive, so LanguageCode("EN") is LanguageCode.EN.
    """

    AA = "aa"
    """Afar"""

    AB = "ab"
    """Abkhazian"""

    AE = "ae"
    """Avestan"""

    AF = "af"
    """Afrikaans"""

    AK = "ak"
    """Akan"""

    AM = "am"
    """Amharic"""

    AN = "an"
    """Aragonese"""

    AR = "ar"
    """Arabic"""

    AS = "as"
    """Assamese"""

    AV = "av"
    """Avaric"""

    AY = "ay"
    """Aymara"""

    AZ = "az"
    """Azerbaijani"""

    BA = "ba"
    """Bashkir"""

    BE = "be"
    """Belarusian"""

    BG = "bg"
    """Bulgarian"""

    BI = "bi"
    """Bislama"""

    BM = "bm"
    """Bambara"""

    BN = "bn"
    """Bengali"""

    BO = "bo"
    """Tibetan"""

    BR = "br"
    """Breton"""

    BS = "bs"
    """Bosnian"""

    CA = "ca"
    """Catalan"""

    CE = "ce"
    """Chechen"""

    CH = "ch"
    """Chamorro"""

    CO = "co"
    """Corsican"""

    CR = "cr"
    """Cree"""

    CS = "cs"
    """Czech"""

    CU = "cu"
    """Church Slavonic"""

    CV = "cv"
    """Chuvash"""

    CY = "cy"
    """Welsh"""

    DA = "da"
    """Danish"""

    DE = "de"
    """German"""

    DV = "dv"
    """Divehi"""

    DZ = "dz"
    """Dzongkha"""

    EE = "ee"
    """Ewe"""

    EL = "el"
    """Greek"""

    EN = "en"
    """English"""

    EO = "eo"
    """Esperanto"""

    ES = "es"
    """Spanish"""

    ET = "et"
    """Estonian"""

    EU = "eu"
    """Basque"""

    FA = "fa"
    """Persian"""

    FF = "ff"
    """Fulah"""

    FI = "fi"
    """Finnish"""

    FJ = "fj"
    """Fijian"""

    FO = "fo"
    """Faroese"""

    FR = "fr"
    """French"""

    FY = "fy"
    """Western Frisian"""

    GA = "ga"
    """Irish"""

    GD = "gd"
    """Gaelic"""

    GL = "gl"
    """Galician"""

    GN = "gn"
    """Guarani"""

    GU = "gu"
    """Gujarati"""

    GV = "gv"
    """Manx"""

    HA = "ha"
    """Hausa"""

    HE = "he"
    """Hebrew"""

    HI = "hi"
    """Hindi"""

    HO = "ho"
    """Hiri Motu"""

    HR = "hr"
    """Croatian"""

    HT = "ht"
    """Haitian"""

    HU = "hu"
    """Hungarian"""

    HY = "hy"
    """Armenian"""

    HZ = "hz"
    """Herero"""

    IA = "ia"
    """Interlingua"""

    ID = "id"
    """Indonesian"""

    IE = "ie"
    """Interlingue"""

    IG = "ig"
    """Igbo"""

    II = "ii"
    """Sichuan Yi"""

    IK = "ik"
    """Inupiaq"""

    IO = "io"
    """Ido"""

    IS = "is"
    """Icelandic"""

    IT = "it"
    """Italian"""

    IU = "iu"
    """Inuktitut"""

    JA = "ja"
    """Japanese"""

    JV = "jv"
    """Javanese"""

    KA = "ka"
    """Georgian"""

    KG = "kg"
    """Kongo"""

    KI = "ki"
    """Kikuyu"""

    KJ = "kj"
    """Kuanyama"""

    KK = "kk"
    """Kazakh"""

    KL = "kl"
    """Kalaallisut"""

    KM = "km"
    """Central Khmer"""

    KN = "kn"
    """Kannada"""

    KO = "ko"
    """Korean"""

    KR = "kr"
    """Kanuri"""

    KS = "ks"
    """Kashmiri"""

    KU = "ku"
    """Kurdish"""

    KV = "kv"
    """Komi"""

    KW = "kw"
    """Cornish"""

    KY = "ky"
    """Kirghiz"""

    LA = "la"
    """Latin"""

    LB = "lb"
    """Luxembourgish"""

    LG = "lg"
    """Ganda"""

    LI = "li"
    """Limburgan"""

    LN = "ln"
    """Lingala"""

    LO = "lo"
    """Lao"""

    LT = "lt"
    """Lithuanian"""

    LU = "lu"
    """Luba-Katanga"""

    LV = "lv"
    """Latvian"""

    MG = "mg"
    """Malagasy"""

    MH = "mh"
    """Marshallese"""

    MI = "mi"
    """Maori"""

    MK = "mk"
    """Macedonian"""

    ML = "ml"
    """Malayalam"""

    MN = "mn"
    """Mongolian"""

    MR = "mr"
    """Marathi"""

    MS = "ms"
    """Malay"""

    MT = "mt"
    """Maltese"""

    MY = "my"
    """Burmese"""

    NA = "na"
    """Nauru"""

    NB = "nb"
    """Norwegian Bokmål"""

    ND = "nd"
    """North Ndebele"""

    NE = "ne"
    """Nepali"""

    NG = "ng"
    """Ndonga"""

    NL = "nl"
    """Dutch"""

    NN = "nn"
    """Norwegian Nynorsk"""

    NO = "no"
    """Norwegian"""

    NR = "nr"
    """South Ndebele"""

    NV = "nv"
    """Navajo"""

    NY = "ny"
    """Chichewa"""

    OC = "oc"
    """Occitan"""

    OJ = "oj"
    """Ojibwa"""

    OM = "om"
    """Oromo"""

    OR = "or"
    """Oriya"""

    OS = "os"
    """Ossetian"""

    PA = "pa"
    """Punjabi"""

    PI = "pi"
    """Pali"""

    PL = "pl"
    """Polish"""

    PS = "ps"
    """Pashto"""

    PT = "pt"
    """Portuguese"""

    QU = "qu"
    """Quechua"""

    RM = "rm"
    """Romansh"""

    RN = "rn"
    """Rundi"""

    RO = "ro"
    """Romanian"""

    RU = "ru"
    """Russian"""

    RW = "rw"
    """Kinyarwanda"""

    SA = "sa"
    """Sanskrit"""

    SC = "sc"
    """Sardinian"""

    SD = "sd"
    """Sindhi"""

    SE = "se"
    """Northern Sami"""

    SG = "sg"
    """Sango"""

    SI = "si"
    """Sinhala"""

    SK = "sk"
    """Slovak"""

    SL = "sl"
    """Slovenian"""

    SM = "sm"
    """Samoan"""

    SN = "sn"
    """Shona"""

    SO = "so"
    """Somali"""

    SQ = "sq"
    """Albanian"""

    SR = "sr"
    """Serbian"""

    SS = "ss"
    """Swati"""

    ST = "st"
    """Southern Sotho"""

    SU = "su"
    """Sundanese"""

    SV = "sv"
    """Swedish"""

    SW = "sw"
    """Swahili"""

    TA = "ta"
    """Tamil"""

    TE = "te"
    """Telugu"""

    TG = "tg"
    """Tajik"""

    TH = "th"
    """Thai"""

    TI = "ti"
    """Tigrinya"""

    TK = "tk"
    """Turkmen"""

    TL = "tl"
    """Tagalog"""

    TN = "tn"
    """Tswana"""

    TO = "to"
    """Tonga"""

    TR = "tr"
    """Turkish"""

    TS = "ts"
    """Tsonga"""

    TT = "tt"
    """Tatar"""

    TW = "tw"
    """Twi"""

    TY = "ty"
    """Tahitian"""

    UG = "ug"
    """Uighur"""

    UK = "uk"
    """Ukrainian"""

    UR = "ur"
    """Urdu"""

    UZ = "uz"
    """Uzbek"""

    VE = "ve"
    """Venda"""

    VI = "vi"
    """Vietnamese"""

    VO = "vo"
    """Volapük"""

    WA = "wa"
    """Walloon"""

    WO = "wo"
    """Wolof"""

    XH = "xh"
    """Xhosa"""

    YI = "yi"
    """Yiddish"""

    YO = "yo"
    """Yoruba"""

    ZA = "za"
    """Zhuang"""

    ZH = "zh"
    """Chinese"""

    ZU = "zu"
    """Zulu"""

    @classmethod
    def _missing_(cls, value: object) -> LanguageCode | None:
        return lookup_alpha_member(cls, value, 2)

    @classmethod
    def all(cls) -> tuple[LanguageCode, ...]:
        """Every language code, in table order."""
        return tuple(info.code for info in get_tables().languages.values())

    @classmethod
    def parse(cls, text: str) -> LanguageCode:
        """Parse a language code, ignoring case.

        Raises:
            InvalidCodeError: If text is not a known ISO 639-1 code
        """
        member = lookup_alpha_member(cls, text, 2)
        if member is None:
            raise InvalidCodeError(Domain.LANGUAGE, text)
        return member

    @property
    def language(self) -> Language:
        """The language this code identifies."""
        return Language(self)


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    """ISO 639-1 language data.

    Immutable, thread-safe, hashable.

    Attributes:
        code: Two-letter code (e.g., 'en').
        name: English name.
        countries: Countries where the language is spoken.
    """

    code: LanguageCode
    name: str
    countries: frozenset[CountryCode]


class Language(Enum):
    """A language, one member per ISO 639-1 entry.

    Each member's value is its LanguageCode. str() gives the English name.
    """

    AA = LanguageCode.AA
    AB = LanguageCode.AB
    AE = LanguageCode.AE
    AF = LanguageCode.AF
    AK = LanguageCode.AK
    AM = LanguageCode.AM
    AN = LanguageCode.AN
    AR = LanguageCode.AR
    AS = LanguageCode.AS
    AV = LanguageCode.AV
    AY = LanguageCode.AY
    AZ = LanguageCode.AZ
    BA = LanguageCode.BA
    BE = LanguageCode.BE
    BG = LanguageCode.BG
    BI = LanguageCode.BI
    BM = LanguageCode.BM
    BN = LanguageCode.BN
    BO = LanguageCode.BO
    BR = LanguageCode.BR
    BS = LanguageCode.BS
    CA = LanguageCode.CA
    CE = LanguageCode.CE
    CH = LanguageCode.CH
    CO = LanguageCode.CO
    CR = LanguageCode.CR
    CS = LanguageCode.CS
    CU = LanguageCode.CU
    CV = LanguageCode.CV
    CY = LanguageCode.CY
    DA = LanguageCode.DA
    DE = LanguageCode.DE
    DV = LanguageCode.DV
    DZ = LanguageCode.DZ
    EE = LanguageCode.EE
    EL = LanguageCode.EL
    EN = LanguageCode.EN
    EO = LanguageCode.EO
    ES = LanguageCode.ES
    ET = LanguageCode.ET
    EU = LanguageCode.EU
    FA = LanguageCode.FA
    FF = LanguageCode.FF
    FI = LanguageCode.FI
    FJ = LanguageCode.FJ
    FO = LanguageCode.FO
    FR = LanguageCode.FR
    FY = LanguageCode.FY
    GA = LanguageCode.GA
    GD = LanguageCode.GD
    GL = LanguageCode.GL
    GN = LanguageCode.GN
    GU = LanguageCode.GU
    GV = LanguageCode.GV
    HA = LanguageCode.HA
    HE = LanguageCode.HE
    HI = LanguageCode.HI
    HO = LanguageCode.HO
    HR = LanguageCode.HR
    HT = LanguageCode.HT
    HU = LanguageCode.HU
    HY = LanguageCode.HY
    HZ = LanguageCode.HZ
    IA = LanguageCode.IA
    ID = LanguageCode.ID
    IE = LanguageCode.IE
    IG = LanguageCode.IG
    II = LanguageCode.II
    IK = LanguageCode.IK
    IO = LanguageCode.IO
    IS = LanguageCode.IS
    IT = LanguageCode.IT
    IU = LanguageCode.IU
    JA = LanguageCode.JA
    JV = LanguageCode.JV
    KA = LanguageCode.KA
    KG = LanguageCode.KG
    KI = LanguageCode.KI
    KJ = LanguageCode.KJ
    KK = LanguageCode.KK
    KL = LanguageCode.KL
    KM = LanguageCode.KM
    KN = LanguageCode.KN
    KO = LanguageCode.KO
    KR = LanguageCode.KR
    KS = LanguageCode.KS
    KU = LanguageCode.KU
    KV = LanguageCode.KV
    KW = LanguageCode.KW
    KY = LanguageCode.KY
    LA = LanguageCode.LA
    LB = LanguageCode.LB
    LG = LanguageCode.LG
    LI = LanguageCode.LI
    LN = LanguageCode.LN
    LO = LanguageCode.LO
    LT = LanguageCode.LT
    LU = LanguageCode.LU
    LV = LanguageCode.LV
    MG = LanguageCode.MG
    MH = LanguageCode.MH
    MI = LanguageCode.MI
    MK = LanguageCode.MK
    ML = LanguageCode.ML
    MN = LanguageCode.MN
    MR = LanguageCode.MR
    MS = LanguageCode.MS
    MT = LanguageCode.MT
    MY = LanguageCode.MY
    NA = LanguageCode.NA
    NB = LanguageCode.NB
    ND = LanguageCode.ND
    NE = LanguageCode.NE
    NG = LanguageCode.NG
    NL = LanguageCode.NL
    NN = LanguageCode.NN
    NO = LanguageCode.NO
    NR = LanguageCode.NR
    NV = LanguageCode.NV
    NY = LanguageCode.NY
    OC = LanguageCode.OC
    OJ = LanguageCode.OJ
    OM = LanguageCode.OM
    OR = LanguageCode.OR
    OS = LanguageCode.OS
    PA = LanguageCode.PA
    PI = LanguageCode.PI
    PL = LanguageCode.PL
    PS = LanguageCode.PS
    PT = LanguageCode.PT
    QU = LanguageCode.QU
    RM = LanguageCode.RM
    RN = LanguageCode.RN
    RO = LanguageCode.RO
    RU = LanguageCode.RU
    RW = LanguageCode.RW
    SA = LanguageCode.SA
    SC = LanguageCode.SC
    SD = LanguageCode.SD
    SE = LanguageCode.SE
    SG = LanguageCode.SG
    SI = LanguageCode.SI
    SK = LanguageCode.SK
    SL = LanguageCode.SL
    SM = LanguageCode.SM
    SN = LanguageCode.SN
    SO = LanguageCode.SO
    SQ = LanguageCode.SQ
    SR = LanguageCode.SR
    SS = LanguageCode.SS
    ST = LanguageCode.ST
    SU = LanguageCode.SU
    SV = LanguageCode.SV
    SW = LanguageCode.SW
    TA = LanguageCode.TA
    TE = LanguageCode.TE
    TG = LanguageCode.TG
    TH = LanguageCode.TH
    TI = LanguageCode.TI
    TK = LanguageCode.TK
    TL = LanguageCode.TL
    TN = LanguageCode.TN
    TO = LanguageCode.TO
    TR = LanguageCode.TR
    TS = LanguageCode.TS
    TT = LanguageCode.TT
    TW = LanguageCode.TW
    TY = LanguageCode.TY
    UG = LanguageCode.UG
    UK = LanguageCode.UK
    UR = LanguageCode.UR
    UZ = LanguageCode.UZ
    VE = LanguageCode.VE
    VI = LanguageCode.VI
    VO = LanguageCode.VO
    WA = LanguageCode.WA
    WO = LanguageCode.WO
    XH = LanguageCode.XH
    YI = LanguageCode.YI
    YO = LanguageCode.YO
    ZA = LanguageCode.ZA
    ZH = LanguageCode.ZH
    ZU = LanguageCode.ZU

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def all(cls) -> tuple[Language, ...]:
        """Every language, in table order."""
        return tuple(get_tables().languages)

    @classmethod
    def from_name(cls, name: str) -> Language:
        """Look up a language by its exact English name.

        Raises:
            InvalidNameError: If no language has this name
        """
        language = get_tables().language_by_name.get(name) if isinstance(name, str) else None
        if language is None:
            raise InvalidNameError(Domain.LANGUAGE, name)
        return language

    @classmethod
    def from_code(cls, value: str) -> Language:
        """Look up a language by code, ignoring case.

        Raises:
            InvalidCodeError: If value is not a known ISO 639-1 code
        """
        return LanguageCode.parse(value).language

    @property
    def info(self) -> LanguageInfo:
        """The full info record for this language."""
        return get_tables().languages[self]

    @property
    def display_name(self) -> str:
        return self.info.name

    @property
    def code(self) -> LanguageCode:
        return self.info.code

    @property
    def countries(self) -> frozenset[CountryCode]:
        """Countries where this language is spoken."""
        return self.info.countries

    def localized_name(self, locale: str = DEFAULT_LOCALE) -> str | None:
        """CLDR display name in the given locale.

        Raises:
            BabelImportError: If Babel not installed.
        """
        from isosphere.localization import language_name  # noqa: PLC0415 - optional Babel

        return language_name(self.info.code, locale)
