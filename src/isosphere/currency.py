"""ISO 4217 currency codes and currencies.

    CurrencyCode  alphabetic code, the canonical form ('GBP')
    Currency      one member per currency; descriptive fields resolve
                  through the process-wide table to a CurrencyInfo

The countries using a currency are not authored here: they are derived
from the country table when the tables are built, so they always agree
with Country.currencies.

Example:
    >>> Currency.JPY.decimal_digits
    0
    >>> sorted(CurrencyCode.parse("gbp").currency.countries)
    [<CountryCode.GB: 'GB'>, <CountryCode.GG: 'GG'>, <CountryCode.IM: 'IM'>, ...]

Data sources: https://www.iso.org/iso-4217-currency-codes.html and
https://en.wikipedia.org/wiki/ISO_4217.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import TYPE_CHECKING

from isosphere.constants import DEFAULT_LOCALE
from isosphere.core.code_validation import (
    is_numeric_code,
    lookup_alpha_member,
    parse_numeric_text,
)
from isosphere.diagnostics import InvalidCodeError, InvalidNameError, InvalidNumericCodeError
from isosphere.enums import Domain
from isosphere.registry import get_tables

if TYPE_CHECKING:
    from isosphere.country import CountryCode

__all__ = [
    "Currency",
    "CurrencyCode",
    "CurrencyInfo",
]


# ============================================================================
# CODE
# ============================================================================


class CurrencyCode(StrEnum):
    """ISO 4217 alphabetic currency code.

    Members are strings: str(CurrencyCode.USD) == "USD". Lookup by value is
    case-insensitive, so CurrencyCode("usd") is CurrencyCode.USD.
    """

    AED = "AED"
    """United Arab Emirates dirham"""

    AFN = "AFN"
    """Afghan afghani"""

    ALL = "ALL"
    """Albanian lek"""

    AMD = "AMD"
    """Armenian dram"""

    ANG = "ANG"
    """Netherlands Antillean guilder"""

    AOA = "AOA"
    """Angolan kwanza"""

    ARS = "ARS"
    """Argentine peso"""

    AUD = "AUD"
    """Australian dollar"""

    AWG = "AWG"
    """Aruban florin"""

    AZN = "AZN"
    """Azerbaijani manat"""

    BAM = "BAM"
    """Bosnia and Herzegovina convertible mark"""

    BBD = "BBD"
    """Barbados dollar"""

    BDT = "BDT"
    """Bangladeshi taka"""

    BGN = "BGN"
    """Bulgarian lev"""

    BHD = "BHD"
    """Bahraini dinar"""

    BIF = "BIF"
    """Burundian franc"""

    BMD = "BMD"
    """Bermudian dollar"""

    BND = "BND"
    """Brunei dollar"""

    BOB = "BOB"
    """Boliviano"""

    BOV = "BOV"
    """Bolivian Mvdol"""

    BRL = "BRL"
    """Brazilian real"""

    BSD = "BSD"
    """Bahamian dollar"""

    BTN = "BTN"
    """Bhutanese ngultrum"""

    BWP = "BWP"
    """Botswana pula"""

    BYN = "BYN"
    """Belarusian ruble"""

    BZD = "BZD"
    """Belize dollar"""

    CAD = "CAD"
    """Canadian dollar"""

    CDF = "CDF"
    """Congolese franc"""

    CHE = "CHE"
    """WIR euro"""

    CHF = "CHF"
    """Swiss franc"""

    CHW = "CHW"
    """WIR franc"""

    CLF = "CLF"
    """Unidad de Fomento"""

    CLP = "CLP"
    """Chilean peso"""

    CNY = "CNY"
    """Renminbi"""

    COP = "COP"
    """Colombian peso"""

    COU = "COU"
    """Unidad de Valor Real (UVR)"""

    CRC = "CRC"
    """Costa Rican colon"""

    CUP = "CUP"
    """Cuban peso"""

    CVE = "CVE"
    """Cape Verdean escudo"""

    CZK = "CZK"
    """Czech koruna"""

    DJF = "DJF"
    """Djiboutian franc"""

    DKK = "DKK"
    """Danish krone"""

    DOP = "DOP"
    """Dominican peso"""

    DZD = "DZD"
    """Algerian dinar"""

    EGP = "EGP"
    """Egyptian pound"""

    ERN = "ERN"
    """Eritrean nakfa"""

    ETB = "ETB"
    """Ethiopian birr"""

    EUR = "EUR"
    """Euro"""

    FJD = "FJD"
    """Fiji dollar"""

    FKP = "FKP"
    """Falkland Islands pound"""

    GBP = "GBP"
    """Pound sterling"""

    GEL = "GEL"
    """Georgian lari"""

    GHS = "GHS"
    """Ghanaian cedi"""

    GIP = "GIP"
    """Gibraltar pound"""

    GMD = "GMD"
    """Gambian dalasi"""

    GNF = "GNF"
    """Guinean franc"""

    GTQ = "GTQ"
    """Guatemalan quetzal"""

    GYD = "GYD"
    """Guyanese dollar"""

    HKD = "HKD"
    """Hong Kong dollar"""

    HNL = "HNL"
    """Honduran lempira"""

    HTG = "HTG"
    """Haitian gourde"""

    HUF = "HUF"
    """Hungarian forint"""

    IDR = "IDR"
    """Indonesian rupiah"""

    ILS = "ILS"
    """Israeli new shekel"""

    INR = "INR"
    """Indian rupee"""

    IQD = "IQD"
    """Iraqi dinar"""

    IRR = "IRR"
    """Iranian rial"""

    ISK = "ISK"
    """Icelandic króna"""

    JMD = "JMD"
    """Jamaican dollar"""

    JOD = "JOD"
    """Jordanian dinar"""

    JPY = "JPY"
    """Japanese yen"""

    KES = "KES"
    """Kenyan shilling"""

    KGS = "KGS"
    """Kyrgyzstani som"""

    KHR = "KHR"
    """Cambodian riel"""

    KMF = "KMF"
    """Comoro franc"""

    KPW = "KPW"
    """North Korean won"""

    KRW = "KRW"
    """South Korean won"""

    KWD = "KWD"
    """Kuwaiti dinar"""

    KYD = "KYD"
    """Cayman Islands dollar"""

    KZT = "KZT"
    """Kazakhstani tenge"""

    LAK = "LAK"
    """Lao kip"""

    LBP = "LBP"
    """Lebanese pound"""

    LKR = "LKR"
    """Sri Lankan rupee"""

    LRD = "LRD"
    """Liberian dollar"""

    LSL = "LSL"
    """Lesotho loti"""

    LYD = "LYD"
    """Libyan dinar"""

    MAD = "MAD"
    """Moroccan dirham"""

    MDL = "MDL"
    """Moldovan leu"""

    MGA = "MGA"
    """Malagasy ariary"""

    MKD = "MKD"
    """Macedonian denar"""

    MMK = "MMK"
    """Myanmar kyat"""

    MNT = "MNT"
    """Mongolian tögrög"""

    MOP = "MOP"
    """Macanese pataca"""

    MRU = "MRU"
    """Mauritanian ouguiya"""

    MUR = "MUR"
    """Mauritian rupee"""

    MVR = "MVR"
    """Maldivian rufiyaa"""

    MWK = "MWK"
    """Malawian kwacha"""

    MXN = "MXN"
    """Mexican peso"""

    MXV = "MXV"
    """Mexican Unidad de Inversion (UDI)"""

    MYR = "MYR"
    """Malaysian ringgit"""

    MZN = "MZN"
    """Mozambican metical"""

    NAD = "NAD"
    """Namibian dollar"""

    NGN = "NGN"
    """Nigerian naira"""

    NIO = "NIO"
    """Nicaraguan córdoba"""

    NOK = "NOK"
    """Norwegian krone"""

    NPR = "NPR"
    """Nepalese rupee"""

    NZD = "NZD"
    """New Zealand dollar"""

    OMR = "OMR"
    """Omani rial"""

    PAB = "PAB"
    """Panamanian balboa"""

    PEN = "PEN"
    """Peruvian sol"""

    PGK = "PGK"
    """Papua New Guinean kina"""

    PHP = "PHP"
    """Philippine peso"""

    PKR = "PKR"
    """Pakistani rupee"""

    PLN = "PLN"
    """Polish złoty"""

    PYG = "PYG"
    """Paraguayan guaraní"""

    QAR = "QAR"
    """Qatari riyal"""

    RON = "RON"
    """Romanian leu"""

    RSD = "RSD"
    """Serbian dinar"""

    RUB = "RUB"
    """Russian ruble"""

    RWF = "RWF"
    """Rwandan franc"""

    SAR = "SAR"
    """Saudi riyal"""

    SBD = "SBD"
    """Solomon Islands dollar"""

    SCR = "SCR"
    """Seychelles rupee"""

    SDG = "SDG"
    """Sudanese pound"""

    SEK = "SEK"
    """Swedish krona"""

    SGD = "SGD"
    """Singapore dollar"""

    SHP = "SHP"
    """Saint Helena pound"""

    SLE = "SLE"
    """Sierra Leonean leone (new leone)"""

    SLL = "SLL"
    """Sierra Leonean leone (old leone)"""

    SOS = "SOS"
    """Somali shilling"""

    SRD = "SRD"
    """Surinamese dollar"""

    SSP = "SSP"
    """South Sudanese pound"""

    STN = "STN"
    """São Tomé and Príncipe dobra"""

    SVC = "SVC"
    """Salvadoran colón"""

    SYP = "SYP"
    """Syrian pound"""

    SZL = "SZL"
    """Swazi lilangeni"""

    THB = "THB"
    """Thai baht"""

    TJS = "TJS"
    """Tajikistani somoni"""

    TMT = "TMT"
    """Turkmenistan manat"""

    TND = "TND"
    """Tunisian dinar"""

    TOP = "TOP"
    """Tongan paʻanga"""

    TRY = "TRY"
    """Turkish lira"""

    TTD = "TTD"
    """Trinidad and Tobago dollar"""

    TWD = "TWD"
    """New Taiwan dollar"""

    TZS = "TZS"
    """Tanzanian shilling"""

    UAH = "UAH"
    """Ukrainian hryvnia"""

    UGX = "UGX"
    """Ugandan shilling"""

    USD = "USD"
    """United States dollar"""

    USN = "USN"
    """United States dollar (next day)"""

    UYI = "UYI"
    """Uruguay Peso en Unidades Indexadas (URUIURUI)"""

    UYU = "UYU"
    """Uruguayan peso"""

    UYW = "UYW"
    """Unidad previsional"""

    UZS = "UZS"
    """Uzbekistan sum"""

    VED = "VED"
    """Venezuelan digital bolívar"""

    VES = "VES"
    """Venezuelan sovereign bolívar"""

    VND = "VND"
    """Vietnamese đồng"""

    VUV = "VUV"
    """Vanuatu vatu"""

    WST = "WST"
    """Samoan tala"""

    XAF = "XAF"
    """CFA franc BEAC"""

    XAG = "XAG"
    """Silver (one troy ounce)"""

    XAU = "XAU"
    """Gold (one troy ounce)"""

    XBA = "XBA"
    """European Composite Unit (EURCO)"""

    XBB = "XBB"
    """European Monetary Unit (E.M.U.-6)"""

    XBC = "XBC"
    """European Unit of Account 9 (E.U.A.-9)"""

    XBD = "XBD"
    """European Unit of Account 17 (E.U.A.-17)"""

    XCD = "XCD"
    """East Caribbean dollar"""

    XDR = "XDR"
    """Special drawing rights"""

    XOF = "XOF"
    """CFA franc BCEAO"""

    XPD = "XPD"
    """Palladium (one troy ounce)"""

    XPF = "XPF"
    """CFP franc (franc Pacifique)"""

    XPT = "XPT"
    """Platinum (one troy ounce)"""

    XSU = "XSU"
    """SUCRE"""

    XTS = "XTS"
    """Code reserved for testing"""

    XUA = "XUA"
    """ADB Unit of Account"""

    XXX = "XXX"
    """No currency"""

    YER = "YER"
    """Yemeni rial"""

    ZAR = "ZAR"
    """South African rand"""

    ZMW = "ZMW"
    """Zambian kwacha"""

    ZWL = "ZWL"
    """Zimbabwean dollar (fifth)"""

    @classmethod
    def _missing_(cls, value: object) -> CurrencyCode | None:
        return lookup_alpha_member(cls, value, 3)

    @classmethod
    def all(cls) -> tuple[CurrencyCode, ...]:
        """Every currency code, in table order."""
        return tuple(info.code for info in get_tables().currencies.values())

    @classmethod
    def parse(cls, text: str) -> CurrencyCode:
        """Parse a currency code, ignoring case.

        Raises:
            InvalidCodeError: If text is not a known ISO 4217 code
        """
        member = lookup_alpha_member(cls, text, 3)
        if member is None:
            raise InvalidCodeError(Domain.CURRENCY, text)
        return member

    @classmethod
    def from_numeric(cls, value: int) -> CurrencyCode:
        """Resolve an ISO 4217 numeric code to its alphabetic code.

        Raises:
            InvalidNumericCodeError: If value is not an assigned numeric code
        """
        return _currency_from_numeric(value).code

    @property
    def currency(self) -> Currency:
        """The currency this code identifies."""
        return Currency(self)

    @property
    def numeric(self) -> int:
        return self.currency.numeric


def _currency_from_numeric(value: object) -> Currency:
    if is_numeric_code(value):
        currency = get_tables().currency_by_numeric.get(value)
        if currency is not None:
            return currency
    raise InvalidNumericCodeError(Domain.CURRENCY, value)


# ============================================================================
# INFO RECORD
# ============================================================================


@dataclass(frozen=True, slots=True)
class CurrencyInfo:
    """ISO 4217 currency data.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        code: Alphabetic code (e.g., 'USD').
        numeric: Numeric code (e.g., 840).
        name: English name.
        decimal_digits: Standard decimal places (0, 2, 3, or 4).
        countries: Countries where the currency circulates.
    """

    code: CurrencyCode
    numeric: int
    name: str
    decimal_digits: int
    countries: frozenset[CountryCode]


# ============================================================================
# ENTITY
# ============================================================================


class Currency(Enum):
    """A currency, one member per ISO 4217 entry.

    Each member's value is its CurrencyCode. str() gives the English name.
    """

    AED = CurrencyCode.AED
    AFN = CurrencyCode.AFN
    ALL = CurrencyCode.ALL
    AMD = CurrencyCode.AMD
    ANG = CurrencyCode.ANG
    AOA = CurrencyCode.AOA
    ARS = CurrencyCode.ARS
    AUD = CurrencyCode.AUD
    AWG = CurrencyCode.AWG
    AZN = CurrencyCode.AZN
    BAM = CurrencyCode.BAM
    BBD = CurrencyCode.BBD
    BDT = CurrencyCode.BDT
    BGN = CurrencyCode.BGN
    BHD = CurrencyCode.BHD
    BIF = CurrencyCode.BIF
    BMD = CurrencyCode.BMD
    BND = CurrencyCode.BND
    BOB = CurrencyCode.BOB
    BOV = CurrencyCode.BOV
    BRL = CurrencyCode.BRL
    BSD = CurrencyCode.BSD
    BTN = CurrencyCode.BTN
    BWP = CurrencyCode.BWP
    BYN = CurrencyCode.BYN
    BZD = CurrencyCode.BZD
    CAD = CurrencyCode.CAD
    CDF = CurrencyCode.CDF
    CHE = CurrencyCode.CHE
    CHF = CurrencyCode.CHF
    CHW = CurrencyCode.CHW
    CLF = CurrencyCode.CLF
    CLP = CurrencyCode.CLP
    CNY = CurrencyCode.CNY
    COP = CurrencyCode.COP
    COU = CurrencyCode.COU
    CRC = CurrencyCode.CRC
    CUP = CurrencyCode.CUP
    CVE = CurrencyCode.CVE
    CZK = CurrencyCode.CZK
    DJF = CurrencyCode.DJF
    DKK = CurrencyCode.DKK
    DOP = CurrencyCode.DOP
    DZD = CurrencyCode.DZD
    EGP = CurrencyCode.EGP
    ERN = CurrencyCode.ERN
    ETB = CurrencyCode.ETB
    EUR = CurrencyCode.EUR
    FJD = CurrencyCode.FJD
    FKP = CurrencyCode.FKP
    GBP = CurrencyCode.GBP
    GEL = CurrencyCode.GEL
    GHS = CurrencyCode.GHS
    GIP = CurrencyCode.GIP
    GMD = CurrencyCode.GMD
    GNF = CurrencyCode.GNF
    GTQ = CurrencyCode.GTQ
    GYD = CurrencyCode.GYD
    HKD = CurrencyCode.HKD
    HNL = CurrencyCode.HNL
    HTG = CurrencyCode.HTG
    HUF = CurrencyCode.HUF
    IDR = CurrencyCode.IDR
    ILS = CurrencyCode.ILS
    INR = CurrencyCode.INR
    IQD = CurrencyCode.IQD
    IRR = CurrencyCode.IRR
    ISK = CurrencyCode.ISK
    JMD = CurrencyCode.JMD
    JOD = CurrencyCode.JOD
    JPY = CurrencyCode.JPY
    KES = CurrencyCode.KES
    KGS = CurrencyCode.KGS
    KHR = CurrencyCode.KHR
    KMF = CurrencyCode.KMF
    KPW = CurrencyCode.KPW
    KRW = CurrencyCode.KRW
    KWD = CurrencyCode.KWD
    KYD = CurrencyCode.KYD
    KZT = CurrencyCode.KZT
    LAK = CurrencyCode.LAK
    LBP = CurrencyCode.LBP
    LKR = CurrencyCode.LKR
    LRD = CurrencyCode.LRD
    LSL = CurrencyCode.LSL
    LYD = CurrencyCode.LYD
    MAD = CurrencyCode.MAD
    MDL = CurrencyCode.MDL
    MGA = CurrencyCode.MGA
    MKD = CurrencyCode.MKD
    MMK = CurrencyCode.MMK
    MNT = CurrencyCode.MNT
    MOP = CurrencyCode.MOP
    MRU = CurrencyCode.MRU
    MUR = CurrencyCode.MUR
    MVR = CurrencyCode.MVR
    MWK = CurrencyCode.MWK
    MXN = CurrencyCode.MXN
    MXV = CurrencyCode.MXV
    MYR = CurrencyCode.MYR
    MZN = CurrencyCode.MZN
    NAD = CurrencyCode.NAD
    NGN = CurrencyCode.NGN
    NIO = CurrencyCode.NIO
    NOK = CurrencyCode.NOK
    NPR = CurrencyCode.NPR
    NZD = CurrencyCode.NZD
    OMR = CurrencyCode.OMR
    PAB = CurrencyCode.PAB
    PEN = CurrencyCode.PEN
    PGK = CurrencyCode.PGK
    PHP = CurrencyCode.PHP
    PKR = CurrencyCode.PKR
    PLN = CurrencyCode.PLN
    PYG = CurrencyCode.PYG
    QAR = CurrencyCode.QAR
    RON = CurrencyCode.RON
    RSD = CurrencyCode.RSD
    RUB = CurrencyCode.RUB
    RWF = CurrencyCode.RWF
    SAR = CurrencyCode.SAR
    SBD = CurrencyCode.SBD
    SCR = CurrencyCode.SCR
    SDG = CurrencyCode.SDG
    SEK = CurrencyCode.SEK
    SGD = CurrencyCode.SGD
    SHP = CurrencyCode.SHP
    SLE = CurrencyCode.SLE
    SLL = CurrencyCode.SLL
    SOS = CurrencyCode.SOS
    SRD = CurrencyCode.SRD
    SSP = CurrencyCode.SSP
    STN = CurrencyCode.STN
    SVC = CurrencyCode.SVC
    SYP = CurrencyCode.SYP
    SZL = CurrencyCode.SZL
    THB = CurrencyCode.THB
    TJS = CurrencyCode.TJS
    TMT = CurrencyCode.TMT
    TND = CurrencyCode.TND
    TOP = CurrencyCode.TOP
    TRY = CurrencyCode.TRY
    TTD = CurrencyCode.TTD
    TWD = CurrencyCode.TWD
    TZS = CurrencyCode.TZS
    UAH = CurrencyCode.UAH
    UGX = CurrencyCode.UGX
    USD = CurrencyCode.USD
    USN = CurrencyCode.USN
    UYI = CurrencyCode.UYI
    UYU = CurrencyCode.UYU
    UYW = CurrencyCode.UYW
    UZS = CurrencyCode.UZS
    VED = CurrencyCode.VED
    VES = CurrencyCode.VES
    VND = CurrencyCode.VND
    VUV = CurrencyCode.VUV
    WST = CurrencyCode.WST
    XAF = CurrencyCode.XAF
    XAG = CurrencyCode.XAG
    XAU = CurrencyCode.XAU
    XBA = CurrencyCode.XBA
    XBB = CurrencyCode.XBB
    XBC = CurrencyCode.XBC
    XBD = CurrencyCode.XBD
    XCD = CurrencyCode.XCD
    XDR = CurrencyCode.XDR
    XOF = CurrencyCode.XOF
    XPD = CurrencyCode.XPD
    XPF = CurrencyCode.XPF
    XPT = CurrencyCode.XPT
    XSU = CurrencyCode.XSU
    XTS = CurrencyCode.XTS
    XUA = CurrencyCode.XUA
    XXX = CurrencyCode.XXX
    YER = CurrencyCode.YER
    ZAR = CurrencyCode.ZAR
    ZMW = CurrencyCode.ZMW
    ZWL = CurrencyCode.ZWL

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def all(cls) -> tuple[Currency, ...]:
        """Every currency, in table order."""
        return tuple(get_tables().currencies)

    @classmethod
    def from_name(cls, name: str) -> Currency:
        """Look up a currency by its exact English name.

        Raises:
            InvalidNameError: If no currency has this name
        """
        currency = get_tables().currency_by_name.get(name) if isinstance(name, str) else None
        if currency is None:
            raise InvalidNameError(Domain.CURRENCY, name)
        return currency

    @classmethod
    def from_code(cls, value: str | int) -> Currency:
        """Look up a currency by alphabetic code, numeric int, or digit text.

        Raises:
            InvalidCodeError: If alphabetic text matches no code
            InvalidNumericCodeError: If a numeric code is not assigned
        """
        if isinstance(value, str):
            numeric = parse_numeric_text(value)
            if numeric is not None:
                currency = get_tables().currency_by_numeric.get(numeric)
                if currency is None:
                    raise InvalidNumericCodeError(Domain.CURRENCY, value)
                return currency
            return CurrencyCode.parse(value).currency
        if isinstance(value, int) and not isinstance(value, bool):
            return _currency_from_numeric(value)
        raise InvalidCodeError(Domain.CURRENCY, value)

    @property
    def info(self) -> CurrencyInfo:
        """The full info record for this currency."""
        return get_tables().currencies[self]

    @property
    def display_name(self) -> str:
        return self.info.name

    @property
    def code(self) -> CurrencyCode:
        return self.info.code

    @property
    def numeric(self) -> int:
        return self.info.numeric

    @property
    def decimal_digits(self) -> int:
        """Minor-unit decimal places, e.g. 2 for USD and 0 for JPY."""
        return self.info.decimal_digits

    @property
    def countries(self) -> frozenset[CountryCode]:
        """Countries where this currency circulates."""
        return self.info.countries

    def localized_name(self, locale: str = DEFAULT_LOCALE) -> str | None:
        """CLDR display name in the given locale.

        Raises:
            BabelImportError: If Babel not installed.
        """
        from isosphere.localization import currency_name  # noqa: PLC0415 - optional Babel

        return currency_name(self.info.code, locale)
