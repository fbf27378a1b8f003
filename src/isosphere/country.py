"""ISO 3166-1 country codes and countries.

Three types cover the domain:

    CountryCode    alpha-2 code, the canonical form ('US')
    CountryAlpha3  alpha-3 code ('USA'), a separate closed set joined to
                   CountryCode by an explicit bijection in the tables
    Country        one member per country; descriptive fields resolve
                   through the process-wide table to a CountryInfo

Numeric codes (840 for the United States) are plain ints and map to the
alpha-2 code in preference to the alpha-3 one; both are equivalent.

Example:
    >>> country = CountryAlpha3.parse("usa").country
    >>> country.display_name
    'United States of America'
    >>> country.code
    <CountryCode.US: 'US'>
    >>> CountryCode.from_numeric(840) is CountryCode.US
    True

Data sources: https://www.iso.org/iso-3166-country-codes.html and
https://en.wikipedia.org/wiki/ISO_3166-1.

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
    from isosphere.currency import CurrencyCode
    from isosphere.language import LanguageCode

__all__ = [
    "Country",
    "CountryAlpha3",
    "CountryCode",
    "CountryInfo",
]


# ============================================================================
# CODES
# ============================================================================


class CountryCode(StrEnum):
    """ISO 3166-1 alpha-2 country code.

    Members are strings: str(CountryCode.US) == "US". Lookup by value is
    case-insensitive, so CountryCode("us") is CountryCode.US.
    """

    AD = "AD"
    """Andorra"""

    AE = "AE"
    """United Arab Emirates"""

    AF = "AF"
    """Afghanistan"""

    AG = "AG"
    """Antigua and Barbuda"""

    AI = "AI"
    """Anguilla"""

    AL = "AL"
    """Albania"""

    AM = "AM"
    """Armenia"""

    AO = "AO"
    """Angola"""

    AQ = "AQ"
    """Antarctica"""

    AR = "AR"
    """Argentina"""

    AS = "AS"
    """American Samoa"""

    AT = "AT"
    """Austria"""

    AU = "AU"
    """Australia"""

    AW = "AW"
    """Aruba"""

    AX = "AX"
    """Åland Islands"""

    AZ = "AZ"
    """Azerbaijan"""

    BA = "BA"
    """Bosnia and Herzegovina"""

    BB = "BB"
    """Barbados"""

    BD = "BD"
    """Bangladesh"""

    BE = "BE"
    """Belgium"""

    BF = "BF"
    """Burkina Faso"""

    BG = "BG"
    """Bulgaria"""

    BH = "BH"
    """Bahrain"""

    BI = "BI"
    """Burundi"""

    BJ = "BJ"
    """Benin"""

    BL = "BL"
    """Saint Barthélemy"""

    BM = "BM"
    """Bermuda"""

    BN = "BN"
    """Brunei Darussalam"""

    BO = "BO"
    """Bolivia (Plurinational State of)"""

    BQ = "BQ"
    """Bonaire, Sint Eustatius and Saba"""

    BR = "BR"
    """Brazil"""

    BS = "BS"
    """Bahamas"""

    BT = "BT"
    """Bhutan"""

    BV = "BV"
    """Bouvet Island"""

    BW = "BW"
    """Botswana"""

    BY = "BY"
    """Belarus"""

    BZ = "BZ"
    """Belize"""

    CA = "CA"
    """Canada"""

    CC = "CC"
    """Cocos (Keeling) Islands"""

    CD = "CD"
    """Congo, Democratic Republic of the"""

    CF = "CF"
    """Central African Republic"""

    CG = "CG"
    """Congo"""

    CH = "CH"
    """Switzerland"""

    CI = "CI"
    """Côte d'Ivoire"""

    CK = "CK"
    """Cook Islands"""

    CL = "CL"
    """Chile"""

    CM = "CM"
    """Cameroon"""

    CN = "CN"
    """China"""

    CO = "CO"
    """Colombia"""

    CR = "CR"
    """Costa Rica"""

    CU = "CU"
    """Cuba"""

    CV = "CV"
    """Cabo Verde"""

    CW = "CW"
    """Curaçao"""

    CX = "CX"
    """Christmas Island"""

    CY = "CY"
    """Cyprus"""

    CZ = "CZ"
    """Czechia"""

    DE = "DE"
    """Germany"""

    DJ = "DJ"
    """Djibouti"""

    DK = "DK"
    """Denmark"""

    DM = "DM"
    """Dominica"""

    DO = "DO"
    """Dominican Republic"""

    DZ = "DZ"
    """Algeria"""

    EC = "EC"
    """Ecuador"""

    EE = "EE"
    """Estonia"""

    EG = "EG"
    """Egypt"""

    EH = "EH"
    """Western Sahara"""

    ER = "ER"
    """Eritrea"""

    ES = "ES"
    """Spain"""

    ET = "ET"
    """Ethiopia"""

    FI = "FI"
    """Finland"""

    FJ = "FJ"
    """Fiji"""

    FK = "FK"
    """Falkland Islands (Malvinas)"""

    FM = "FM"
    """Micronesia (Federated States of)"""

    FO = "FO"
    """Faroe Islands"""

    FR = "FR"
    """France"""

    GA = "GA"
    """Gabon"""

    GB = "GB"
    """United Kingdom of Great Britain and Northern Ireland"""

    GD = "GD"
    """Grenada"""

    GE = "GE"
    """Georgia"""

    GF = "GF"
    """French Guiana"""

    GG = "GG"
    """Guernsey"""

    GH = "GH"
    """Ghana"""

    GI = "GI"
    """Gibraltar"""

    GL = "GL"
    """Greenland"""

    GM = "GM"
    """Gambia"""

    GN = "GN"
    """Guinea"""

    GP = "GP"
    """Guadeloupe"""

    GQ = "GQ"
    """Equatorial Guinea"""

    GR = "GR"
    """Greece"""

    GS = "GS"
    """South Georgia and the South Sandwich Islands"""

    GT = "GT"
    """Guatemala"""

    GU = "GU"
    """Guam"""

    GW = "GW"
    """Guinea-Bissau"""

    GY = "GY"
    """Guyana"""

    HK = "HK"
    """Hong Kong"""

    HM = "HM"
    """Heard Island and McDonald Islands"""

    HN = "HN"
    """Honduras"""

    HR = "HR"
    """Croatia"""

    HT = "HT"
    """Haiti"""

    HU = "HU"
    """Hungary"""

    ID = "ID"
    """Indonesia"""

    IE = "IE"
    """Ireland"""

    IL = "IL"
    """Israel"""

    IM = "IM"
    """Isle of Man"""

    IN = "IN"
    """India"""

    IO = "IO"
    """British Indian Ocean Territory"""

    IQ = "IQ"
    """Iraq"""

    IR = "IR"
    """Iran (Islamic Republic of)"""

    IS = "IS"
    """Iceland"""

    IT = "IT"
    """Italy"""

    JE = "JE"
    """Jersey"""

    JM = "JM"
    """Jamaica"""

    JO = "JO"
    """Jordan"""

    JP = "JP"
    """Japan"""

    KE = "KE"
    """Kenya"""

    KG = "KG"
    """Kyrgyzstan"""

    KH = "KH"
    """Cambodia"""

    KI = "KI"
    """Kiribati"""

    KM = "KM"
    """Comoros"""

    KN = "KN"
    """Saint Kitts and Nevis"""

    KP = "KP"
    """Korea (Democratic People's Republic of)"""

    KR = "KR"
    """Korea, Republic of"""

    KW = "KW"
    """Kuwait"""

    KY = "KY"
    """Cayman Islands"""

    KZ = "KZ"
    """Kazakhstan"""

    LA = "LA"
    """Lao People's Democratic Republic"""

    LB = "LB"
    """Lebanon"""

    LC = "LC"
    """Saint Lucia"""

    LI = "LI"
    """Liechtenstein"""

    LK = "LK"
    """Sri Lanka"""

    LR = "LR"
    """Liberia"""

    LS = "LS"
    """Lesotho"""

    LT = "LT"
    """Lithuania"""

    LU = "LU"
    """Luxembourg"""

    LV = "LV"
    """Latvia"""

    LY = "LY"
    """Libya"""

    MA = "MA"
    """Morocco"""

    MC = "MC"
    """Monaco"""

    MD = "MD"
    """Moldova, Republic of"""

    ME = "ME"
    """Montenegro"""

    MF = "MF"
    """Saint Martin (French part)"""

    MG = "MG"
    """Madagascar"""

    MH = "MH"
    """Marshall Islands"""

    MK = "MK"
    """North Macedonia"""

    ML = "ML"
    """Mali"""

    MM = "MM"
    """Myanmar"""

    MN = "MN"
    """Mongolia"""

    MO = "MO"
    """Macao"""

    MP = "MP"
    """Northern Mariana Islands"""

    MQ = "MQ"
    """Martinique"""

    MR = "MR"
    """Mauritania"""

    MS = "MS"
    """Montserrat"""

    MT = "MT"
    """Malta"""

    MU = "MU"
    """Mauritius"""

    MV = "MV"
    """Maldives"""

    MW = "MW"
    """Malawi"""

    MX = "MX"
    """Mexico"""

    MY = "MY"
    """Malaysia"""

    MZ = "MZ"
    """Mozambique"""

    NA = "NA"
    """Namibia"""

    NC = "NC"
    """New Caledonia"""

    NE = "NE"
    """Niger"""

    NF = "NF"
    """Norfolk Island"""

    NG = "NG"
    """Nigeria"""

    NI = "NI"
    """Nicaragua"""

    NL = "NL"
    """Netherlands, Kingdom of the"""

    NO = "NO"
    """Norway"""

    NP = "NP"
    """Nepal"""

    NR = "NR"
    """Nauru"""

    NU = "NU"
    """Niue"""

    NZ = "NZ"
    """New Zealand"""

    OM = "OM"
    """Oman"""

    PA = "PA"
    """Panama"""

    PE = "PE"
    """Peru"""

    PF = "PF"
    """French Polynesia"""

    PG = "PG"
    """Papua New Guinea"""

    PH = "PH"
    """Philippines"""

    PK = "PK"
    """Pakistan"""

    PL = "PL"
    """Poland"""

    PM = "PM"
    """Saint Pierre and Miquelon"""

    PN = "PN"
    """Pitcairn"""

    PR = "PR"
    """Puerto Rico"""

    PS = "PS"
    """Palestine, State of"""

    PT = "PT"
    """Portugal"""

    PW = "PW"
    """Palau"""

    PY = "PY"
    """Paraguay"""

    QA = "QA"
    """Qatar"""

    RE = "RE"
    """Réunion"""

    RO = "RO"
    """Romania"""

    RS = "RS"
    """Serbia"""

    RU = "RU"
    """Russian Federation"""

    RW = "RW"
    """Rwanda"""

    SA = "SA"
    """Saudi Arabia"""

    SB = "SB"
    """Solomon Islands"""

    SC = "SC"
    """Seychelles"""

    SD = "SD"
    """Sudan"""

    SE = "SE"
    """Sweden"""

    SG = "SG"
    """Singapore"""

    SH = "SH"
    """Saint Helena, Ascension and Tristan da Cunha"""

    SI = "SI"
    """Slovenia"""

    SJ = "SJ"
    """Svalbard and Jan Mayen"""

    SK = "SK"
    """Slovakia"""

    SL = "SL"
    """Sierra Leone"""

    SM = "SM"
    """San Marino"""

    SN = "SN"
    """Senegal"""

    SO = "SO"
    """Somalia"""

    SR = "SR"
    """Suriname"""

    SS = "SS"
    """South Sudan"""

    ST = "ST"
    """Sao Tome and Principe"""

    SV = "SV"
    """El Salvador"""

    SX = "SX"
    """Sint Maarten (Dutch part)"""

    SY = "SY"
    """Syrian Arab Republic"""

    SZ = "SZ"
    """Eswatini"""

    TC = "TC"
    """Turks and Caicos Islands"""

    TD = "TD"
    """Chad"""

    TF = "TF"
    """French Southern Territories"""

    TG = "TG"
    """Togo"""

    TH = "TH"
    """Thailand"""

    TJ = "TJ"
    """Tajikistan"""

    TK = "TK"
    """Tokelau"""

    TL = "TL"
    """Timor-Leste"""

    TM = "TM"
    """Turkmenistan"""

    TN = "TN"
    """Tunisia"""

    TO = "TO"
    """Tonga"""

    TR = "TR"
    """Türkiye"""

    TT = "TT"
    """Trinidad and Tobago"""

    TV = "TV"
    """Tuvalu"""

    TW = "TW"
    """Taiwan, Province of China"""

    TZ = "TZ"
    """Tanzania, United Republic of"""

    UA = "UA"
    """Ukraine"""

    UG = "UG"
    """Uganda"""

    UM = "UM"
    """United States Minor Outlying Islands"""

    US = "US"
    """United States of America"""

    UY = "UY"
    """Uruguay"""

    UZ = "UZ"
    """Uzbekistan"""

    VA = "VA"
    """Holy See"""

    VC = "VC"
    """Saint Vincent and the Grenadines"""

    VE = "VE"
    """Venezuela (Bolivarian Republic of)"""

    VG = "VG"
    """Virgin Islands (British)"""

    VI = "VI"
    """Virgin Islands (U.S.)"""

    VN = "VN"
    """Viet Nam"""

    VU = "VU"
    """Vanuatu"""

    WF = "WF"
    """Wallis and Futuna"""

    WS = "WS"
    """Samoa"""

    YE = "YE"
    """Yemen"""

    YT = "YT"
    """Mayotte"""

    ZA = "ZA"
    """South Africa"""

    ZM = "ZM"
    """Zambia"""

    ZW = "ZW"
    """Zimbabwe"""

    @classmethod
    def _missing_(cls, value: object) -> CountryCode | None:
        return lookup_alpha_member(cls, value, 2)

    @classmethod
    def all(cls) -> tuple[CountryCode, ...]:
        """Every alpha-2 code, in table order."""
        return tuple(info.code for info in get_tables().countries.values())

    @classmethod
    def parse(cls, text: str) -> CountryCode:
        """Parse an alpha-2 code, ignoring case.

        Raises:
            InvalidCodeError: If text is not a known alpha-2 code
        """
        member = lookup_alpha_member(cls, text, 2)
        if member is None:
            raise InvalidCodeError(Domain.COUNTRY, text)
        return member

    @classmethod
    def from_numeric(cls, value: int) -> CountryCode:
        """Resolve an ISO 3166-1 numeric code to its alpha-2 code.

        Raises:
            InvalidNumericCodeError: If value is not an assigned numeric code
        """
        return _country_from_numeric(value).code

    @property
    def country(self) -> Country:
        """The country this code identifies."""
        return Country(self)

    @property
    def alpha3(self) -> CountryAlpha3:
        return self.country.alpha3

    @property
    def numeric(self) -> int:
        return self.country.numeric


class CountryAlpha3(StrEnum):
    """ISO 3166-1 alpha-3 country code.

    A separate closed set from CountryCode. Each member pairs with exactly
    one alpha-2 code and shares its numeric code.
    """

    ABW = "ABW"
    """Aruba"""

    AFG = "AFG"
    """Afghanistan"""

    AGO = "AGO"
    """Angola"""

    AIA = "AIA"
    """Anguilla"""

    ALA = "ALA"
    """Åland Islands"""

    ALB = "ALB"
    """Albania"""

    AND = "AND"
    """Andorra"""

    ARE = "ARE"
    """United Arab Emirates"""

    ARG = "ARG"
    """Argentina"""

    ARM = "ARM"
    """Armenia"""

    ASM = "ASM"
    """American Samoa"""

    ATA = "ATA"
    """Antarctica"""

    ATF = "ATF"
    """French Southern Territories"""

    ATG = "ATG"
    """Antigua and Barbuda"""

    AUS = "AUS"
    """Australia"""

    AUT = "AUT"
    """Austria"""

    AZE = "AZE"
    """Azerbaijan"""

    BDI = "BDI"
    """Burundi"""

    BEL = "BEL"
    """Belgium"""

    BEN = "BEN"
    """Benin"""

    BES = "BES"
    """Bonaire, Sint Eustatius and Saba"""

    BFA = "BFA"
    """Burkina Faso"""

    BGD = "BGD"
    """Bangladesh"""

    BGR = "BGR"
    """Bulgaria"""

    BHR = "BHR"
    """Bahrain"""

    BHS = "BHS"
    """Bahamas"""

    BIH = "BIH"
    """Bosnia and Herzegovina"""

    BLM = "BLM"
    """Saint Barthélemy"""

    BLR = "BLR"
    """Belarus"""

    BLZ = "BLZ"
    """Belize"""

    BMU = "BMU"
    """Bermuda"""

    BOL = "BOL"
    """Bolivia (Plurinational State of)"""

    BRA = "BRA"
    """Brazil"""

    BRB = "BRB"
    """Barbados"""

    BRN = "BRN"
    """Brunei Darussalam"""

    BTN = "BTN"
    """Bhutan"""

    BVT = "BVT"
    """Bouvet Island"""

    BWA = "BWA"
    """Botswana"""

    CAF = "CAF"
    """Central African Republic"""

    CAN = "CAN"
    """Canada"""

    CCK = "CCK"
    """Cocos (Keeling) Islands"""

    CHE = "CHE"
    """Switzerland"""

    CHL = "CHL"
    """Chile"""

    CHN = "CHN"
    """China"""

    CIV = "CIV"
    """Côte d'Ivoire"""

    CMR = "CMR"
    """Cameroon"""

    COD = "COD"
    """Congo, Democratic Republic of the"""

    COG = "COG"
    """Congo"""

    COK = "COK"
    """Cook Islands"""

    COL = "COL"
    """Colombia"""

    COM = "COM"
    """Comoros"""

    CPV = "CPV"
    """Cabo Verde"""

    CRI = "CRI"
    """Costa Rica"""

    CUB = "CUB"
    """Cuba"""

    CUW = "CUW"
    """Curaçao"""

    CXR = "CXR"
    """Christmas Island"""

    CYM = "CYM"
    """Cayman Islands"""

    CYP = "CYP"
    """Cyprus"""

    CZE = "CZE"
    """Czechia"""

    DEU = "DEU"
    """Germany"""

    DJI = "DJI"
    """Djibouti"""

    DMA = "DMA"
    """Dominica"""

    DNK = "DNK"
    """Denmark"""

    DOM = "DOM"
    """Dominican Republic"""

    DZA = "DZA"
    """Algeria"""

    ECU = "ECU"
    """Ecuador"""

    EGY = "EGY"
    """Egypt"""

    ERI = "ERI"
    """Eritrea"""

    ESH = "ESH"
    """Western Sahara"""

    ESP = "ESP"
    """Spain"""

    EST = "EST"
    """Estonia"""

    ETH = "ETH"
    """Ethiopia"""

    FIN = "FIN"
    """Finland"""

    FJI = "FJI"
    """Fiji"""

    FLK = "FLK"
    """Falkland Islands (Malvinas)"""

    FRA = "FRA"
    """France"""

    FRO = "FRO"
    """Faroe Islands"""

    FSM = "FSM"
    """Micronesia (Federated States of)"""

    GAB = "GAB"
    """Gabon"""

    GBR = "GBR"
    """United Kingdom of Great Britain and Northern Ireland"""

    GEO = "GEO"
    """Georgia"""

    GGY = "GGY"
    """Guernsey"""

    GHA = "GHA"
    """Ghana"""

    GIB = "GIB"
    """Gibraltar"""

    GIN = "GIN"
    """Guinea"""

    GLP = "GLP"
    """Guadeloupe"""

    GMB = "GMB"
    """Gambia"""

    GNB = "GNB"
    """Guinea-Bissau"""

    GNQ = "GNQ"
    """Equatorial Guinea"""

    GRC = "GRC"
    """Greece"""

    GRD = "GRD"
    """Grenada"""

    GRL = "GRL"
    """Greenland"""

    GTM = "GTM"
    """Guatemala"""

    GUF = "GUF"
    """French Guiana"""

    GUM = "GUM"
    """Guam"""

    GUY = "GUY"
    """Guyana"""

    HKG = "HKG"
    """Hong Kong"""

    HMD = "HMD"
    """Heard Island and McDonald Islands"""

    HND = "HND"
    """Honduras"""

    HRV = "HRV"
    """Croatia"""

    HTI = "HTI"
    """Haiti"""

    HUN = "HUN"
    """Hungary"""

    IDN = "IDN"
    """Indonesia"""

    IMN = "IMN"
    """Isle of Man"""

    IND = "IND"
    """India"""

    IOT = "IOT"
    """British Indian Ocean Territory"""

    IRL = "IRL"
    """Ireland"""

    IRN = "IRN"
    """Iran (Islamic Republic of)"""

    IRQ = "IRQ"
    """Iraq"""

    ISL = "ISL"
    """Iceland"""

    ISR = "ISR"
    """Israel"""

    ITA = "ITA"
    """Italy"""

    JAM = "JAM"
    """Jamaica"""

    JEY = "JEY"
    """Jersey"""

    JOR = "JOR"
    """Jordan"""

    JPN = "JPN"
    """Japan"""

    KAZ = "KAZ"
    """Kazakhstan"""

    KEN = "KEN"
    """Kenya"""

    KGZ = "KGZ"
    """Kyrgyzstan"""

    KHM = "KHM"
    """Cambodia"""

    KIR = "KIR"
    """Kiribati"""

    KNA = "KNA"
    """Saint Kitts and Nevis"""

    KOR = "KOR"
    """Korea, Republic of"""

    KWT = "KWT"
    """Kuwait"""

    LAO = "LAO"
    """Lao People's Democratic Republic"""

    LBN = "LBN"
    """Lebanon"""

    LBR = "LBR"
    """Liberia"""

    LBY = "LBY"
    """Libya"""

    LCA = "LCA"
    """Saint Lucia"""

    LIE = "LIE"
    """Liechtenstein"""

    LKA = "LKA"
    """Sri Lanka"""

    LSO = "LSO"
    """Lesotho"""

    LTU = "LTU"
    """Lithuania"""

    LUX = "LUX"
    """Luxembourg"""

    LVA = "LVA"
    """Latvia"""

    MAC = "MAC"
    """Macao"""

    MAF = "MAF"
    """Saint Martin (French part)"""

    MAR = "MAR"
    """Morocco"""

    MCO = "MCO"
    """Monaco"""

    MDA = "MDA"
    """Moldova, Republic of"""

    MDG = "MDG"
    """Madagascar"""

    MDV = "MDV"
    """Maldives"""

    MEX = "MEX"
    """Mexico"""

    MHL = "MHL"
    """Marshall Islands"""

    MKD = "MKD"
    """North Macedonia"""

    MLI = "MLI"
    """Mali"""

    MLT = "MLT"
    """Malta"""

    MMR = "MMR"
    """Myanmar"""

    MNE = "MNE"
    """Montenegro"""

    MNG = "MNG"
    """Mongolia"""

    MNP = "MNP"
    """Northern Mariana Islands"""

    MOZ = "MOZ"
    """Mozambique"""

    MRT = "MRT"
    """Mauritania"""

    MSR = "MSR"
    """Montserrat"""

    MTQ = "MTQ"
    """Martinique"""

    MUS = "MUS"
    """Mauritius"""

    MWI = "MWI"
    """Malawi"""

    MYS = "MYS"
    """Malaysia"""

    MYT = "MYT"
    """Mayotte"""

    NAM = "NAM"
    """Namibia"""

    NCL = "NCL"
    """New Caledonia"""

    NER = "NER"
    """Niger"""

    NFK = "NFK"
    """Norfolk Island"""

    NGA = "NGA"
    """Nigeria"""

    NIC = "NIC"
    """Nicaragua"""

    NIU = "NIU"
    """Niue"""

    NLD = "NLD"
    """Netherlands, Kingdom of the"""

    NOR = "NOR"
    """Norway"""

    NPL = "NPL"
    """Nepal"""

    NRU = "NRU"
    """Nauru"""

    NZL = "NZL"
    """New Zealand"""

    OMN = "OMN"
    """Oman"""

    PAK = "PAK"
    """Pakistan"""

    PAN = "PAN"
    """Panama"""

    PCN = "PCN"
    """Pitcairn"""

    PER = "PER"
    """Peru"""

    PHL = "PHL"
    """Philippines"""

    PLW = "PLW"
    """Palau"""

    PNG = "PNG"
    """Papua New Guinea"""

    POL = "POL"
    """Poland"""

    PRI = "PRI"
    """Puerto Rico"""

    PRK = "PRK"
    """Korea (Democratic People's Republic of)"""

    PRT = "PRT"
    """Portugal"""

    PRY = "PRY"
    """Paraguay"""

    PSE = "PSE"
    """Palestine, State of"""

    PYF = "PYF"
    """French Polynesia"""

    QAT = "QAT"
    """Qatar"""

    REU = "REU"
    """Réunion"""

    ROU = "ROU"
    """Romania"""

    RUS = "RUS"
    """Russian Federation"""

    RWA = "RWA"
    """Rwanda"""

    SAU = "SAU"
    """Saudi Arabia"""

    SDN = "SDN"
    """Sudan"""

    SEN = "SEN"
    """Senegal"""

    SGP = "SGP"
    """Singapore"""

    SGS = "SGS"
    """South Georgia and the South Sandwich Islands"""

    SHN = "SHN"
    """Saint Helena, Ascension and Tristan da Cunha"""

    SJM = "SJM"
    """Svalbard and Jan Mayen"""

    SLB = "SLB"
    """Solomon Islands"""

    SLE = "SLE"
    """Sierra Leone"""

    SLV = "SLV"
    """El Salvador"""

    SMR = "SMR"
    """San Marino"""

    SOM = "SOM"
    """Somalia"""

    SPM = "SPM"
    """Saint Pierre and Miquelon"""

    SRB = "SRB"
    """Serbia"""

    SSD = "SSD"
    """South Sudan"""

    STP = "STP"
    """Sao Tome and Principe"""

    SUR = "SUR"
    """Suriname"""

    SVK = "SVK"
    """Slovakia"""

    SVN = "SVN"
    """Slovenia"""

    SWE = "SWE"
    """Sweden"""

    SWZ = "SWZ"
    """Eswatini"""

    SXM = "SXM"
    """Sint Maarten (Dutch part)"""

    SYC = "SYC"
    """Seychelles"""

    SYR = "SYR"
    """Syrian Arab Republic"""

    TCA = "TCA"
    """Turks and Caicos Islands"""

    TCD = "TCD"
    """Chad"""

    TGO = "TGO"
    """Togo"""

    THA = "THA"
    """Thailand"""

    TJK = "TJK"
    """Tajikistan"""

    TKL = "TKL"
    """Tokelau"""

    TKM = "TKM"
    """Turkmenistan"""

    TLS = "TLS"
    """Timor-Leste"""

    TON = "TON"
    """Tonga"""

    TTO = "TTO"
    """Trinidad and Tobago"""

    TUN = "TUN"
    """Tunisia"""

    TUR = "TUR"
    """Türkiye"""

    TUV = "TUV"
    """Tuvalu"""

    TWN = "TWN"
    """Taiwan, Province of China"""

    TZA = "TZA"
    """Tanzania, United Republic of"""

    UGA = "UGA"
    """Uganda"""

    UKR = "UKR"
    """Ukraine"""

    UMI = "UMI"
    """United States Minor Outlying Islands"""

    URY = "URY"
    """Uruguay"""

    USA = "USA"
    """United States of America"""

    UZB = "UZB"
    """Uzbekistan"""

    VAT = "VAT"
    """Holy See"""

    VCT = "VCT"
    """Saint Vincent and the Grenadines"""

    VEN = "VEN"
    """Venezuela (Bolivarian Republic of)"""

    VGB = "VGB"
    """Virgin Islands (British)"""

    VIR = "VIR"
    """Virgin Islands (U.S.)"""

    VNM = "VNM"
    """Viet Nam"""

    VUT = "VUT"
    """Vanuatu"""

    WLF = "WLF"
    """Wallis and Futuna"""

    WSM = "WSM"
    """Samoa"""

    YEM = "YEM"
    """Yemen"""

    ZAF = "ZAF"
    """South Africa"""

    ZMB = "ZMB"
    """Zambia"""

    ZWE = "ZWE"
    """Zimbabwe"""

    @classmethod
    def _missing_(cls, value: object) -> CountryAlpha3 | None:
        return lookup_alpha_member(cls, value, 3)

    @classmethod
    def all(cls) -> tuple[CountryAlpha3, ...]:
        """Every alpha-3 code, in table order."""
        return tuple(info.alpha3 for info in get_tables().countries.values())

    @classmethod
    def parse(cls, text: str) -> CountryAlpha3:
        """Parse an alpha-3 code, ignoring case.

        Raises:
            InvalidCodeError: If text is not a known alpha-3 code
        """
        member = lookup_alpha_member(cls, text, 3)
        if member is None:
            raise InvalidCodeError(Domain.COUNTRY, text)
        return member

    @classmethod
    def from_numeric(cls, value: int) -> CountryAlpha3:
        """Resolve an ISO 3166-1 numeric code to its alpha-3 code.

        Raises:
            InvalidNumericCodeError: If value is not an assigned numeric code
        """
        return _country_from_numeric(value).alpha3

    @property
    def country(self) -> Country:
        """The country this code identifies."""
        return get_tables().country_by_alpha3[self]

    @property
    def alpha2(self) -> CountryCode:
        return self.country.code

    @property
    def numeric(self) -> int:
        return self.country.numeric


def _country_from_numeric(value: object) -> Country:
    if is_numeric_code(value):
        country = get_tables().country_by_numeric.get(value)
        if country is not None:
            return country
    raise InvalidNumericCodeError(Domain.COUNTRY, value)


# ============================================================================
# INFO RECORD
# ============================================================================


@dataclass(frozen=True, slots=True)
class CountryInfo:
    """ISO 3166-1 country data.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        code: Alpha-2 code (e.g., 'US').
        alpha3: Alpha-3 code (e.g., 'USA').
        numeric: Numeric code (e.g., 840).
        name: English short name.
        currencies: Currencies in circulation.
        languages: Languages spoken.
    """

    code: CountryCode
    alpha3: CountryAlpha3
    numeric: int
    name: str
    currencies: frozenset[CurrencyCode]
    languages: frozenset[LanguageCode]


# ============================================================================
# ENTITY
# ============================================================================


class Country(Enum):
    """A country or territory, one member per ISO 3166-1 entry.

    Each member's value is its CountryCode, so Country(CountryCode.US) is
    Country.US. str() gives the English name; Enum's own .name stays the
    member identifier, and the English name is display_name.
    """

    AD = CountryCode.AD
    AE = CountryCode.AE
    AF = CountryCode.AF
    AG = CountryCode.AG
    AI = CountryCode.AI
    AL = CountryCode.AL
    AM = CountryCode.AM
    AO = CountryCode.AO
    AQ = CountryCode.AQ
    AR = CountryCode.AR
    AS = CountryCode.AS
    AT = CountryCode.AT
    AU = CountryCode.AU
    AW = CountryCode.AW
    AX = CountryCode.AX
    AZ = CountryCode.AZ
    BA = CountryCode.BA
    BB = CountryCode.BB
    BD = CountryCode.BD
    BE = CountryCode.BE
    BF = CountryCode.BF
    BG = CountryCode.BG
    BH = CountryCode.BH
    BI = CountryCode.BI
    BJ = CountryCode.BJ
    BL = CountryCode.BL
    BM = CountryCode.BM
    BN = CountryCode.BN
    BO = CountryCode.BO
    BQ = CountryCode.BQ
    BR = CountryCode.BR
    BS = CountryCode.BS
    BT = CountryCode.BT
    BV = CountryCode.BV
    BW = CountryCode.BW
    BY = CountryCode.BY
    BZ = CountryCode.BZ
    CA = CountryCode.CA
    CC = CountryCode.CC
    CD = CountryCode.CD
    CF = CountryCode.CF
    CG = CountryCode.CG
    CH = CountryCode.CH
    CI = CountryCode.CI
    CK = CountryCode.CK
    CL = CountryCode.CL
    CM = CountryCode.CM
    CN = CountryCode.CN
    CO = CountryCode.CO
    CR = CountryCode.CR
    CU = CountryCode.CU
    CV = CountryCode.CV
    CW = CountryCode.CW
    CX = CountryCode.CX
    CY = CountryCode.CY
    CZ = CountryCode.CZ
    DE = CountryCode.DE
    DJ = CountryCode.DJ
    DK = CountryCode.DK
    DM = CountryCode.DM
    DO = CountryCode.DO
    DZ = CountryCode.DZ
    EC = CountryCode.EC
    EE = CountryCode.EE
    EG = CountryCode.EG
    EH = CountryCode.EH
    ER = CountryCode.ER
    ES = CountryCode.ES
    ET = CountryCode.ET
    FI = CountryCode.FI
    FJ = CountryCode.FJ
    FK = CountryCode.FK
    FM = CountryCode.FM
    FO = CountryCode.FO
    FR = CountryCode.FR
    GA = CountryCode.GA
    GB = CountryCode.GB
    GD = CountryCode.GD
    GE = CountryCode.GE
    GF = CountryCode.GF
    GG = CountryCode.GG
    GH = CountryCode.GH
    GI = CountryCode.GI
    GL = CountryCode.GL
    GM = CountryCode.GM
    GN = CountryCode.GN
    GP = CountryCode.GP
    GQ = CountryCode.GQ
    GR = CountryCode.GR
    GS = CountryCode.GS
    GT = CountryCode.GT
    GU = CountryCode.GU
    GW = CountryCode.GW
    GY = CountryCode.GY
    HK = CountryCode.HK
    HM = CountryCode.HM
    HN = CountryCode.HN
    HR = CountryCode.HR
    HT = CountryCode.HT
    HU = CountryCode.HU
    ID = CountryCode.ID
    IE = CountryCode.IE
    IL = CountryCode.IL
    IM = CountryCode.IM
    IN = CountryCode.IN
    IO = CountryCode.IO
    IQ = CountryCode.IQ
    IR = CountryCode.IR
    IS = CountryCode.IS
    IT = CountryCode.IT
    JE = CountryCode.JE
    JM = CountryCode.JM
    JO = CountryCode.JO
    JP = CountryCode.JP
    KE = CountryCode.KE
    KG = CountryCode.KG
    KH = CountryCode.KH
    KI = CountryCode.KI
    KM = CountryCode.KM
    KN = CountryCode.KN
    KP = CountryCode.KP
    KR = CountryCode.KR
    KW = CountryCode.KW
    KY = CountryCode.KY
    KZ = CountryCode.KZ
    LA = CountryCode.LA
    LB = CountryCode.LB
    LC = CountryCode.LC
    LI = CountryCode.LI
    LK = CountryCode.LK
    LR = CountryCode.LR
    LS = CountryCode.LS
    LT = CountryCode.LT
    LU = CountryCode.LU
    LV = CountryCode.LV
    LY = CountryCode.LY
    MA = CountryCode.MA
    MC = CountryCode.MC
    MD = CountryCode.MD
    ME = CountryCode.ME
    MF = CountryCode.MF
    MG = CountryCode.MG
    MH = CountryCode.MH
    MK = CountryCode.MK
    ML = CountryCode.ML
    MM = CountryCode.MM
    MN = CountryCode.MN
    MO = CountryCode.MO
    MP = CountryCode.MP
    MQ = CountryCode.MQ
    MR = CountryCode.MR
    MS = CountryCode.MS
    MT = CountryCode.MT
    MU = CountryCode.MU
    MV = CountryCode.MV
    MW = CountryCode.MW
    MX = CountryCode.MX
    MY = CountryCode.MY
    MZ = CountryCode.MZ
    NA = CountryCode.NA
    NC = CountryCode.NC
    NE = CountryCode.NE
    NF = CountryCode.NF
    NG = CountryCode.NG
    NI = CountryCode.NI
    NL = CountryCode.NL
    NO = CountryCode.NO
    NP = CountryCode.NP
    NR = CountryCode.NR
    NU = CountryCode.NU
    NZ = CountryCode.NZ
    OM = CountryCode.OM
    PA = CountryCode.PA
    PE = CountryCode.PE
    PF = CountryCode.PF
    PG = CountryCode.PG
    PH = CountryCode.PH
    PK = CountryCode.PK
    PL = CountryCode.PL
    PM = CountryCode.PM
    PN = CountryCode.PN
    PR = CountryCode.PR
    PS = CountryCode.PS
    PT = CountryCode.PT
    PW = CountryCode.PW
    PY = CountryCode.PY
    QA = CountryCode.QA
    RE = CountryCode.RE
    RO = CountryCode.RO
    RS = CountryCode.RS
    RU = CountryCode.RU
    RW = CountryCode.RW
    SA = CountryCode.SA
    SB = CountryCode.SB
    SC = CountryCode.SC
    SD = CountryCode.SD
    SE = CountryCode.SE
    SG = CountryCode.SG
    SH = CountryCode.SH
    SI = CountryCode.SI
    SJ = CountryCode.SJ
    SK = CountryCode.SK
    SL = CountryCode.SL
    SM = CountryCode.SM
    SN = CountryCode.SN
    SO = CountryCode.SO
    SR = CountryCode.SR
    SS = CountryCode.SS
    ST = CountryCode.ST
    SV = CountryCode.SV
    SX = CountryCode.SX
    SY = CountryCode.SY
    SZ = CountryCode.SZ
    TC = CountryCode.TC
    TD = CountryCode.TD
    TF = CountryCode.TF
    TG = CountryCode.TG
    TH = CountryCode.TH
    TJ = CountryCode.TJ
    TK = CountryCode.TK
    TL = CountryCode.TL
    TM = CountryCode.TM
    TN = CountryCode.TN
    TO = CountryCode.TO
    TR = CountryCode.TR
    TT = CountryCode.TT
    TV = CountryCode.TV
    TW = CountryCode.TW
    TZ = CountryCode.TZ
    UA = CountryCode.UA
    UG = CountryCode.UG
    UM = CountryCode.UM
    US = CountryCode.US
    UY = CountryCode.UY
    UZ = CountryCode.UZ
    VA = CountryCode.VA
    VC = CountryCode.VC
    VE = CountryCode.VE
    VG = CountryCode.VG
    VI = CountryCode.VI
    VN = CountryCode.VN
    VU = CountryCode.VU
    WF = CountryCode.WF
    WS = CountryCode.WS
    YE = CountryCode.YE
    YT = CountryCode.YT
    ZA = CountryCode.ZA
    ZM = CountryCode.ZM
    ZW = CountryCode.ZW

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def all(cls) -> tuple[Country, ...]:
        """Every country, in table order."""
        return tuple(get_tables().countries)

    @classmethod
    def from_name(cls, name: str) -> Country:
        """Look up a country by its exact English name.

        Matching is case-sensitive.

        Raises:
            InvalidNameError: If no country has this name
        """
        country = get_tables().country_by_name.get(name) if isinstance(name, str) else None
        if country is None:
            raise InvalidNameError(Domain.COUNTRY, name)
        return country

    @classmethod
    def from_code(cls, value: str | int) -> Country:
        """Look up a country by any code form.

        Accepts an alpha-2 or alpha-3 code in any case, a numeric code as an
        int, or a numeric code as digit text ('840', '004').

        Raises:
            InvalidCodeError: If alphabetic text matches no code
            InvalidNumericCodeError: If a numeric code is not assigned
        """
        if isinstance(value, str):
            numeric = parse_numeric_text(value)
            if numeric is not None:
                country = get_tables().country_by_numeric.get(numeric)
                if country is None:
                    raise InvalidNumericCodeError(Domain.COUNTRY, value)
                return country
            alpha2 = lookup_alpha_member(CountryCode, value, 2)
            if alpha2 is not None:
                return alpha2.country
            alpha3 = lookup_alpha_member(CountryAlpha3, value, 3)
            if alpha3 is not None:
                return alpha3.country
            raise InvalidCodeError(Domain.COUNTRY, value)
        if isinstance(value, int) and not isinstance(value, bool):
            return _country_from_numeric(value)
        raise InvalidCodeError(Domain.COUNTRY, value)

    @property
    def info(self) -> CountryInfo:
        """The full info record for this country."""
        return get_tables().countries[self]

    @property
    def display_name(self) -> str:
        return self.info.name

    @property
    def code(self) -> CountryCode:
        return self.info.code

    @property
    def alpha3(self) -> CountryAlpha3:
        return self.info.alpha3

    @property
    def numeric(self) -> int:
        return self.info.numeric

    @property
    def currencies(self) -> frozenset[CurrencyCode]:
        """Currencies in circulation in this country."""
        return self.info.currencies

    @property
    def languages(self) -> frozenset[LanguageCode]:
        """Languages spoken in this country."""
        return self.info.languages

    def localized_name(self, locale: str = DEFAULT_LOCALE) -> str | None:
        """CLDR display name in the given locale.

        Raises:
            BabelImportError: If Babel not installed.
        """
        from isosphere.localization import country_name  # noqa: PLC0415 - optional Babel

        return country_name(self.info.code, locale)
