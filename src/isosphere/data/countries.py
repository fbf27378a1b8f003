"""ISO 3166-1 country dataset.

Sources: https://www.iso.org/iso-3166-country-codes.html and
https://en.wikipedia.org/wiki/ISO_3166-1.

Each record lists the currencies in circulation and the languages spoken,
which makes this table the authority for both relationships.
"""

# ruff: noqa: E501 - one record per line reads better than wrapped tuples

from .records import CountryRecord

__all__ = ["COUNTRY_RECORDS"]

COUNTRY_RECORDS: tuple[CountryRecord, ...] = (
    CountryRecord("AD", "AND", 20, "Andorra", ("EUR",), ("ca",)),
    CountryRecord("AE", "ARE", 784, "United Arab Emirates", ("AED",), ("ar",)),
    CountryRecord("AF", "AFG", 4, "Afghanistan", ("AFN",), ("fa", "ps")),
    CountryRecord("AG", "ATG", 28, "Antigua and Barbuda", ("XCD",), ("en",)),
    CountryRecord("AI", "AIA", 660, "Anguilla", ("XCD",), ("en",)),
    CountryRecord("AL", "ALB", 8, "Albania", ("ALL",), ("sq",)),
    CountryRecord("AM", "ARM", 51, "Armenia", ("AMD",), ("hy",)),
    CountryRecord("AO", "AGO", 24, "Angola", ("AOA",), ("pt",)),
    CountryRecord("AQ", "ATA", 10, "Antarctica", (), ()),
    CountryRecord("AR", "ARG", 32, "Argentina", ("ARS",), ("es",)),
    CountryRecord("AS", "ASM", 16, "American Samoa", ("USD",), ("en", "sm")),
    CountryRecord("AT", "AUT", 40, "Austria", ("EUR",), ("de",)),
    CountryRecord("AU", "AUS", 36, "Australia", ("AUD",), ("en",)),
    CountryRecord("AW", "ABW", 533, "Aruba", ("AWG",), ("nl",)),
    CountryRecord("AX", "ALA", 248, "Åland Islands", ("EUR",), ("sv",)),
    CountryRecord("AZ", "AZE", 31, "Azerbaijan", ("AZN",), ("az",)),
    CountryRecord("BA", "BIH", 70, "Bosnia and Herzegovina", ("BAM",), ("bs", "hr", "sr")),
    CountryRecord("BB", "BRB", 52, "Barbados", ("BBD",), ("en",)),
    CountryRecord("BD", "BGD", 50, "Bangladesh", ("BDT",), ("bn",)),
    CountryRecord("BE", "BEL", 56, "Belgium", ("EUR",), ("de", "fr", "nl")),
    CountryRecord("BF", "BFA", 854, "Burkina Faso", ("XOF",), ("fr",)),
    CountryRecord("BG", "BGR", 100, "Bulgaria", ("BGN",), ("bg",)),
    CountryRecord("BH", "BHR", 48, "Bahrain", ("BHD",), ("ar",)),
    CountryRecord("BI", "BDI", 108, "Burundi", ("BIF",), ("en", "fr", "rn")),
    CountryRecord("BJ", "BEN", 204, "Benin", ("XOF",), ("fr",)),
    CountryRecord("BL", "BLM", 652, "Saint Barthélemy", ("EUR",), ("fr",)),
    CountryRecord("BM", "BMU", 60, "Bermuda", ("BMD",), ("en",)),
    CountryRecord("BN", "BRN", 96, "Brunei Darussalam", ("BND",), ("ms",)),
    CountryRecord("BO", "BOL", 68, "Bolivia (Plurinational State of)", ("BOB", "BOV"), ("ay", "es", "gn", "qu")),
    CountryRecord("BQ", "BES", 535, "Bonaire, Sint Eustatius and Saba", ("USD",), ("nl",)),
    CountryRecord("BR", "BRA", 76, "Brazil", ("BRL",), ("pt",)),
    CountryRecord("BS", "BHS", 44, "Bahamas", ("BSD",), ("en",)),
    CountryRecord("BT", "BTN", 64, "Bhutan", ("BTN", "INR"), ("dz",)),
    CountryRecord("BV", "BVT", 74, "Bouvet Island", ("NOK",), ("no",)),
    CountryRecord("BW", "BWA", 72, "Botswana", ("BWP",), ("en",)),
    CountryRecord("BY", "BLR", 112, "Belarus", ("BYN",), ("be", "ru")),
    CountryRecord("BZ", "BLZ", 84, "Belize", ("BZD",), ("en",)),
    CountryRecord("CA", "CAN", 124, "Canada", ("CAD",), ("en", "fr")),
    CountryRecord("CC", "CCK", 166, "Cocos (Keeling) Islands", ("AUD",), ("en", "ms")),
    CountryRecord("CD", "COD", 180, "Congo, Democratic Republic of the", ("CDF",), ("fr",)),
    CountryRecord("CF", "CAF", 140, "Central African Republic", ("XAF",), ("fr", "sg")),
    CountryRecord("CG", "COG", 178, "Congo", ("XAF",), ("fr",)),
    CountryRecord("CH", "CHE", 756, "Switzerland", ("CHE", "CHF", "CHW"), ("de", "fr", "it", "rm")),
    CountryRecord("CI", "CIV", 384, "Côte d'Ivoire", ("XOF",), ("fr",)),
    CountryRecord("CK", "COK", 184, "Cook Islands", ("NZD",), ("en",)),
    CountryRecord("CL", "CHL", 152, "Chile", ("CLF", "CLP"), ("es",)),
    CountryRecord("CM", "CMR", 120, "Cameroon", ("XAF",), ("en", "fr")),
    CountryRecord("CN", "CHN", 156, "China", ("CNY",), ("zh",)),
    CountryRecord("CO", "COL", 170, "Colombia", ("COP", "COU"), ("es",)),
    CountryRecord("CR", "CRI", 188, "Costa Rica", ("CRC",), ("es",)),
    CountryRecord("CU", "CUB", 192, "Cuba", ("CUP",), ("es",)),
    CountryRecord("CV", "CPV", 132, "Cabo Verde", ("CVE",), ("pt",)),
    CountryRecord("CW", "CUW", 531, "Curaçao", ("ANG",), ("en", "nl")),
    CountryRecord("CX", "CXR", 162, "Christmas Island", ("AUD",), ("en", "ms", "zh")),
    CountryRecord("CY", "CYP", 196, "Cyprus", ("EUR",), ("el", "tr")),
    CountryRecord("CZ", "CZE", 203, "Czechia", ("CZK",), ("cs", "sk")),
    CountryRecord("DE", "DEU", 276, "Germany", ("EUR",), ("de",)),
    CountryRecord("DJ", "DJI", 262, "Djibouti", ("DJF",), ("ar", "fr")),
    CountryRecord("DK", "DNK", 208, "Denmark", ("DKK",), ("da",)),
    CountryRecord("DM", "DMA", 212, "Dominica", ("XCD",), ("en",)),
    CountryRecord("DO", "DOM", 214, "Dominican Republic", ("DOP",), ("es",)),
    CountryRecord("DZ", "DZA", 12, "Algeria", ("DZD",), ("ar",)),
    CountryRecord("EC", "ECU", 218, "Ecuador", ("USD",), ("es", "qu")),
    CountryRecord("EE", "EST", 233, "Estonia", ("EUR",), ("et",)),
    CountryRecord("EG", "EGY", 818, "Egypt", ("EGP",), ("ar",)),
    CountryRecord("EH", "ESH", 732, "Western Sahara", ("MAD",), ("ar", "es")),
    CountryRecord("ER", "ERI", 232, "Eritrea", ("ERN",), ("ti",)),
    CountryRecord("ES", "ESP", 724, "Spain", ("EUR",), ("es",)),
    CountryRecord("ET", "ETH", 231, "Ethiopia", ("ETB",), ("aa", "am", "om", "so", "ti")),
    CountryRecord("FI", "FIN", 246, "Finland", ("EUR",), ("fi", "sv")),
    CountryRecord("FJ", "FJI", 242, "Fiji", ("FJD",), ("en", "fj")),
    CountryRecord("FK", "FLK", 238, "Falkland Islands (Malvinas)", ("FKP",), ("en",)),
    CountryRecord("FM", "FSM", 583, "Micronesia (Federated States of)", ("USD",), ("en",)),
    CountryRecord("FO", "FRO", 234, "Faroe Islands", ("DKK",), ("da", "fo")),
    CountryRecord("FR", "FRA", 250, "France", ("EUR",), ("fr",)),
    CountryRecord("GA", "GAB", 266, "Gabon", ("XAF",), ("fr",)),
    CountryRecord("GB", "GBR", 826, "United Kingdom of Great Britain and Northern Ireland", ("GBP",), ("en",)),
    CountryRecord("GD", "GRD", 308, "Grenada", ("XCD",), ("en",)),
    CountryRecord("GE", "GEO", 268, "Georgia", ("GEL",), ("ka",)),
    CountryRecord("GF", "GUF", 254, "French Guiana", ("EUR",), ("fr",)),
    CountryRecord("GG", "GGY", 831, "Guernsey", ("GBP",), ("en",)),
    CountryRecord("GH", "GHA", 288, "Ghana", ("GHS",), ("en",)),
    CountryRecord("GI", "GIB", 292, "Gibraltar", ("GIP",), ("en",)),
    CountryRecord("GL", "GRL", 304, "Greenland", ("DKK",), ("da", "en")),
    CountryRecord("GM", "GMB", 270, "Gambia", ("GMD",), ("en",)),
    CountryRecord("GN", "GIN", 324, "Guinea", ("GNF",), ("fr",)),
    CountryRecord("GP", "GLP", 312, "Guadeloupe", ("EUR",), ("fr",)),
    CountryRecord("GQ", "GNQ", 226, "Equatorial Guinea", ("XAF",), ("es", "fr", "pt")),
    CountryRecord("GR", "GRC", 300, "Greece", ("EUR",), ("el",)),
    CountryRecord("GS", "SGS", 239, "South Georgia and the South Sandwich Islands", (), ("en",)),
    CountryRecord("GT", "GTM", 320, "Guatemala", ("GTQ",), ("es",)),
    CountryRecord("GU", "GUM", 316, "Guam", ("USD",), ("ch", "en")),
    CountryRecord("GW", "GNB", 624, "Guinea-Bissau", ("XOF",), ("pt",)),
    CountryRecord("GY", "GUY", 328, "Guyana", ("GYD",), ("en",)),
    CountryRecord("HK", "HKG", 344, "Hong Kong", ("HKD",), ("en", "zh")),
    CountryRecord("HM", "HMD", 334, "Heard Island and McDonald Islands", ("AUD",), ("en",)),
    CountryRecord("HN", "HND", 340, "Honduras", ("HNL",), ("es",)),
    CountryRecord("HR", "HRV", 191, "Croatia", ("EUR",), ("hr",)),
    CountryRecord("HT", "HTI", 332, "Haiti", ("HTG",), ("fr", "ht")),
    CountryRecord("HU", "HUN", 348, "Hungary", ("HUF",), ("hu",)),
    CountryRecord("ID", "IDN", 360, "Indonesia", ("IDR",), ("id",)),
    CountryRecord("IE", "IRL", 372, "Ireland", ("EUR",), ("en", "ga")),
    CountryRecord("IL", "ISR", 376, "Israel", ("ILS",), ("he",)),
    CountryRecord("IM", "IMN", 833, "Isle of Man", ("GBP",), ("en", "gv")),
    CountryRecord("IN", "IND", 356, "India", ("INR",), ("en", "hi")),
    CountryRecord("IO", "IOT", 86, "British Indian Ocean Territory", ("USD",), ("en",)),
    CountryRecord("IQ", "IRQ", 368, "Iraq", ("IQD",), ("ar", "ku")),
    CountryRecord("IR", "IRN", 364, "Iran (Islamic Republic of)", ("IRR",), ("fa",)),
    CountryRecord("IS", "ISL", 352, "Iceland", ("ISK",), ("is",)),
    CountryRecord("IT", "ITA", 380, "Italy", ("EUR",), ("it",)),
    CountryRecord("JE", "JEY", 832, "Jersey", ("GBP",), ("en", "fr")),
    CountryRecord("JM", "JAM", 388, "Jamaica", ("JMD",), ("en",)),
    CountryRecord("JO", "JOR", 400, "Jordan", ("JOD",), ("ar",)),
    CountryRecord("JP", "JPN", 392, "Japan", ("JPY",), ("ja",)),
    CountryRecord("KE", "KEN", 404, "Kenya", ("KES",), ("en", "sw")),
    CountryRecord("KG", "KGZ", 417, "Kyrgyzstan", ("KGS",), ("ky", "ru")),
    CountryRecord("KH", "KHM", 116, "Cambodia", ("KHR",), ("km",)),
    CountryRecord("KI", "KIR", 296, "Kiribati", ("AUD",), ("en",)),
    CountryRecord("KM", "COM", 174, "Comoros", ("KMF",), ("ar", "fr")),
    CountryRecord("KN", "KNA", 659, "Saint Kitts and Nevis", ("XCD",), ("en",)),
    CountryRecord("KP", "PRK", 408, "Korea (Democratic People's Republic of)", ("KPW",), ("ko",)),
    CountryRecord("KR", "KOR", 410, "Korea, Republic of", ("KRW",), ("ko",)),
    CountryRecord("KW", "KWT", 414, "Kuwait", ("KWD",), ("ar",)),
    CountryRecord("KY", "CYM", 136, "Cayman Islands", ("KYD",), ("en",)),
    CountryRecord("KZ", "KAZ", 398, "Kazakhstan", ("KZT",), ("kk", "ru")),
    CountryRecord("LA", "LAO", 418, "Lao People's Democratic Republic", ("LAK",), ("lo",)),
    CountryRecord("LB", "LBN", 422, "Lebanon", ("LBP",), ("ar",)),
    CountryRecord("LC", "LCA", 662, "Saint Lucia", ("XCD",), ("en",)),
    CountryRecord("LI", "LIE", 438, "Liechtenstein", ("CHF",), ("de",)),
    CountryRecord("LK", "LKA", 144, "Sri Lanka", ("LKR",), ("si", "ta")),
    CountryRecord("LR", "LBR", 430, "Liberia", ("LRD",), ("en",)),
    CountryRecord("LS", "LSO", 426, "Lesotho", ("LSL", "ZAR"), ("en", "st")),
    CountryRecord("LT", "LTU", 440, "Lithuania", ("EUR",), ("lt",)),
    CountryRecord("LU", "LUX", 442, "Luxembourg", ("EUR",), ("de", "fr", "lb")),
    CountryRecord("LV", "LVA", 428, "Latvia", ("EUR",), ("lv",)),
    CountryRecord("LY", "LBY", 434, "Libya", ("LYD",), ("ar",)),
    CountryRecord("MA", "MAR", 504, "Morocco", ("MAD",), ("ar",)),
    CountryRecord("MC", "MCO", 492, "Monaco", ("EUR",), ("fr",)),
    CountryRecord("MD", "MDA", 498, "Moldova, Republic of", ("MDL",), ("ro",)),
    CountryRecord("ME", "MNE", 499, "Montenegro", ("EUR",), ("hr", "sr")),
    CountryRecord("MF", "MAF", 663, "Saint Martin (French part)", ("EUR",), ("fr",)),
    CountryRecord("MG", "MDG", 450, "Madagascar", ("MGA",), ("fr", "mg")),
    CountryRecord("MH", "MHL", 584, "Marshall Islands", ("USD",), ("en", "mh")),
    CountryRecord("MK", "MKD", 807, "North Macedonia", ("MKD",), ("mk", "sq")),
    CountryRecord("ML", "MLI", 466, "Mali", ("XOF",), ("bm", "ff")),
    CountryRecord("MM", "MMR", 104, "Myanmar", ("MMK",), ("my",)),
    CountryRecord("MN", "MNG", 496, "Mongolia", ("MNT",), ("mn",)),
    CountryRecord("MO", "MAC", 446, "Macao", ("MOP",), ("pt", "zh")),
    CountryRecord("MP", "MNP", 580, "Northern Mariana Islands", ("USD",), ("ch", "en")),
    CountryRecord("MQ", "MTQ", 474, "Martinique", ("EUR",), ("fr",)),
    CountryRecord("MR", "MRT", 478, "Mauritania", ("MRU",), ("ar",)),
    CountryRecord("MS", "MSR", 500, "Montserrat", ("XCD",), ("en",)),
    CountryRecord("MT", "MLT", 470, "Malta", ("EUR",), ("en", "mt")),
    CountryRecord("MU", "MUS", 480, "Mauritius", ("MUR",), ("en",)),
    CountryRecord("MV", "MDV", 462, "Maldives", ("MVR",), ("dv",)),
    CountryRecord("MW", "MWI", 454, "Malawi", ("MWK",), ("en", "ny")),
    CountryRecord("MX", "MEX", 484, "Mexico", ("MXN", "MXV"), ("es",)),
    CountryRecord("MY", "MYS", 458, "Malaysia", ("MYR",), ("ms",)),
    CountryRecord("MZ", "MOZ", 508, "Mozambique", ("MZN",), ("pt",)),
    CountryRecord("NA", "NAM", 516, "Namibia", ("NAD", "ZAR"), ("en",)),
    CountryRecord("NC", "NCL", 540, "New Caledonia", ("XPF",), ("fr",)),
    CountryRecord("NE", "NER", 562, "Niger", ("XOF",), ("fr",)),
    CountryRecord("NF", "NFK", 574, "Norfolk Island", ("AUD",), ("en",)),
    CountryRecord("NG", "NGA", 566, "Nigeria", ("NGN",), ("en",)),
    CountryRecord("NI", "NIC", 558, "Nicaragua", ("NIO",), ("es",)),
    CountryRecord("NL", "NLD", 528, "Netherlands, Kingdom of the", ("EUR",), ("nl",)),
    CountryRecord("NO", "NOR", 578, "Norway", ("NOK",), ("no",)),
    CountryRecord("NP", "NPL", 524, "Nepal", ("NPR",), ("ne",)),
    CountryRecord("NR", "NRU", 520, "Nauru", ("AUD",), ("en", "na")),
    CountryRecord("NU", "NIU", 570, "Niue", ("NZD",), ("en",)),
    CountryRecord("NZ", "NZL", 554, "New Zealand", ("NZD",), ("en", "mi")),
    CountryRecord("OM", "OMN", 512, "Oman", ("OMR",), ("ar",)),
    CountryRecord("PA", "PAN", 591, "Panama", ("PAB", "USD"), ("es",)),
    CountryRecord("PE", "PER", 604, "Peru", ("PEN",), ("ay", "es", "qu")),
    CountryRecord("PF", "PYF", 258, "French Polynesia", ("XPF",), ("fr",)),
    CountryRecord("PG", "PNG", 598, "Papua New Guinea", ("PGK",), ("en", "ho")),
    CountryRecord("PH", "PHL", 608, "Philippines", ("PHP",), ("en", "tl")),
    CountryRecord("PK", "PAK", 586, "Pakistan", ("PKR",), ("en", "ur")),
    CountryRecord("PL", "POL", 616, "Poland", ("PLN",), ("pl",)),
    CountryRecord("PM", "SPM", 666, "Saint Pierre and Miquelon", ("EUR",), ("fr",)),
    CountryRecord("PN", "PCN", 612, "Pitcairn", ("NZD",), ("en",)),
    CountryRecord("PR", "PRI", 630, "Puerto Rico", ("USD",), ("en", "es")),
    CountryRecord("PS", "PSE", 275, "Palestine, State of", (), ("ar",)),
    CountryRecord("PT", "PRT", 620, "Portugal", ("EUR",), ("pt",)),
    CountryRecord("PW", "PLW", 585, "Palau", ("USD",), ("en",)),
    CountryRecord("PY", "PRY", 600, "Paraguay", ("PYG",), ("es", "gn")),
    CountryRecord("QA", "QAT", 634, "Qatar", ("QAR",), ("ar",)),
    CountryRecord("RE", "REU", 638, "Réunion", ("EUR",), ("fr",)),
    CountryRecord("RO", "ROU", 642, "Romania", ("RON",), ("ro",)),
    CountryRecord("RS", "SRB", 688, "Serbia", ("RSD",), ("sr",)),
    CountryRecord("RU", "RUS", 643, "Russian Federation", ("RUB",), ("ru",)),
    CountryRecord("RW", "RWA", 646, "Rwanda", ("RWF",), ("en", "fr", "rw", "sw")),
    CountryRecord("SA", "SAU", 682, "Saudi Arabia", ("SAR",), ("ar",)),
    CountryRecord("SB", "SLB", 90, "Solomon Islands", ("SBD",), ("en",)),
    CountryRecord("SC", "SYC", 690, "Seychelles", ("SCR",), ("en", "fr")),
    CountryRecord("SD", "SDN", 729, "Sudan", ("SDG",), ("ar", "en")),
    CountryRecord("SE", "SWE", 752, "Sweden", ("SEK",), ("sv",)),
    CountryRecord("SG", "SGP", 702, "Singapore", ("SGD",), ("en", "ms", "ta", "zh")),
    CountryRecord("SH", "SHN", 654, "Saint Helena, Ascension and Tristan da Cunha", ("GBP", "SHP"), ("en",)),
    CountryRecord("SI", "SVN", 705, "Slovenia", ("EUR",), ("sl",)),
    CountryRecord("SJ", "SJM", 744, "Svalbard and Jan Mayen", ("NOK",), ("no",)),
    CountryRecord("SK", "SVK", 703, "Slovakia", ("EUR",), ("sk",)),
    CountryRecord("SL", "SLE", 694, "Sierra Leone", ("SLE", "SLL"), ("en",)),
    CountryRecord("SM", "SMR", 674, "San Marino", ("EUR",), ("it",)),
    CountryRecord("SN", "SEN", 686, "Senegal", ("XOF",), ("fr",)),
    CountryRecord("SO", "SOM", 706, "Somalia", ("SOS",), ("ar", "so")),
    CountryRecord("SR", "SUR", 740, "Suriname", ("SRD",), ("nl",)),
    CountryRecord("SS", "SSD", 728, "South Sudan", ("SSP",), ("en",)),
    CountryRecord("ST", "STP", 678, "Sao Tome and Principe", ("STN",), ("pt",)),
    CountryRecord("SV", "SLV", 222, "El Salvador", ("SVC", "USD"), ("es",)),
    CountryRecord("SX", "SXM", 534, "Sint Maarten (Dutch part)", ("ANG",), ("en", "nl")),
    CountryRecord("SY", "SYR", 760, "Syrian Arab Republic", ("SYP",), ("ar",)),
    CountryRecord("SZ", "SWZ", 748, "Eswatini", ("SZL", "ZAR"), ("en", "ss")),
    CountryRecord("TC", "TCA", 796, "Turks and Caicos Islands", ("USD",), ("en",)),
    CountryRecord("TD", "TCD", 148, "Chad", ("XAF",), ("ar", "fr")),
    CountryRecord("TF", "ATF", 260, "French Southern Territories", ("EUR",), ("fr",)),
    CountryRecord("TG", "TGO", 768, "Togo", ("XOF",), ("fr",)),
    CountryRecord("TH", "THA", 764, "Thailand", ("THB",), ("th",)),
    CountryRecord("TJ", "TJK", 762, "Tajikistan", ("TJS",), ("tg",)),
    CountryRecord("TK", "TKL", 772, "Tokelau", ("NZD",), ("en",)),
    CountryRecord("TL", "TLS", 626, "Timor-Leste", ("USD",), ("pt",)),
    CountryRecord("TM", "TKM", 795, "Turkmenistan", ("TMT",), ("tk",)),
    CountryRecord("TN", "TUN", 788, "Tunisia", ("TND",), ("ar",)),
    CountryRecord("TO", "TON", 776, "Tonga", ("TOP",), ("en", "to")),
    CountryRecord("TR", "TUR", 792, "Türkiye", ("TRY",), ("tr",)),
    CountryRecord("TT", "TTO", 780, "Trinidad and Tobago", ("TTD",), ("en",)),
    CountryRecord("TV", "TUV", 798, "Tuvalu", ("AUD",), ("en",)),
    CountryRecord("TW", "TWN", 158, "Taiwan, Province of China", ("TWD",), ("zh",)),
    CountryRecord("TZ", "TZA", 834, "Tanzania, United Republic of", ("TZS",), ("en", "sw")),
    CountryRecord("UA", "UKR", 804, "Ukraine", ("UAH",), ("uk",)),
    CountryRecord("UG", "UGA", 800, "Uganda", ("UGX",), ("en", "sw")),
    CountryRecord("UM", "UMI", 581, "United States Minor Outlying Islands", ("USD",), ("en",)),
    CountryRecord("US", "USA", 840, "United States of America", ("USD", "USN"), ("en",)),
    CountryRecord("UY", "URY", 858, "Uruguay", ("UYI", "UYU", "UYW"), ("es",)),
    CountryRecord("UZ", "UZB", 860, "Uzbekistan", ("UZS",), ("uz",)),
    CountryRecord("VA", "VAT", 336, "Holy See", ("EUR",), ("it", "la")),
    CountryRecord("VC", "VCT", 670, "Saint Vincent and the Grenadines", ("XCD",), ("en",)),
    CountryRecord("VE", "VEN", 862, "Venezuela (Bolivarian Republic of)", ("VED", "VES"), ("es",)),
    CountryRecord("VG", "VGB", 92, "Virgin Islands (British)", ("USD",), ("en",)),
    CountryRecord("VI", "VIR", 850, "Virgin Islands (U.S.)", ("USD",), ("en",)),
    CountryRecord("VN", "VNM", 704, "Viet Nam", ("VND",), ("vi",)),
    CountryRecord("VU", "VUT", 548, "Vanuatu", ("VUV",), ("bi", "en", "fr")),
    CountryRecord("WF", "WLF", 876, "Wallis and Futuna", ("XPF",), ("fr",)),
    CountryRecord("WS", "WSM", 882, "Samoa", ("WST",), ("en", "sm")),
    CountryRecord("YE", "YEM", 887, "Yemen", ("YER",), ("ar",)),
    CountryRecord("YT", "MYT", 175, "Mayotte", ("EUR",), ("fr",)),
    CountryRecord("ZA", "ZAF", 710, "South Africa", ("ZAR",), ("af", "en", "nr", "ss", "st", "tn", "ts", "ve", "xh", "zu")),
    CountryRecord("ZM", "ZMB", 894, "Zambia", ("ZMW",), ("en",)),
    CountryRecord("ZW", "ZWE", 716, "Zimbabwe", ("ZWL",), ("en", "nr", "ny", "sn", "st", "tn", "ve", "xh")),
)
