"""ISO 4217 currency dataset.

Sources: https://www.iso.org/iso-4217-currency-codes.html and
https://en.wikipedia.org/wiki/ISO_4217.

Countries using each currency are not listed here; see countries.py.
"""

from .records import CurrencyRecord

__all__ = ["CURRENCY_RECORDS"]

CURRENCY_RECORDS: tuple[CurrencyRecord, ...] = (
    CurrencyRecord("AED", 784, "United Arab Emirates dirham", 2),
    CurrencyRecord("AFN", 971, "Afghan afghani", 2),
    CurrencyRecord("ALL", 8, "Albanian lek", 2),
    CurrencyRecord("AMD", 51, "Armenian dram", 2),
    CurrencyRecord("ANG", 532, "Netherlands Antillean guilder", 2),
    CurrencyRecord("AOA", 973, "Angolan kwanza", 2),
    CurrencyRecord("ARS", 32, "Argentine peso", 2),
    CurrencyRecord("AUD", 36, "Australian dollar", 2),
    CurrencyRecord("AWG", 533, "Aruban florin", 2),
    CurrencyRecord("AZN", 944, "Azerbaijani manat", 2),
    CurrencyRecord("BAM", 977, "Bosnia and Herzegovina convertible mark", 2),
    CurrencyRecord("BBD", 52, "Barbados dollar", 2),
    CurrencyRecord("BDT", 50, "Bangladeshi taka", 2),
    CurrencyRecord("BGN", 975, "Bulgarian lev", 2),
    CurrencyRecord("BHD", 48, "Bahraini dinar", 3),
    CurrencyRecord("BIF", 108, "Burundian franc", 0),
    CurrencyRecord("BMD", 60, "Bermudian dollar", 2),
    CurrencyRecord("BND", 96, "Brunei dollar", 2),
    CurrencyRecord("BOB", 68, "Boliviano", 2),
    CurrencyRecord("BOV", 984, "Bolivian Mvdol", 2),
    CurrencyRecord("BRL", 986, "Brazilian real", 2),
    CurrencyRecord("BSD", 44, "Bahamian dollar", 2),
    CurrencyRecord("BTN", 64, "Bhutanese ngultrum", 2),
    CurrencyRecord("BWP", 72, "Botswana pula", 2),
    CurrencyRecord("BYN", 933, "Belarusian ruble", 2),
    CurrencyRecord("BZD", 84, "Belize dollar", 2),
    CurrencyRecord("CAD", 124, "Canadian dollar", 2),
    CurrencyRecord("CDF", 976, "Congolese franc", 2),
    CurrencyRecord("CHE", 947, "WIR euro", 2),
    CurrencyRecord("CHF", 756, "Swiss franc", 2),
    CurrencyRecord("CHW", 948, "WIR franc", 2),
    CurrencyRecord("CLF", 990, "Unidad de Fomento", 4),
    CurrencyRecord("CLP", 152, "Chilean peso", 0),
    CurrencyRecord("CNY", 156, "Renminbi", 2),
    CurrencyRecord("COP", 170, "Colombian peso", 2),
    CurrencyRecord("COU", 970, "Unidad de Valor Real (UVR)", 2),
    CurrencyRecord("CRC", 188, "Costa Rican colon", 2),
    CurrencyRecord("CUP", 192, "Cuban peso", 2),
    CurrencyRecord("CVE", 132, "Cape Verdean escudo", 2),
    CurrencyRecord("CZK", 203, "Czech koruna", 2),
    CurrencyRecord("DJF", 262, "Djiboutian franc", 0),
    CurrencyRecord("DKK", 208, "Danish krone", 2),
    CurrencyRecord("DOP", 214, "Dominican peso", 2),
    CurrencyRecord("DZD", 12, "Algerian dinar", 2),
    CurrencyRecord("EGP", 818, "Egyptian pound", 2),
    CurrencyRecord("ERN", 232, "Eritrean nakfa", 2),
    CurrencyRecord("ETB", 230, "Ethiopian birr", 2),
    CurrencyRecord("EUR", 978, "Euro", 2),
    CurrencyRecord("FJD", 242, "Fiji dollar", 2),
    CurrencyRecord("FKP", 238, "Falkland Islands pound", 2),
    CurrencyRecord("GBP", 826, "Pound sterling", 2),
    CurrencyRecord("GEL", 981, "Georgian lari", 2),
    CurrencyRecord("GHS", 936, "Ghanaian cedi", 2),
    CurrencyRecord("GIP", 292, "Gibraltar pound", 2),
    CurrencyRecord("GMD", 270, "Gambian dalasi", 2),
    CurrencyRecord("GNF", 324, "Guinean franc", 0),
    CurrencyRecord("GTQ", 320, "Guatemalan quetzal", 2),
    CurrencyRecord("GYD", 328, "Guyanese dollar", 2),
    CurrencyRecord("HKD", 344, "Hong Kong dollar", 2),
    CurrencyRecord("HNL", 340, "Honduran lempira", 2),
    CurrencyRecord("HTG", 332, "Haitian gourde", 2),
    CurrencyRecord("HUF", 348, "Hungarian forint", 2),
    CurrencyRecord("IDR", 360, "Indonesian rupiah", 2),
    CurrencyRecord("ILS", 376, "Israeli new shekel", 2),
    CurrencyRecord("INR", 356, "Indian rupee", 2),
    CurrencyRecord("IQD", 368, "Iraqi dinar", 3),
    CurrencyRecord("IRR", 364, "Iranian rial", 2),
    CurrencyRecord("ISK", 352, "Icelandic króna", 0),
    CurrencyRecord("JMD", 388, "Jamaican dollar", 2),
    CurrencyRecord("JOD", 400, "Jordanian dinar", 3),
    CurrencyRecord("JPY", 392, "Japanese yen", 0),
    CurrencyRecord("KES", 404, "Kenyan shilling", 2),
    CurrencyRecord("KGS", 417, "Kyrgyzstani som", 2),
    CurrencyRecord("KHR", 116, "Cambodian riel", 2),
    CurrencyRecord("KMF", 174, "Comoro franc", 0),
    CurrencyRecord("KPW", 408, "North Korean won", 2),
    CurrencyRecord("KRW", 410, "South Korean won", 0),
    CurrencyRecord("KWD", 414, "Kuwaiti dinar", 3),
    CurrencyRecord("KYD", 136, "Cayman Islands dollar", 2),
    CurrencyRecord("KZT", 398, "Kazakhstani tenge", 2),
    CurrencyRecord("LAK", 418, "Lao kip", 2),
    CurrencyRecord("LBP", 422, "Lebanese pound", 2),
    CurrencyRecord("LKR", 144, "Sri Lankan rupee", 2),
    CurrencyRecord("LRD", 430, "Liberian dollar", 2),
    CurrencyRecord("LSL", 426, "Lesotho loti", 2),
    CurrencyRecord("LYD", 434, "Libyan dinar", 3),
    CurrencyRecord("MAD", 504, "Moroccan dirham", 2),
    CurrencyRecord("MDL", 498, "Moldovan leu", 2),
    CurrencyRecord("MGA", 969, "Malagasy ariary", 2),
    CurrencyRecord("MKD", 807, "Macedonian denar", 2),
    CurrencyRecord("MMK", 104, "Myanmar kyat", 2),
    CurrencyRecord("MNT", 496, "Mongolian tögrög", 2),
    CurrencyRecord("MOP", 446, "Macanese pataca", 2),
    CurrencyRecord("MRU", 929, "Mauritanian ouguiya", 2),
    CurrencyRecord("MUR", 480, "Mauritian rupee", 2),
    CurrencyRecord("MVR", 462, "Maldivian rufiyaa", 2),
    CurrencyRecord("MWK", 454, "Malawian kwacha", 2),
    CurrencyRecord("MXN", 484, "Mexican peso", 2),
    CurrencyRecord("MXV", 979, "Mexican Unidad de Inversion (UDI)", 2),
    CurrencyRecord("MYR", 458, "Malaysian ringgit", 2),
    CurrencyRecord("MZN", 943, "Mozambican metical", 2),
    CurrencyRecord("NAD", 516, "Namibian dollar", 2),
    CurrencyRecord("NGN", 566, "Nigerian naira", 2),
    CurrencyRecord("NIO", 558, "Nicaraguan córdoba", 2),
    CurrencyRecord("NOK", 578, "Norwegian krone", 2),
    CurrencyRecord("NPR", 524, "Nepalese rupee", 2),
    CurrencyRecord("NZD", 554, "New Zealand dollar", 2),
    CurrencyRecord("OMR", 512, "Omani rial", 3),
    CurrencyRecord("PAB", 590, "Panamanian balboa", 2),
    CurrencyRecord("PEN", 604, "Peruvian sol", 2),
    CurrencyRecord("PGK", 598, "Papua New Guinean kina", 2),
    CurrencyRecord("PHP", 608, "Philippine peso", 2),
    CurrencyRecord("PKR", 586, "Pakistani rupee", 2),
    CurrencyRecord("PLN", 985, "Polish złoty", 2),
    CurrencyRecord("PYG", 600, "Paraguayan guaraní", 0),
    CurrencyRecord("QAR", 634, "Qatari riyal", 2),
    CurrencyRecord("RON", 946, "Romanian leu", 2),
    CurrencyRecord("RSD", 941, "Serbian dinar", 2),
    CurrencyRecord("RUB", 643, "Russian ruble", 2),
    CurrencyRecord("RWF", 646, "Rwandan franc", 0),
    CurrencyRecord("SAR", 682, "Saudi riyal", 2),
    CurrencyRecord("SBD", 90, "Solomon Islands dollar", 2),
    CurrencyRecord("SCR", 690, "Seychelles rupee", 2),
    CurrencyRecord("SDG", 938, "Sudanese pound", 2),
    CurrencyRecord("SEK", 752, "Swedish krona", 2),
    CurrencyRecord("SGD", 702, "Singapore dollar", 2),
    CurrencyRecord("SHP", 654, "Saint Helena pound", 2),
    CurrencyRecord("SLE", 925, "Sierra Leonean leone (new leone)", 2),
    CurrencyRecord("SLL", 694, "Sierra Leonean leone (old leone)", 2),
    CurrencyRecord("SOS", 706, "Somali shilling", 2),
    CurrencyRecord("SRD", 968, "Surinamese dollar", 2),
    CurrencyRecord("SSP", 728, "South Sudanese pound", 2),
    CurrencyRecord("STN", 930, "São Tomé and Príncipe dobra", 2),
    CurrencyRecord("SVC", 222, "Salvadoran colón", 2),
    CurrencyRecord("SYP", 760, "Syrian pound", 2),
    CurrencyRecord("SZL", 748, "Swazi lilangeni", 2),
    CurrencyRecord("THB", 764, "Thai baht", 2),
    CurrencyRecord("TJS", 972, "Tajikistani somoni", 2),
    CurrencyRecord("TMT", 934, "Turkmenistan manat", 2),
    CurrencyRecord("TND", 788, "Tunisian dinar", 3),
    CurrencyRecord("TOP", 776, "Tongan paʻanga", 2),
    CurrencyRecord("TRY", 949, "Turkish lira", 2),
    CurrencyRecord("TTD", 780, "Trinidad and Tobago dollar", 2),
    CurrencyRecord("TWD", 901, "New Taiwan dollar", 2),
    CurrencyRecord("TZS", 834, "Tanzanian shilling", 2),
    CurrencyRecord("UAH", 980, "Ukrainian hryvnia", 2),
    CurrencyRecord("UGX", 800, "Ugandan shilling", 0),
    CurrencyRecord("USD", 840, "United States dollar", 2),
    CurrencyRecord("USN", 997, "United States dollar (next day)", 2),
    CurrencyRecord("UYI", 940, "Uruguay Peso en Unidades Indexadas (URUIURUI)", 0),
    CurrencyRecord("UYU", 858, "Uruguayan peso", 2),
    CurrencyRecord("UYW", 927, "Unidad previsional", 4),
    CurrencyRecord("UZS", 860, "Uzbekistan sum", 2),
    CurrencyRecord("VED", 926, "Venezuelan digital bolívar", 2),
    CurrencyRecord("VES", 928, "Venezuelan sovereign bolívar", 2),
    CurrencyRecord("VND", 704, "Vietnamese đồng", 0),
    CurrencyRecord("VUV", 548, "Vanuatu vatu", 0),
    CurrencyRecord("WST", 882, "Samoan tala", 2),
    CurrencyRecord("XAF", 950, "CFA franc BEAC", 0),
    CurrencyRecord("XAG", 961, "Silver (one troy ounce)", 0),
    CurrencyRecord("XAU", 959, "Gold (one troy ounce)", 0),
    CurrencyRecord("XBA", 955, "European Composite Unit (EURCO)", 0),
    CurrencyRecord("XBB", 956, "European Monetary Unit (E.M.U.-6)", 0),
    CurrencyRecord("XBC", 957, "European Unit of Account 9 (E.U.A.-9)", 0),
    CurrencyRecord("XBD", 958, "European Unit of Account 17 (E.U.A.-17)", 0),
    CurrencyRecord("XCD", 951, "East Caribbean dollar", 2),
    CurrencyRecord("XDR", 960, "Special drawing rights", 0),
    CurrencyRecord("XOF", 952, "CFA franc BCEAO", 0),
    CurrencyRecord("XPD", 964, "Palladium (one troy ounce)", 0),
    CurrencyRecord("XPF", 953, "CFP franc (franc Pacifique)", 0),
    CurrencyRecord("XPT", 962, "Platinum (one troy ounce)", 0),
    CurrencyRecord("XSU", 994, "SUCRE", 0),
    CurrencyRecord("XTS", 963, "Code reserved for testing", 0),
    CurrencyRecord("XUA", 965, "ADB Unit of Account", 0),
    CurrencyRecord("XXX", 999, "No currency", 0),
    CurrencyRecord("YER", 886, "Yemeni rial", 2),
    CurrencyRecord("ZAR", 710, "South African rand", 2),
    CurrencyRecord("ZMW", 967, "Zambian kwacha", 2),
    CurrencyRecord("ZWL", 932, "Zimbabwean dollar (fifth)", 2),
)
