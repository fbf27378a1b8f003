"""ISO 639-1 language dataset.

Sources: https://www.iso.org/iso-639-language-code and
https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes.
"""

from .records import LanguageRecord

__all__ = ["LANGUAGE_RECORDS"]

LANGUAGE_RECORDS: tuple[LanguageRecord, ...] = (
    LanguageRecord("aa", "Afar"),
    LanguageRecord("ab", "Abkhazian"),
    LanguageRecord("ae", "Avestan"),
    LanguageRecord("af", "Afrikaans"),
    LanguageRecord("ak", "Akan"),
    LanguageRecord("am", "Amharic"),
    LanguageRecord("an", "Aragonese"),
    LanguageRecord("ar", "Arabic"),
    LanguageRecord("as", "Assamese"),
    LanguageRecord("av", "Avaric"),
    LanguageRecord("ay", "Aymara"),
    LanguageRecord("az", "Azerbaijani"),
    LanguageRecord("ba", "Bashkir"),
    LanguageRecord("be", "Belarusian"),
    LanguageRecord("bg", "Bulgarian"),
    LanguageRecord("bi", "Bislama"),
    LanguageRecord("bm", "Bambara"),
    LanguageRecord("bn", "Bengali"),
    LanguageRecord("bo", "Tibetan"),
    LanguageRecord("br", "Breton"),
    LanguageRecord("bs", "Bosnian"),
    LanguageRecord("ca", "Catalan"),
    LanguageRecord("ce", "Chechen"),
    LanguageRecord("ch", "Chamorro"),
    LanguageRecord("co", "Corsican"),
    LanguageRecord("cr", "Cree"),
    LanguageRecord("cs", "Czech"),
    LanguageRecord("cu", "Church Slavonic"),
    LanguageRecord("cv", "Chuvash"),
    LanguageRecord("cy", "Welsh"),
    LanguageRecord("da", "Danish"),
    LanguageRecord("de", "German"),
    LanguageRecord("dv", "Divehi"),
    LanguageRecord("dz", "Dzongkha"),
    LanguageRecord("ee", "Ewe"),
    LanguageRecord("el", "Greek"),
    LanguageRecord("en", "English"),
    LanguageRecord("eo", "Esperanto"),
    LanguageRecord("es", "Spanish"),
    LanguageRecord("et", "Estonian"),
    LanguageRecord("eu", "Basque"),
    LanguageRecord("fa", "Persian"),
    LanguageRecord("ff", "Fulah"),
    LanguageRecord("fi", "Finnish"),
    LanguageRecord("fj", "Fijian"),
    LanguageRecord("fo", "Faroese"),
    LanguageRecord("fr", "French"),
    LanguageRecord("fy", "Western Frisian"),
    LanguageRecord("ga", "Irish"),
    LanguageRecord("gd", "Gaelic"),
    LanguageRecord("gl", "Galician"),
    LanguageRecord("gn", "Guarani"),
    LanguageRecord("gu", "Gujarati"),
    LanguageRecord("gv", "Manx"),
    LanguageRecord("ha", "Hausa"),
    LanguageRecord("he", "Hebrew"),
    LanguageRecord("hi", "Hindi"),
    LanguageRecord("ho", "Hiri Motu"),
    LanguageRecord("hr", "Croatian"),
    LanguageRecord("ht", "Haitian"),
    LanguageRecord("hu", "Hungarian"),
    LanguageRecord("hy", "Armenian"),
    LanguageRecord("hz", "Herero"),
    LanguageRecord("ia", "Interlingua"),
    LanguageRecord("id", "Indonesian"),
    LanguageRecord("ie", "Interlingue"),
    LanguageRecord("ig", "Igbo"),
    LanguageRecord("ii", "Sichuan Yi"),
    LanguageRecord("ik", "Inupiaq"),
    LanguageRecord("io", "Ido"),
    LanguageRecord("is", "Icelandic"),
    LanguageRecord("it", "Italian"),
    LanguageRecord("iu", "Inuktitut"),
    LanguageRecord("ja", "Japanese"),
    LanguageRecord("jv", "Javanese"),
    LanguageRecord("ka", "Georgian"),
    LanguageRecord("kg", "Kongo"),
    LanguageRecord("ki", "Kikuyu"),
    LanguageRecord("kj", "Kuanyama"),
    LanguageRecord("kk", "Kazakh"),
    LanguageRecord("kl", "Kalaallisut"),
    LanguageRecord("km", "Central Khmer"),
    LanguageRecord("kn", "Kannada"),
    LanguageRecord("ko", "Korean"),
    LanguageRecord("kr", "Kanuri"),
    LanguageRecord("ks", "Kashmiri"),
    LanguageRecord("ku", "Kurdish"),
    LanguageRecord("kv", "Komi"),
    LanguageRecord("kw", "Cornish"),
    LanguageRecord("ky", "Kirghiz"),
    LanguageRecord("la", "Latin"),
    LanguageRecord("lb", "Luxembourgish"),
    LanguageRecord("lg", "Ganda"),
    LanguageRecord("li", "Limburgan"),
    LanguageRecord("ln", "Lingala"),
    LanguageRecord("lo", "Lao"),
    LanguageRecord("lt", "Lithuanian"),
    LanguageRecord("lu", "Luba-Katanga"),
    LanguageRecord("lv", "Latvian"),
    LanguageRecord("mg", "Malagasy"),
    LanguageRecord("mh", "Marshallese"),
    LanguageRecord("mi", "Maori"),
    LanguageRecord("mk", "Macedonian"),
    LanguageRecord("ml", "Malayalam"),
    LanguageRecord("mn", "Mongolian"),
    LanguageRecord("mr", "Marathi"),
    LanguageRecord("ms", "Malay"),
    LanguageRecord("mt", "Maltese"),
    LanguageRecord("my", "Burmese"),
    LanguageRecord("na", "Nauru"),
    LanguageRecord("nb", "Norwegian Bokmål"),
    LanguageRecord("nd", "North Ndebele"),
    LanguageRecord("ne", "Nepali"),
    LanguageRecord("ng", "Ndonga"),
    LanguageRecord("nl", "Dutch"),
    LanguageRecord("nn", "Norwegian Nynorsk"),
    LanguageRecord("no", "Norwegian"),
    LanguageRecord("nr", "South Ndebele"),
    LanguageRecord("nv", "Navajo"),
    LanguageRecord("ny", "Chichewa"),
    LanguageRecord("oc", "Occitan"),
    LanguageRecord("oj", "Ojibwa"),
    LanguageRecord("om", "Oromo"),
    LanguageRecord("or", "Oriya"),
    LanguageRecord("os", "Ossetian"),
    LanguageRecord("pa", "Punjabi"),
    LanguageRecord("pi", "Pali"),
    LanguageRecord("pl", "Polish"),
    LanguageRecord("ps", "Pashto"),
    LanguageRecord("pt", "Portuguese"),
    LanguageRecord("qu", "Quechua"),
    LanguageRecord("rm", "Romansh"),
    LanguageRecord("rn", "Rundi"),
    LanguageRecord("ro", "Romanian"),
    LanguageRecord("ru", "Russian"),
    LanguageRecord("rw", "Kinyarwanda"),
    LanguageRecord("sa", "Sanskrit"),
    LanguageRecord("sc", "Sardinian"),
    LanguageRecord("sd", "Sindhi"),
    LanguageRecord("se", "Northern Sami"),
    LanguageRecord("sg", "Sango"),
    LanguageRecord("si", "Sinhala"),
    LanguageRecord("sk", "Slovak"),
    LanguageRecord("sl", "Slovenian"),
    LanguageRecord("sm", "Samoan"),
    LanguageRecord("sn", "Shona"),
    LanguageRecord("so", "Somali"),
    LanguageRecord("sq", "Albanian"),
    LanguageRecord("sr", "Serbian"),
    LanguageRecord("ss", "Swati"),
    LanguageRecord("st", "Southern Sotho"),
    LanguageRecord("su", "Sundanese"),
    LanguageRecord("sv", "Swedish"),
    LanguageRecord("sw", "Swahili"),
    LanguageRecord("ta", "Tamil"),
    LanguageRecord("te", "Telugu"),
    LanguageRecord("tg", "Tajik"),
    LanguageRecord("th", "Thai"),
    LanguageRecord("ti", "Tigrinya"),
    LanguageRecord("tk", "Turkmen"),
    LanguageRecord("tl", "Tagalog"),
    LanguageRecord("tn", "Tswana"),
    LanguageRecord("to", "Tonga"),
    LanguageRecord("tr", "Turkish"),
    LanguageRecord("ts", "Tsonga"),
    LanguageRecord("tt", "Tatar"),
    LanguageRecord("tw", "Twi"),
    LanguageRecord("ty", "Tahitian"),
    LanguageRecord("ug", "Uighur"),
    LanguageRecord("uk", "Ukrainian"),
    LanguageRecord("ur", "Urdu"),
    LanguageRecord("uz", "Uzbek"),
    LanguageRecord("ve", "Venda"),
    LanguageRecord("vi", "Vietnamese"),
    LanguageRecord("vo", "Volapük"),
    LanguageRecord("wa", "Walloon"),
    LanguageRecord("wo", "Wolof"),
    LanguageRecord("xh", "Xhosa"),
    LanguageRecord("yi", "Yiddish"),
    LanguageRecord("yo", "Yoruba"),
    LanguageRecord("za", "Zhuang"),
    LanguageRecord("zh", "Chinese"),
    LanguageRecord("zu", "Zulu"),
)
