"""Quickstart example for isosphere.

This example demonstrates parsing ISO codes, following cross-references
between countries, currencies and languages, and serializing the results.

Localized names (Example 5) need the optional Babel dependency:
    pip install isosphere[babel]
"""

from isosphere import (
    Country,
    CountryAlpha3,
    CountryCode,
    Currency,
    CurrencyCode,
    IsoParseError,
    LanguageCode,
)
from isosphere.core.babel_compat import is_babel_available
from isosphere.serialization import dumps, json_schema

# Example 1: Parsing codes
print("=" * 50)
print("Example 1: Parsing Codes")
print("=" * 50)

country = CountryAlpha3.parse("usa").country
print(country, country.code, country.alpha3, country.numeric)
# Output: United States of America US USA 840

print(CountryCode.from_numeric(826).country)
# Output: United Kingdom of Great Britain and Northern Ireland

print(Country.from_code("004"))
# Output: Afghanistan

# Example 2: Currencies
print("\n" + "=" * 50)
print("Example 2: Currencies")
print("=" * 50)

yen = CurrencyCode.parse("jpy").currency
print(f"{yen}: {yen.decimal_digits} decimal digits")
# Output: Japanese yen: 0 decimal digits

print(sorted(str(code) for code in Currency.GBP.countries))
# Output: ['GB', 'GG', 'IM', 'JE', 'SH']

# Example 3: Languages
print("\n" + "=" * 50)
print("Example 3: Languages")
print("=" * 50)

norwegian = LanguageCode.parse("NO").language
print(norwegian, sorted(str(code) for code in norwegian.countries))
# Output: Norwegian ['BV', 'NO', 'SJ']

print(sorted(str(code) for code in Country.CH.languages))
# Output: ['de', 'fr', 'it', 'rm']

# Example 4: Errors
print("\n" + "=" * 50)
print("Example 4: Errors")
print("=" * 50)

for text in ("XX", "ſe"):
    try:
        CountryCode.parse(text)
    except IsoParseError as error:
        print(error)
        print()

try:
    Country.from_name("united states of america")
except IsoParseError as error:
    print(error.diagnostic.message if error.diagnostic else error)
# Output: Invalid country name: 'united states of america'

# Example 5: Localized names
print("\n" + "=" * 50)
print("Example 5: Localized Names")
print("=" * 50)

if is_babel_available():
    for locale in ("de", "fr-FR", "ja"):
        print(locale, Country.DE.localized_name(locale), Currency.EUR.localized_name(locale))
else:
    print("Babel not installed; skipping.")

# Example 6: JSON
print("\n" + "=" * 50)
print("Example 6: JSON")
print("=" * 50)

order = {"ship_to": Country.NO, "currency": Currency.NOK, "amount": "129.00"}
print(dumps(order))
# Output: {"ship_to": "NO", "currency": "NOK", "amount": "129.00"}

print(dumps(order, numeric=True))
# Output: {"ship_to": 578, "currency": 578, "amount": "129.00"}

print(dumps(Country.NO.info, indent=2))

schema = json_schema(CurrencyCode)
print(schema["title"], len(schema["enum"]), "values")
# Output: CurrencyCode 179 values
