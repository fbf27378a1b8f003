#!/usr/bin/env python3
"""Verify the ISO 4217 dataset against Babel CLDR data.

Compares the compiled-in currency table (codes, decimal digits, and the
countries each currency circulates in) against Babel's CLDR data.

This script is informational: discrepancies are expected because Babel's
CLDR data may reflect common usage patterns rather than the ISO standard.
The compiled-in dataset is authoritative for ISO 4217 compliance.

Checks:
    1. Structural: Dataset currencies not recognized by Babel.
    2. Discrepancies: Dataset decimal digits differ from Babel precision.
    3. Circulation: Countries whose dataset currencies differ from the
       tender currencies Babel reports as current. Shown only with
       --verbose; CLDR omits funds codes such as CHE and USN.

Exit codes:
    0: All checks passed (discrepancies are warnings, not failures).
    1: Structural errors (unrecognized currencies, import failures).

Usage:
    verify_iso4217.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date


def _check_unrecognized(digits: dict[str, int], babel_currencies: set[str]) -> list[str]:
    """Dataset currencies not recognized by Babel."""
    return [
        f"  {code}: In dataset but not recognized by Babel"
        for code in sorted(digits)
        if code not in babel_currencies
    ]


def _check_discrepancies(digits: dict[str, int]) -> list[str]:
    """Compare dataset decimal digits against Babel precision."""
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    result: list[str] = []
    for code, iso_val in sorted(digits.items()):
        babel_val = get_currency_precision(code)
        if iso_val != babel_val:
            result.append(f"  {code}: ISO 4217={iso_val}, Babel CLDR={babel_val}")
    return result


def _check_circulation(circulation: dict[str, set[str]]) -> list[str]:
    """Compare each country's currencies with Babel's current tender list."""
    from babel.numbers import get_territory_currencies  # noqa: PLC0415

    today = date.today()
    result: list[str] = []
    for alpha2, ours in sorted(circulation.items()):
        theirs = set(get_territory_currencies(alpha2, start_date=today, tender=True))
        if ours != theirs:
            only_ours = ", ".join(sorted(ours - theirs)) or "-"
            only_babel = ", ".join(sorted(theirs - ours)) or "-"
            result.append(f"  {alpha2}: dataset only={only_ours}, Babel only={only_babel}")
    return result


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _print_report(
    *,
    errors: list[str],
    discrepancies: list[str],
    circulation: list[str],
    entry_count: int,
    babel_count: int,
    verbose: bool,
) -> None:
    """Print formatted report."""
    print("ISO 4217 Dataset Verification")
    print("=" * 50)
    print(f"Dataset currencies: {entry_count}")
    print(f"Babel currencies:   {babel_count}")
    print()

    _print_section(
        "[ERROR] Structural errors",
        "Dataset currency not recognized by Babel",
        errors,
    )
    _print_section(
        "[WARN] ISO 4217 vs Babel discrepancies",
        "Dataset ISO 4217 data is authoritative; Babel CLDR may differ",
        discrepancies,
    )

    if circulation:
        if verbose:
            _print_section(
                "[INFO] Circulation differences",
                "CLDR lists tender currencies only; funds codes are expected here",
                circulation,
            )
        else:
            print(
                f"[INFO] {len(circulation)} country(ies) differ from Babel's"
                " tender list. Use --verbose to list."
            )
            print()

    if not (errors or discrepancies or circulation):
        print("[OK] All checks passed. No discrepancies found.")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the ISO 4217 dataset against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List countries whose currencies differ from Babel's tender list.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run ISO 4217 verification checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install isosphere[babel]")
        return 1

    from isosphere import Country, Currency  # noqa: PLC0415

    digits = {str(currency.code): currency.decimal_digits for currency in Currency}
    circulation = {
        str(country.code): {str(code) for code in country.currencies} for country in Country
    }
    babel_currencies = list_currencies()

    errors = _check_unrecognized(digits, babel_currencies)
    discrepancies = _check_discrepancies(digits)
    circulation_diffs = _check_circulation(circulation)

    _print_report(
        errors=errors,
        discrepancies=discrepancies,
        circulation=circulation_diffs,
        entry_count=len(digits),
        babel_count=len(babel_currencies),
        verbose=args.verbose,
    )

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    print(
        f"[PASS] {len(discrepancies)} discrepancy(ies),"
        f" {len(circulation_diffs)} circulation difference(s)."
    )
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
