"""
Text output for the CLI
Each function returns the lines to print, so handlers stay thin and the
layout can be tested without capturing stdout.
"""

from typing import List, Sequence

from porkctl.models import PRICE_MISSING, CheckResult, PricingRow, RegistrationQuote


def format_check(result: CheckResult) -> List[str]:
    """key:value lines for a single availability check"""
    lines = [
        f"DOMAIN: {result.domain}",
        f"AVAILABLE: {'yes' if result.available else 'no'}",
    ]
    if result.price != PRICE_MISSING:
        lines.append(f"REGISTER_PRICE: {result.price}")
    if result.renewal != PRICE_MISSING:
        lines.append(f"RENEWAL_PRICE: {result.renewal}")
    if result.message and not result.available:
        lines.append(f"MESSAGE: {result.message}")
    return lines


def format_quote(quote: RegistrationQuote) -> List[str]:
    """Lines printed before a registration is submitted"""
    lines = format_check(quote.check)
    lines.append(f"MIN_DURATION: {quote.min_duration:g}")
    lines.append(f"COST_CENTS: {quote.cost}")
    return lines


def format_bulk_table(results: Sequence[CheckResult]) -> List[str]:
    """
    Fixed-width table of bulk results followed by a summary line.

    The domain column is as wide as the longest name (at least "DOMAIN").
    """
    width = max([len("DOMAIN")] + [len(r.domain) for r in results])

    header = f"{'DOMAIN':<{width}}  AVAIL  REG_PRICE  RENEWAL"
    lines = [header, "-" * len(header)]

    available = 0
    for r in results:
        if r.available:
            available += 1
        avail = "YES" if r.available else "no"
        lines.append(f"{r.domain:<{width}}  {avail:<5}  {r.price:<9}  {r.renewal}")

    lines.append("")
    lines.append(f"SUMMARY: {available}/{len(results)} available")
    return lines


def format_pricing_table(rows: Sequence[PricingRow]) -> List[str]:
    """TLD price table followed by a row count"""
    width = max([len("TLD")] + [len(r.tld) for r in rows])

    lines = [
        f"{'TLD':<{width}}  REGISTER  RENEWAL",
        "-" * (width + 22),
    ]
    for r in rows:
        lines.append(f"{r.tld:<{width}}  {r.registration:<8}  {r.renewal}")

    lines.append("")
    lines.append(f"... showing {len(rows)} cheapest TLDs")
    return lines
