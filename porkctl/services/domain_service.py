"""
Domain Service
High-level business logic for domain operations
Orchestrates the Porkbun API client for checks, registration and pricing
"""

import time
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Sequence

from porkctl.api import PorkbunClient
from porkctl.api.exceptions import (
    APIError,
    ConfigurationError,
    DomainNotAvailableError,
    InvalidDomainError,
    InvalidPriceError,
    NetworkError
)
from porkctl.api.fields import as_number, as_object, as_text, lookup, text_or
from porkctl.api.responses import minimum_duration, to_check_result
from porkctl.models import (
    CheckResult,
    PricingRow,
    RegistrationQuote,
    RegistrationResult
)
from porkctl.utils.logger import get_logger
from porkctl.utils.validators import validate_domain

logger = get_logger(__name__)


DEFAULT_BULK_DELAY = 1.2
DEFAULT_PRICING_LIMIT = 50


def sort_check_results(results: Sequence[CheckResult]) -> List[CheckResult]:
    """
    Order bulk results: available first, then shorter names first.

    ``sorted`` is stable, so equal keys keep their input order.
    """
    return sorted(results, key=lambda r: (not r.available, len(r.domain)))


def parse_price(price: str) -> Decimal:
    """
    Parse a price string as a finite, non-negative decimal.

    Raises:
        InvalidPriceError: If the string is not a finite number or is negative
    """
    try:
        value = Decimal(price.strip())
    except (InvalidOperation, AttributeError):
        raise InvalidPriceError(f"invalid registration price {price!r}")
    if not value.is_finite() or value < 0:
        raise InvalidPriceError(f"invalid registration price {price!r}")
    return value


def registration_cost(price: str, min_duration: float = 1.0) -> int:
    """
    Total registration cost in cents, rounded half up.

    Example:
        registration_cost("12.34", 2) -> 2468
    """
    years = Decimal(str(min_duration))
    cents = parse_price(price) * 100 * years
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_pricing_rows(pricing: Dict[str, Any], limit: Optional[int] = DEFAULT_PRICING_LIMIT) -> List[PricingRow]:
    """
    Turn the ``pricing`` object into rows sorted by registration price.

    Entries that are not objects or whose registration price is not a number
    are left out rather than sorted as zero.

    Args:
        pricing: Mapping of TLD to price entry
        limit: Maximum number of rows (None for all)

    Returns:
        The cheapest ``limit`` rows, ascending
    """
    rows = []
    for tld, value in pricing.items():
        entry = as_object(value)
        if entry is None:
            logger.debug(f"Skipping pricing entry for .{tld}: not an object")
            continue

        registration = as_text(entry.get("registration"))
        registration_value = as_number(registration)
        if registration_value is None:
            logger.debug(f"Skipping pricing entry for .{tld}: unparseable price {registration!r}")
            continue

        rows.append(PricingRow(
            tld=tld,
            registration=registration,
            renewal=as_text(entry.get("renewal")),
            registration_value=registration_value
        ))

    rows.sort(key=lambda r: (r.registration_value, r.tld))
    if limit is not None:
        rows = rows[:limit]
    return rows


class DomainServiceError(APIError):
    """Base exception for domain service errors"""
    pass


class DomainService:
    """
    High-level domain operations service.
    Provides the operations behind each CLI command.
    """

    def __init__(self, client: PorkbunClient, bulk_delay: float = DEFAULT_BULK_DELAY):
        """
        Initialize domain service.

        Args:
            client: Configured Porkbun client
            bulk_delay: Seconds to wait between lookups in check_bulk
        """
        self.client = client
        self.bulk_delay = bulk_delay

    def ping(self) -> Dict[str, Any]:
        """
        Verify the API credentials.

        Returns:
            {"ok": bool, "ip": str, "message": str}

        Raises:
            NetworkError, ConfigurationError: If the API could not be asked
        """
        try:
            data = self.client.ping()
        except (NetworkError, ConfigurationError):
            raise
        except APIError as e:
            logger.warning(f"Ping rejected: {e.message}")
            return {"ok": False, "ip": "", "message": text_or(e.message, "Unknown error")}

        return {
            "ok": True,
            "ip": text_or(lookup(data, "yourIp"), "unknown"),
            "message": as_text(lookup(data, "message"))
        }

    def check_domain(self, domain: str) -> CheckResult:
        """
        Check a single domain.

        Args:
            domain: Domain name to check

        Returns:
            CheckResult

        Raises:
            InvalidDomainError: If the name is malformed
            APIError: If the lookup fails
        """
        domain = validate_domain(domain)
        data = self.client.check_domain(domain)
        result = to_check_result(domain, data)

        if result.available:
            logger.info(f"{domain} is AVAILABLE - {result.price}")
        else:
            logger.info(f"{domain} is NOT available")

        return result

    def check_bulk(self, domains: Sequence[str]) -> List[CheckResult]:
        """
        Check several domains one after another.

        Lookups run sequentially with ``bulk_delay`` seconds between them
        (none after the last). A failed lookup becomes an "error" row
        instead of stopping the batch.

        Args:
            domains: Domain names, in input order

        Returns:
            Results sorted available-first, then by name length
        """
        results = []
        total = len(domains)

        for index, domain in enumerate(domains):
            logger.info(f"[{index + 1}/{total}] {domain}")
            try:
                results.append(self.check_domain(domain))
            except (APIError, InvalidDomainError) as e:
                logger.warning(f"Lookup failed for {domain}: {e}")
                results.append(CheckResult.from_error(domain, e))

            if index < total - 1:
                time.sleep(self.bulk_delay)

        return sort_check_results(results)

    def quote_registration(self, domain: str) -> RegistrationQuote:
        """
        Re-check availability and compute what a registration will cost.

        Args:
            domain: Domain to register

        Returns:
            RegistrationQuote

        Raises:
            DomainNotAvailableError: If the domain cannot be registered
                (``response_data["check"]`` holds the CheckResult)
            InvalidPriceError: If the API price is not a number
        """
        domain = validate_domain(domain)
        data = self.client.check_domain(domain)
        check = to_check_result(domain, data)

        if not check.available:
            raise DomainNotAvailableError(
                "domain unavailable",
                response_data={"check": check}
            )

        min_duration = minimum_duration(data)
        cost = registration_cost(check.price, min_duration)
        logger.info(f"Quote for {domain}: {cost} cents ({min_duration:g} year(s) at {check.price})")

        return RegistrationQuote(check=check, min_duration=min_duration, cost=cost)

    def submit_registration(self, quote: RegistrationQuote) -> RegistrationResult:
        """
        Send the registration request for a quote. Not retried.

        A response the API reports as failed is returned with
        ``registered=False``; transport and configuration errors propagate.
        """
        try:
            data = self.client.create_domain(quote.domain, quote.cost)
        except (NetworkError, ConfigurationError):
            raise
        except APIError as e:
            logger.error(f"Registration of {quote.domain} failed: {e.message}")
            return RegistrationResult(
                domain=quote.domain,
                registered=False,
                message=text_or(e.message, "Registration failed"),
                cost=quote.cost
            )

        logger.info(f"Domain {quote.domain} registered")
        return RegistrationResult(
            domain=quote.domain,
            registered=True,
            message=text_or(lookup(data, "message"), "Domain registered successfully"),
            cost=quote.cost
        )

    def get_pricing(self, limit: Optional[int] = DEFAULT_PRICING_LIMIT) -> List[PricingRow]:
        """
        Cheapest TLDs by registration price.

        Args:
            limit: Maximum number of rows, capped at 50

        Returns:
            Pricing rows, ascending by registration price

        Raises:
            APIError: If the price list cannot be fetched
        """
        data = self.client.get_pricing()

        pricing = as_object(lookup(data, "pricing"))
        if pricing is None:
            raise DomainServiceError("missing pricing data")

        if limit is None or limit > DEFAULT_PRICING_LIMIT:
            limit = DEFAULT_PRICING_LIMIT
        rows = build_pricing_rows(pricing, limit=limit)
        logger.info(f"Loaded {len(pricing)} TLD prices, showing {len(rows)}")
        return rows
