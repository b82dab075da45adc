"""
Response Normalizer
Extracts availability and pricing from the different shapes of
domain/checkDomain responses. Never raises: anything missing or of the
wrong type falls back to a weaker default.
"""

from typing import Any, Dict, Tuple

from porkctl.api.fields import as_flag, as_number, as_object, as_text, lookup
from porkctl.models import PRICE_MISSING, CheckResult


def is_success(data: Any) -> bool:
    """True when the top-level ``status`` reads SUCCESS (any case)"""
    return as_text(lookup(data, "status")).upper() == "SUCCESS"


def response_scope(data: Any) -> Dict[str, Any]:
    """
    Object holding the domain fields.

    Porkbun nests them under ``response``; older payloads keep them at the
    top level.
    """
    nested = as_object(lookup(data, "response"))
    if nested is not None:
        return nested
    return as_object(data) or {}


def _first_price(*candidates: Any) -> str:
    for candidate in candidates:
        text = as_text(candidate)
        if text != "":
            return text
    return PRICE_MISSING


def parse_check_response(data: Any) -> Tuple[bool, str, str]:
    """
    Normalize a checkDomain response.

    Args:
        data: Decoded JSON response

    Returns:
        (available, register_price, renewal_price); prices are "-" when absent
    """
    scope = response_scope(data)

    available = is_success(data) and as_flag(scope.get("avail"))

    price = _first_price(
        scope.get("price"),
        lookup(scope, "pricing", "registration"),
    )
    renewal = _first_price(
        lookup(scope, "additional", "renewal", "price"),
        lookup(scope, "pricing", "renewal"),
    )

    return available, price, renewal


def minimum_duration(data: Any) -> float:
    """Minimum registration period in years; 1 unless the API sends a positive value"""
    value = as_number(lookup(data, "response", "minDuration"))
    if value is None or value <= 0:
        return 1.0
    return value


def to_check_result(domain: str, data: Any) -> CheckResult:
    """Build a CheckResult for ``domain`` from a checkDomain response"""
    available, price, renewal = parse_check_response(data)
    return CheckResult(
        domain=domain,
        available=available,
        price=price,
        renewal=renewal,
        message=as_text(lookup(data, "message")),
    )
