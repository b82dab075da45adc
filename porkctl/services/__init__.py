"""
Business logic and service layer
"""

from porkctl.services.domain_service import (
    DomainService,
    DomainServiceError,
    build_pricing_rows,
    registration_cost,
    sort_check_results
)

__all__ = [
    "DomainService",
    "DomainServiceError",
    "build_pricing_rows",
    "registration_cost",
    "sort_check_results",
]
