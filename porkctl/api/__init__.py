"""
API Layer - Porkbun JSON API client and response normalization
"""

# Exceptions
from porkctl.api.exceptions import (
    APIError,
    ConfigurationError,
    AuthenticationError,
    DomainNotAvailableError,
    RateLimitError,
    InvalidDomainError,
    InvalidPriceError,
    NetworkError,
    ServerError
)

# Client
from porkctl.api.porkbun_client import PorkbunClient

# Response parsing
from porkctl.api.responses import parse_check_response, minimum_duration, to_check_result

__all__ = [
    # Client
    "PorkbunClient",

    # Responses
    "parse_check_response",
    "minimum_duration",
    "to_check_result",

    # Exceptions
    "APIError",
    "ConfigurationError",
    "AuthenticationError",
    "DomainNotAvailableError",
    "RateLimitError",
    "InvalidDomainError",
    "InvalidPriceError",
    "NetworkError",
    "ServerError"
]
