"""
Custom exceptions for Porkbun API operations
"""


class APIError(Exception):
    """Base exception for all porkctl errors"""

    def __init__(self, message: str, status_code: int = None, response_data: dict = None):
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        super().__init__(self.message)

    def __str__(self):
        return self.message


class ConfigurationError(APIError):
    """Raised when credentials or settings cannot be loaded"""
    pass


class AuthenticationError(APIError):
    """Raised when API authentication fails"""
    pass


class DomainNotAvailableError(APIError):
    """Raised when a domain is not available for registration"""
    pass


class RateLimitError(APIError):
    """Raised when API rate limit is exceeded"""
    pass


class InvalidDomainError(APIError):
    """Raised when domain format is invalid"""
    pass


class InvalidPriceError(APIError):
    """Raised when a price string cannot be parsed as a decimal number"""
    pass


class NetworkError(APIError):
    """Raised when network/connection errors occur"""
    pass


class ServerError(APIError):
    """Raised when Porkbun returns 5xx errors"""
    pass
