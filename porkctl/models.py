"""
Value objects shared by the API, service and CLI layers
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# Placeholder used when the API did not supply a price
PRICE_MISSING = "-"

# Placeholder used in bulk results when the lookup itself failed
PRICE_ERROR = "error"


class Credentials(BaseModel):
    """Porkbun API key pair, loaded once per invocation"""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, repr=False)
    secret_key: str = Field(..., min_length=1, repr=False)
    source: str = Field(default="", description="File path or 'environment'")

    def as_payload(self) -> Dict[str, str]:
        """Authentication fields expected in every POST body"""
        return {
            "apikey": self.api_key,
            "secretapikey": self.secret_key,
        }


class CheckResult(BaseModel):
    """Availability of a single domain"""

    model_config = ConfigDict(frozen=True)

    domain: str
    available: bool = False
    price: str = PRICE_MISSING
    renewal: str = PRICE_MISSING
    message: str = ""
    error: Optional[str] = None

    @classmethod
    def from_error(cls, domain: str, error: Exception) -> "CheckResult":
        """Result row for a lookup that could not be completed"""
        return cls(
            domain=domain,
            available=False,
            price=PRICE_ERROR,
            renewal=PRICE_ERROR,
            error=str(error),
        )


class PricingRow(BaseModel):
    """Registration and renewal price of one TLD"""

    model_config = ConfigDict(frozen=True)

    tld: str
    registration: str
    renewal: str
    registration_value: float


class RegistrationQuote(BaseModel):
    """Fresh availability check plus the cost that will be submitted"""

    model_config = ConfigDict(frozen=True)

    check: CheckResult
    min_duration: float = 1.0
    cost: int = Field(..., ge=0, description="Total cost in cents")

    @property
    def domain(self) -> str:
        return self.check.domain


class RegistrationResult(BaseModel):
    """Outcome of a domain/create request"""

    model_config = ConfigDict(frozen=True)

    domain: str
    registered: bool
    message: str
    cost: int
