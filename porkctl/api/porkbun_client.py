"""
Porkbun Domain API Client
Handles all interactions with the Porkbun JSON API (v3)
"""

from typing import Dict, Any, Optional

import requests

from porkctl.api.fields import as_object, lookup, text_or
from porkctl.api.responses import is_success
from porkctl.models import Credentials
from porkctl.utils.logger import get_logger
from porkctl.api.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    RateLimitError,
    NetworkError,
    ServerError
)


logger = get_logger(__name__)


class PorkbunClient:
    """
    Porkbun API client for domain operations.

    Authenticated calls are POST requests whose JSON body carries the key
    pair; the pricing list is a plain GET. Requests are never retried.
    """

    def __init__(
        self,
        config,
        credentials: Optional[Credentials] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize Porkbun API client.

        Args:
            config: Settings object (base URL and timeout)
            credentials: API key pair. Only needed for authenticated endpoints.
            session: Optional requests session (a new one is created if None)
        """
        self.config = config
        self.credentials = credentials
        self.base_url = config.api_base
        self.timeout = config.timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

        logger.debug(f"Porkbun client initialized - Base URL: {self.base_url}")
        if credentials is not None:
            logger.debug(f"Using credentials from: {credentials.source or 'arguments'}")

    def _make_request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict[str, Any]] = None,
        authenticated: bool = True
    ) -> Dict[str, Any]:
        """
        Make an HTTP request to the Porkbun API with error handling.

        Args:
            method: HTTP method (GET or POST)
            endpoint: API endpoint (e.g., '/domain/checkDomain/example.com')
            json_data: Command-specific body fields, merged with the key pair
            authenticated: Whether the key pair must be sent

        Returns:
            Decoded response object

        Raises:
            ConfigurationError: If credentials are required but missing
            NetworkError: On transport failures or a body that is not a JSON object
            APIError (or a subclass): On HTTP errors or non-SUCCESS status
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        body = None
        if authenticated:
            if self.credentials is None:
                raise ConfigurationError(f"API credentials are required for {endpoint}")
            body = {**self.credentials.as_payload(), **(json_data or {})}
        elif json_data:
            body = dict(json_data)

        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=body,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            raise NetworkError(f"Request timed out after {self.timeout} seconds")
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"Connection error: {str(e)}")
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error: {str(e)}")

        logger.debug(f"{method} {url} -> HTTP {response.status_code}")

        data = self._parse_response(response)

        if response.status_code >= 400:
            message = text_or(
                lookup(data, "message"),
                f"HTTP {response.status_code}: {response.reason or 'error'}"
            )
            if response.status_code in (401, 403):
                raise AuthenticationError(message, status_code=response.status_code, response_data=data)
            if response.status_code == 429:
                raise RateLimitError(message, status_code=429, response_data=data)
            if response.status_code >= 500:
                raise ServerError(message, status_code=response.status_code, response_data=data)
            raise APIError(message, status_code=response.status_code, response_data=data)

        if data is None:
            raise NetworkError(
                f"Unexpected response from {endpoint}: not a JSON object",
                status_code=response.status_code
            )

        if not is_success(data):
            raise APIError(
                text_or(data.get("message"), "request failed"),
                status_code=response.status_code,
                response_data=data
            )

        return data

    def _parse_response(self, response: requests.Response) -> Optional[Dict[str, Any]]:
        """
        Decode the response body.

        Returns:
            The JSON object, or None when the body is empty, not JSON or not an object
        """
        if not response.content:
            return None
        try:
            return as_object(response.json())
        except ValueError:
            logger.debug(f"Non-JSON response body: {response.text[:200]!r}")
            return None

    def ping(self) -> Dict[str, Any]:
        """
        Verify the API key pair.

        Returns:
            Response containing ``yourIp``
        """
        logger.info("Pinging Porkbun API")
        return self._make_request("POST", "/ping")

    def check_domain(self, domain: str) -> Dict[str, Any]:
        """
        Check if a domain is available for registration.

        Args:
            domain: Domain name to check (e.g., 'example.com')

        Returns:
            Raw checkDomain response (see porkctl.api.responses)
        """
        logger.info(f"Checking availability for: {domain}")
        return self._make_request("POST", f"/domain/checkDomain/{domain}")

    def create_domain(self, domain: str, cost: int) -> Dict[str, Any]:
        """
        Register a domain.

        Args:
            domain: Domain to register
            cost: Total cost in cents; must match what Porkbun expects

        Returns:
            Registration response
        """
        logger.info(f"Registering domain: {domain} (cost: {cost} cents)")
        logger.warning(f"REAL PURCHASE - registering {domain}")

        payload = {
            "cost": cost,
            "agreeToTerms": "yes"
        }
        return self._make_request("POST", f"/domain/create/{domain}", json_data=payload)

    def get_pricing(self) -> Dict[str, Any]:
        """
        Fetch the TLD price list. Does not require credentials.

        Returns:
            Response with a ``pricing`` object keyed by TLD
        """
        logger.info("Fetching TLD pricing")
        return self._make_request("GET", "/pricing/get", authenticated=False)
