"""
Input validation utilities for domain names
"""

import re

from porkctl.api.exceptions import InvalidDomainError


class DomainValidator:
    """Validator for domain names"""

    LABEL_REGEX = re.compile(r'^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$')

    # TLDs are letters only, or punycode (xn--...)
    TLD_REGEX = re.compile(r'^(?:[a-z]{2,63}|xn--[a-z0-9-]{1,59})$')

    @classmethod
    def validate(cls, domain: str) -> str:
        """
        Validate a domain name.

        Args:
            domain: Domain name to validate

        Returns:
            Cleaned domain name (lowercase, stripped)

        Raises:
            InvalidDomainError: If domain is invalid
        """
        if not domain or not domain.strip():
            raise InvalidDomainError("Domain name cannot be empty")

        # Clean the domain
        domain = domain.strip().lower()

        # Remove http(s):// if present
        domain = re.sub(r'^https?://', '', domain)

        # Remove trailing slash and root dot
        domain = domain.rstrip('/').rstrip('.')

        if len(domain) > 253:  # RFC 1035
            raise InvalidDomainError(f"Domain name too long (max 253 characters): {domain}")

        labels = domain.split('.')
        if len(labels) < 2:
            raise InvalidDomainError(f"Invalid domain format: {domain}. Expected name.tld")

        if not cls.TLD_REGEX.match(labels[-1]):
            raise InvalidDomainError(f"Invalid TLD in domain: {domain}")

        for label in labels[:-1]:
            if not cls.LABEL_REGEX.match(label):
                raise InvalidDomainError(
                    f"Invalid domain format: {domain}. "
                    "Domain must contain only letters, numbers, and hyphens."
                )

        return domain


def validate_domain(domain: str) -> str:
    """Convenience function for domain validation"""
    return DomainValidator.validate(domain)
