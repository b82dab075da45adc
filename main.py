"""
Main CLI Entry Point
Command-line interface for the Porkbun domain registrar API:
- credential check (ping)
- single and bulk availability checks
- domain registration
- TLD pricing
"""

import sys
import argparse
from typing import List, Optional

from pydantic import ValidationError

from porkctl import __version__
from porkctl.api import PorkbunClient
from porkctl.api.exceptions import APIError, DomainNotAvailableError
from porkctl.services import DomainService, DomainServiceError
from porkctl.utils.config import Settings, load_credentials
from porkctl.utils.formatting import (
    format_bulk_table,
    format_check,
    format_pricing_table,
    format_quote
)
from porkctl.utils.logger import get_logger, setup_logger

logger = get_logger(__name__)


def _print_lines(lines: List[str]):
    for line in lines:
        print(line)


def cmd_version(args, service: Optional[DomainService]) -> int:
    """Print version"""
    print(__version__)
    return 0


def cmd_ping(args, service: DomainService) -> int:
    """Verify the API keys work"""
    result = service.ping()

    if result["ok"]:
        print("STATUS: OK")
        print(f"IP: {result['ip']}")
        return 0

    print("STATUS: FAILED")
    print(f"MESSAGE: {result['message']}")
    return 1


def cmd_check(args, service: DomainService) -> int:
    """Check single domain availability"""
    try:
        result = service.check_domain(args.domain)
    except APIError:
        print(f"DOMAIN: {args.domain}")
        raise

    _print_lines(format_check(result))
    return 0


def cmd_check_bulk(args, service: DomainService) -> int:
    """Check multiple domains, one request at a time"""
    print(f"CHECKING: {len(args.domains)} domains")
    print()

    results = service.check_bulk(args.domains)

    _print_lines(format_bulk_table(results))
    return 0


def cmd_register(args, service: DomainService) -> int:
    """Register a domain after a fresh availability check"""
    try:
        quote = service.quote_registration(args.domain)
    except DomainNotAvailableError:
        print(f"DOMAIN: {args.domain}")
        print("AVAILABLE: no")
        print("Cannot register - domain is not available.")
        raise

    _print_lines(format_quote(quote))

    result = service.submit_registration(quote)
    if result.registered:
        print("REGISTERED: yes")
        print(f"MESSAGE: {result.message}")
        return 0

    print("REGISTERED: no")
    print(f"ERROR: {result.message}")
    raise DomainServiceError("registration failed")


def cmd_pricing(args, service: DomainService) -> int:
    """Show TLD pricing (cheapest first)"""
    rows = service.get_pricing(limit=args.limit)

    _print_lines(format_pricing_table(rows))
    return 0


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="porkctl",
        description="Porkbun Domain Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Verify API keys
  porkctl ping

  # Check a single domain
  porkctl check clau.de

  # Check several domains (one request every 1.2 seconds)
  porkctl check-bulk example.com example.net example.io

  # Register a domain
  porkctl register mynewdomain.com

  # Show the 50 cheapest TLDs
  porkctl pricing

Credentials are read from PORKBUN_API_KEY / PORKBUN_SECRET_KEY, or from the
file named by PORKCTL_ENV_FILE, ./porkbun.env, ./.env or the per-user
porkbun.env.
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    version_parser = subparsers.add_parser("version", help="Print version")
    version_parser.set_defaults(func=cmd_version, needs_service=False, needs_credentials=False)

    ping_parser = subparsers.add_parser("ping", help="Verify API keys work")
    ping_parser.set_defaults(func=cmd_ping, needs_service=True, needs_credentials=True)

    check_parser = subparsers.add_parser("check", help="Check single domain availability")
    check_parser.add_argument("domain", help="Domain name (e.g. clau.de)")
    check_parser.set_defaults(func=cmd_check, needs_service=True, needs_credentials=True)

    bulk_parser = subparsers.add_parser("check-bulk", help="Check multiple domains")
    bulk_parser.add_argument("domains", nargs="+", metavar="domain", help="Domain names")
    bulk_parser.add_argument(
        "--delay",
        type=non_negative_float,
        help="Seconds between requests (default: PORKCTL_BULK_DELAY or 1.2)"
    )
    bulk_parser.set_defaults(func=cmd_check_bulk, needs_service=True, needs_credentials=True)

    register_parser = subparsers.add_parser("register", help="Register a domain")
    register_parser.add_argument("domain", help="Domain name to register")
    register_parser.set_defaults(func=cmd_register, needs_service=True, needs_credentials=True)

    pricing_parser = subparsers.add_parser("pricing", help="Show TLD pricing (cheapest 50)")
    pricing_parser.add_argument("--limit", type=positive_int, default=50, help="Number of TLDs to show (default and maximum: 50)")
    pricing_parser.set_defaults(func=cmd_pricing, needs_service=True, needs_credentials=False)

    return parser


def build_service(args, settings: Settings) -> DomainService:
    """Create the client and service for one invocation"""
    credentials = load_credentials(settings) if args.needs_credentials else None
    client = PorkbunClient(settings, credentials=credentials)

    delay = settings.bulk_delay
    if getattr(args, "delay", None) is not None:
        delay = args.delay
    return DomainService(client, bulk_delay=delay)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if not args.needs_service:
        return args.func(args, None)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"ERROR: invalid configuration: {e}")
        return 1

    setup_logger(
        level="DEBUG" if args.verbose else settings.log_level,
        log_file=settings.log_file
    )

    try:
        service = build_service(args, settings)
        return args.func(args, service)
    except APIError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
