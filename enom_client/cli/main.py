"""
Main CLI Entry Point
Command-line interface for eNom domain operations:
- availability checks
- domain purchase
"""

import sys
import argparse
from typing import List, Optional

from enom_client.api import Connection
from enom_client.utils.config import get_settings, set_default_logger
from enom_client.utils.logger import get_logger

logger = get_logger(__name__)


def _connection() -> Connection:
    settings = get_settings()
    cli_logger = get_logger("enom_client", level=settings.log_level, log_file=settings.log_file)
    set_default_logger(cli_logger)
    return Connection.from_settings(settings)


def _print_response(title: str, response) -> None:
    print(f"\n{'='*60}")
    print(f" {title}")
    print(f"{'='*60}")
    print(f"  RRPCode:  {response.get('RRPCode', 'N/A')}")
    print(f"  RRPText:  {response.get('RRPText', 'N/A')}")
    for error in response.errors():
        print(f"  Error:    {error}")
    print(f"{'='*60}\n")


def cmd_available(args):
    """Check whether a domain can be registered"""
    try:
        available = _connection().domain_available(args.domain)
        status = "✅ AVAILABLE" if available else "❌ TAKEN"
        print(f"  {args.domain:<40} {status}")
    except Exception as e:
        logger.error(f"❌ Availability check failed: {str(e)}")
        sys.exit(1)


def cmd_check(args):
    """Run the raw 'check' command"""
    try:
        response = _connection().check(sld=args.sld, tld=args.tld)
        _print_response(f"CHECK: {args.sld}.{args.tld}", response)
        print(f"  Available: {'YES' if response.is_available() else 'NO'}\n")
    except Exception as e:
        logger.error(f"❌ Check failed: {str(e)}")
        sys.exit(1)


def cmd_purchase(args):
    """Purchase a domain, with extra eNom options as KEY=VALUE"""
    try:
        options = {"sld": args.sld, "tld": args.tld}
        for item in args.option or []:
            key, sep, value = item.partition("=")
            if not sep:
                logger.error(f"Invalid option '{item}', expected KEY=VALUE")
                sys.exit(1)
            options[key] = value

        response = _connection().purchase(options)
        _print_response(f"PURCHASE: {args.sld}.{args.tld}", response)
        if response.has_errors():
            sys.exit(1)
    except Exception as e:
        logger.error(f"❌ Purchase failed: {str(e)}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enom",
        description="eNom reseller API client"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    available_parser = subparsers.add_parser("available", help="Check if a domain is available")
    available_parser.add_argument("domain", help="Domain name (e.g., example.com)")
    available_parser.set_defaults(func=cmd_available)

    check_parser = subparsers.add_parser("check", help="Run the 'check' command")
    check_parser.add_argument("--sld", required=True, help="Second-level domain (e.g., example)")
    check_parser.add_argument("--tld", required=True, help="Top-level domain (e.g., com)")
    check_parser.set_defaults(func=cmd_check)

    purchase_parser = subparsers.add_parser("purchase", help="Purchase a domain")
    purchase_parser.add_argument("--sld", required=True, help="Second-level domain")
    purchase_parser.add_argument("--tld", required=True, help="Top-level domain")
    purchase_parser.add_argument(
        "--option", action="append", metavar="KEY=VALUE",
        help="Extra eNom option, may be repeated (e.g., NumYears=2)"
    )
    purchase_parser.set_defaults(func=cmd_purchase)

    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
