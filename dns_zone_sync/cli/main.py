#!/usr/bin/env python3
"""
DNS Zone Sync - Command Line Interface

Main entry point for the DNS Zone Sync CLI.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from ..core.dns_manager import DNSManager
from ..parsers.zone_config import ConfigError, ZoneConfigParser
from ..providers.base_provider import ProviderError
from ..providers.dns_client import DNSClient

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DNS Zone Sync - Reconcile a Cloudflare zone against a YAML record set"
    )

    parser.add_argument("token", help="Access token used in API")
    parser.add_argument("zone", help="Zone ID")
    parser.add_argument("config", help="Config file")

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be changed without making changes",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    config_logger({}, args.verbose)
    logger.info(f"Verbose: {args.verbose}")

    client = None
    try:
        zone_config = ZoneConfigParser(args.config).parse()
        if zone_config.logging:
            config_logger(zone_config.logging, args.verbose)

        client = DNSClient(
            {
                "default_provider": "cloudflare",
                "dns_providers": {"cloudflare": {"token": args.token}},
            }
        )
        try:
            client.verify()
        except ProviderError as e:
            # Account-owned tokens fail this check but may still edit the zone
            logger.warning(f"Token verification failed, continuing: {e}")

        dns_manager = DNSManager(client, verbose=args.verbose)
        result = dns_manager.sync(args.zone, zone_config, dry_run=args.dry_run)

    except (ConfigError, ProviderError, ValueError) as e:
        logger.error(f"{e}")
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    finally:
        if client is not None:
            client.close()

    if result.failures:
        logger.warning(f"{result.failures} record operation(s) failed, see log above")

    print("DNS zone sync completed")
    sys.exit(0)


def config_logger(logging_config: Dict, verbose: bool = False):
    """Configure logging."""
    log_level = str(logging_config.get("level", "INFO")).upper()
    if verbose:
        log_level = logging.DEBUG

    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = logging_config.get("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


if __name__ == "__main__":
    main()
