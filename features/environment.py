"""
Behave environment configuration for DNS Zone Sync scenarios.
"""

import io
import logging

from rich.console import Console

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.zone_id = "behave-zone"
    context.live_records = []
    context.fail_on = []
    context.declared = []
    context.results = []
    context.console = Console(file=io.StringIO())

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    if hasattr(context, "dns_client"):
        context.dns_client.close()

    logger.info(f"Completed scenario: {scenario.name}")
