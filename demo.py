#!/usr/bin/env python3
"""
DNS Zone Sync - Demo Script

This script demonstrates the reconciliation of a zone using the mock
provider for safe testing and demonstration.
"""

import os

import yaml
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dns_zone_sync.core.dns_manager import DNSManager
from dns_zone_sync.parsers.zone_config import ZoneConfigParser
from dns_zone_sync.providers.dns_client import DNSClient

# Initialize rich console
console = Console()

DEMO_DOMAIN = "demo.example.com"
DEMO_ZONE_ID = "demo-zone"


def create_demo_config():
    """Create a demo zone configuration file."""
    config = {
        "domain": DEMO_DOMAIN,
        "records": [
            {"name": "@", "type": "A", "content": "203.0.113.10", "proxy": True},
            {"name": "www", "type": "CNAME", "content": DEMO_DOMAIN, "proxy": True},
            {"name": "api", "type": "A", "content": "203.0.113.20"},
            {"name": "mail", "type": "A", "content": "203.0.113.30"},
        ],
    }

    config_file = "demo_zone.yaml"
    with open(config_file, "w") as f:
        yaml.safe_dump(config, f, sort_keys=False)

    return config_file


def create_demo_client():
    """Create a DNS client backed by a pre-populated mock provider."""
    return DNSClient(
        {
            "default_provider": "mock",
            "dns_providers": {
                "mock": {
                    "domain": DEMO_DOMAIN,
                    "records": [
                        {"name": DEMO_DOMAIN, "type": "A", "content": "198.51.100.1", "proxied": True},
                        {"name": f"api.{DEMO_DOMAIN}", "type": "A", "content": "203.0.113.20"},
                        {"name": f"old.{DEMO_DOMAIN}", "type": "CNAME", "content": DEMO_DOMAIN},
                        {"name": DEMO_DOMAIN, "type": "MX", "content": f"mx.{DEMO_DOMAIN}"},
                    ],
                }
            },
        }
    )


def display_zone(dns_client, title):
    """Display the current mock zone state."""
    table = Table(title=title)
    table.add_column("ID", style="green")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Content", style="white")
    table.add_column("Proxied", style="yellow")

    for record in dns_client.list_records(DEMO_ZONE_ID):
        table.add_row(record.id, record.name, record.type, record.content, str(record.proxied))

    console.print(table)
    console.print()


def cleanup_demo_files(config_file):
    """Clean up demo files."""
    try:
        if os.path.exists(config_file):
            os.remove(config_file)
        console.print("[blue]Demo files cleaned up[/blue]")
    except OSError as e:
        console.print(f"[yellow]Warning: Could not clean up demo files: {e}[/yellow]")


def main():
    """Main demo function."""
    console.print(
        Panel.fit(
            "[bold blue]DNS Zone Sync - Demo[/bold blue]\n"
            f"[cyan]Reconciling {DEMO_DOMAIN} against a mock provider[/cyan]",
            border_style="blue",
        )
    )
    console.print()

    config_file = create_demo_config()

    try:
        zone_config = ZoneConfigParser(config_file).parse()
        dns_client = create_demo_client()
        dns_manager = DNSManager(dns_client, verbose=True)

        display_zone(dns_client, "Zone before sync")

        console.print("[bold]Dry run[/bold]")
        dns_manager.sync(DEMO_ZONE_ID, zone_config, dry_run=True)
        console.print()

        console.print("[bold]Live run[/bold]")
        dns_manager.sync(DEMO_ZONE_ID, zone_config)
        display_zone(dns_client, "Zone after sync")

        console.print("[bold]Second run (should be a no-op)[/bold]")
        result = dns_manager.sync(DEMO_ZONE_ID, zone_config)
        if result.plan.is_empty():
            console.print("[green]✓ Zone converged[/green]")
        else:
            console.print("[red]✗ Zone did not converge[/red]")

    finally:
        cleanup_demo_files(config_file)


if __name__ == "__main__":
    main()
