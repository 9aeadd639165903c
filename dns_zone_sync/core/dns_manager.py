"""
DNS Zone Sync - Reconcile a Cloudflare zone against a declared record set

This module fetches the live records of a zone, classifies them against the
declared records and applies the resulting creates, updates and deletes.
A failing record never stops the rest of the batch.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..parsers.zone_config import ZoneConfig
from ..providers.dns_client import DNSClient
from .record_manager import RecordManager
from .records import DeclaredRecord, LiveRecord, ReconciliationResult, is_supported_type

# Initialize rich console and logger
console = Console()
logger = logging.getLogger(__name__)


@dataclass
class ApplyReport:
    """Per-record outcome of one apply bucket."""

    operation: str
    succeeded: list = field(default_factory=list)
    failed: list = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.succeeded) + len(self.failed)


@dataclass
class SyncResult:
    """Outcome of a full reconciliation run."""

    plan: ReconciliationResult
    reports: List[ApplyReport] = field(default_factory=list)
    dry_run: bool = False

    @property
    def failures(self) -> int:
        return sum(len(r.failed) for r in self.reports)

    @property
    def applied(self) -> int:
        return sum(len(r.succeeded) for r in self.reports)


class DNSManager:
    """Main DNS management class that orchestrates the entire process."""

    def __init__(
        self,
        dns_client: DNSClient,
        verbose: bool = False,
        output: Optional[Console] = None,
    ):
        """Initialize the DNS manager with a provider client."""
        self.dns_client = dns_client
        self.record_manager = RecordManager()
        self.verbose = verbose
        self.console = output or console

    def sync(self, zone_id: str, zone_config: ZoneConfig, dry_run: bool = False) -> SyncResult:
        """Fetch, reconcile and apply the declared records for one zone.

        Provider errors while fetching propagate, nothing has been changed
        at that point.
        """
        live_records = self.fetch_zone(zone_id)

        if self.verbose:
            self._display_records("Declared records", zone_config.records)

        plan = self.record_manager.reconcile(
            zone_config.records, live_records, zone_config.domain
        )
        self._display_changes_summary(plan)

        result = SyncResult(plan=plan, dry_run=dry_run)
        if dry_run:
            self.console.print("[yellow]DRY RUN MODE - No changes will be applied[/yellow]")
            return result

        if plan.is_empty():
            self.console.print(
                "[green]No changes required - DNS records are up to date[/green]"
            )
            return result

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            task = progress.add_task("Applying DNS changes...", total=plan.total_changes)
            result.reports.append(self.apply_deletes(zone_id, plan.to_delete))
            progress.update(task, advance=len(plan.to_delete))
            result.reports.append(self.apply_updates(zone_id, plan.to_update))
            progress.update(task, advance=len(plan.to_update))
            result.reports.append(self.apply_creates(zone_id, plan.to_create))
            progress.update(task, advance=len(plan.to_create))

        self._display_apply_summary(result)
        return result

    def fetch_zone(self, zone_id: str) -> List[LiveRecord]:
        """Fetch the live records of a zone."""
        logger.info("Fetching zone")
        records = self.dns_client.list_records(zone_id)
        logger.info(f"Found {len(records)} existing DNS records")

        if self.verbose:
            self._display_records("Live records", records)

        return records

    def apply_creates(self, zone_id: str, records: List[DeclaredRecord]) -> ApplyReport:
        """Create each declared record, continuing past failures."""
        report = ApplyReport("create")
        if not records:
            return report

        logger.info("Create online records")
        for record in records:
            try:
                self.dns_client.create_record(
                    zone_id, record.name, record.type, record.content, record.proxied
                )
            except Exception as e:
                logger.error(f"Failed creating record [{record.type}] {record.name}: {e}")
                self.console.print(f"[red]Failed to create {record.name}: {e}[/red]")
                report.failed.append((record, e))
                continue

            report.succeeded.append(record)
            logger.info(f"Created record: [{record.type}] {record.name}")

        logger.info("Finish creating online records")
        return report

    def apply_updates(self, zone_id: str, records: List[DeclaredRecord]) -> ApplyReport:
        """Update each paired record that still differs, continuing past failures."""
        report = ApplyReport("update")
        if not records:
            return report

        logger.info("Update online records")
        for record in records:
            if not record.needs_update():
                logger.debug(f"Skipping in-sync record [{record.type}] {record.name}")
                continue

            try:
                self.dns_client.update_record(
                    zone_id,
                    record.matched_live.id,
                    record.name,
                    record.type,
                    record.content,
                    record.proxied,
                )
            except Exception as e:
                logger.error(f"Failed updating record [{record.type}] {record.name}: {e}")
                self.console.print(f"[red]Failed to update {record.name}: {e}[/red]")
                report.failed.append((record, e))
                continue

            report.succeeded.append(record)
            logger.info(f"Updated record: [{record.type}] {record.name}")

        logger.info("Finish updating online records")
        return report

    def apply_deletes(self, zone_id: str, records: List[LiveRecord]) -> ApplyReport:
        """Delete each live record by id, continuing past failures."""
        report = ApplyReport("delete")
        if not records:
            return report

        logger.info("Delete online records")
        for record in records:
            try:
                self.dns_client.delete_record(zone_id, record.id)
            except Exception as e:
                logger.error(f"Failed deleting record [{record.type}] {record.name}: {e}")
                self.console.print(f"[red]Failed to delete {record.name}: {e}[/red]")
                report.failed.append((record, e))
                continue

            report.succeeded.append(record)
            logger.info(f"Deleted record: [{record.type}] {record.name}")

        logger.info("Finish deleting online records")
        return report

    def _display_records(self, title: str, records):
        """Print A and CNAME records as a table."""
        table = Table(title=title)
        table.add_column("Name", style="cyan")
        table.add_column("Type", style="magenta")
        table.add_column("Content", style="white")
        table.add_column("Proxied", style="yellow")

        for record in records:
            if not is_supported_type(record.type):
                continue
            table.add_row(record.name, record.type, record.content, str(record.proxied))

        self.console.print(table)

    def _display_changes_summary(self, plan: ReconciliationResult):
        """Display a summary of planned changes."""
        table = Table(title="DNS Changes Summary")
        table.add_column("Operation", style="cyan")
        table.add_column("Count", style="magenta")
        table.add_column("Details", style="white")

        if plan.to_create:
            table.add_row(
                "Create",
                str(len(plan.to_create)),
                ", ".join(f"[{r.type}] {r.name} -> {r.content}" for r in plan.to_create),
            )

        if plan.to_update:
            table.add_row(
                "Update",
                str(len(plan.to_update)),
                ", ".join(
                    f"[{r.type}] {r.name} {r.matched_live.content} -> {r.content}"
                    for r in plan.to_update
                ),
            )

        if plan.to_delete:
            table.add_row(
                "Delete",
                str(len(plan.to_delete)),
                ", ".join(f"[{r.type}] {r.name}" for r in plan.to_delete),
            )

        if plan.in_sync:
            table.add_row(
                "No Change",
                str(len(plan.in_sync)),
                ", ".join(f"[{r.type}] {r.name}" for r in plan.in_sync),
            )

        self.console.print(table)
        self.console.print(f"\n[bold]Total changes: {plan.total_changes}[/bold]")

        if self.verbose:
            for title, records in (
                ("To create", plan.to_create),
                ("To update", plan.to_update),
                ("To delete", plan.to_delete),
            ):
                if records:
                    self._display_records(title, records)

    def _display_apply_summary(self, result: SyncResult):
        total = result.applied + result.failures
        if result.failures:
            self.console.print(
                f"[yellow]Applied {result.applied}/{total} changes, "
                f"{result.failures} failed[/yellow]"
            )
            return

        self.console.print(f"[blue]Successfully applied {result.applied}/{total} changes[/blue]")
