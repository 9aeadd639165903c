"""
Record Manager - Core logic for DNS record reconciliation

This module compares the declared records of a zone against the records the
provider currently holds and classifies them into create, update and delete
buckets. Only A and CNAME records are considered; everything else in the zone
is left untouched.
"""

import dataclasses
import logging
from typing import List

from .records import (
    DeclaredRecord,
    LiveRecord,
    ReconciliationResult,
    is_supported_type,
)

logger = logging.getLogger(__name__)


class RecordManager:
    """Classifies declared and live DNS records into change buckets."""

    def reconcile(
        self,
        declared: List[DeclaredRecord],
        live: List[LiveRecord],
        domain: str,
    ) -> ReconciliationResult:
        """
        Compute the changes needed to converge the live zone to the declared one.

        Args:
            declared: Records from the zone configuration, in declaration order
            live: Records currently held by the provider
            domain: Zone apex used to expand short declared names

        Returns:
            ReconciliationResult with the create, update and delete buckets
        """
        logger.info("Classify records")

        managed_live = [r for r in live if is_supported_type(r.type)]
        managed_declared = self._supported_declared(declared)

        paired: List[DeclaredRecord] = []
        to_delete: List[LiveRecord] = []

        for live_record in managed_live:
            match = self._find_match(managed_declared, live_record, domain)
            if match is None:
                to_delete.append(live_record)
                continue

            paired.append(dataclasses.replace(match, matched_live=live_record))

        to_update = [r for r in paired if r.needs_update()]
        in_sync = [r for r in paired if not r.needs_update()]

        # Create candidates are matched on the short name alone.
        paired_names = {r.name for r in paired}
        to_create = [r for r in managed_declared if r.name not in paired_names]

        result = ReconciliationResult(
            to_create=to_create,
            to_update=to_update,
            to_delete=to_delete,
            in_sync=in_sync,
        )

        logger.info(f"To create ({len(result.to_create)})")
        self._log_declared(result.to_create)
        logger.info(f"To update ({len(result.to_update)})")
        self._log_declared(result.to_update)
        logger.info(f"To delete ({len(result.to_delete)})")
        self._log_live(result.to_delete)

        return result

    def _supported_declared(self, declared: List[DeclaredRecord]) -> List[DeclaredRecord]:
        """Drop declared records of types the engine does not manage."""
        supported = []
        for record in declared:
            if not is_supported_type(record.type):
                logger.debug(f"Ignoring declared record [{record.type}] {record.name}")
                continue
            supported.append(record)
        return supported

    def _find_match(
        self, declared: List[DeclaredRecord], live_record: LiveRecord, domain: str
    ):
        """Return the first declared record matching the live record, if any."""
        for record in declared:
            if record.matches(domain, live_record):
                return record
        return None

    def _log_declared(self, records: List[DeclaredRecord]):
        for r in records:
            logger.debug(
                f"Name={r.name} Type={r.type} Content={r.content} Proxied={r.proxied}"
            )

    def _log_live(self, records: List[LiveRecord]):
        for r in records:
            logger.debug(
                f"Name={r.name} Type={r.type} Content={r.content} Proxied={r.proxied}"
            )
