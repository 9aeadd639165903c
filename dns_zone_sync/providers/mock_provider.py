"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores records in memory
for safe testing and demonstration purposes.
"""

import itertools
import logging
from typing import Dict, List

from .base_provider import DNSProvider, ProviderError
from ..core.records import APEX, LiveRecord

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes.

    Short names are expanded against ``domain`` the way Cloudflare does.
    Full names listed in ``fail_on`` make create/update/delete calls fail.
    """

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        config = config or {}
        self.domain = config.get("domain", "")
        self.fail_on = set(config.get("fail_on", []))
        self.records: List[LiveRecord] = []
        self._ids = itertools.count(1)
        for item in config.get("records", []):
            item = dict(item)
            if not item.get("id"):
                item["id"] = self._next_id()
            self.records.append(LiveRecord.from_api(item))
        logger.info("Mock DNS provider initialized")

    def _next_id(self) -> str:
        return f"mock-{next(self._ids)}"

    def _expand(self, name: str) -> str:
        if not self.domain:
            return name
        if name == APEX:
            return self.domain
        if name == self.domain or name.endswith(f".{self.domain}"):
            return name
        return f"{name}.{self.domain}"

    def _check(self, name: str, operation: str):
        if name in self.fail_on:
            raise ProviderError(f"Mock: refusing to {operation} record {name}")

    def _find(self, record_id: str) -> int:
        for i, existing in enumerate(self.records):
            if existing.id == record_id:
                return i
        raise ProviderError(f"Mock: record {record_id} not found", status_code=404)

    def list_records(self, zone_id: str) -> List[LiveRecord]:
        """Get all DNS records for a zone."""
        logger.info(f"Mock: Retrieved {len(self.records)} records")
        return [LiveRecord(**vars(r)) for r in self.records]

    def create_record(
        self, zone_id: str, name: str, record_type: str, content: str, proxied: bool
    ) -> LiveRecord:
        """Create a new DNS record."""
        self._check(self._expand(name), "create")
        record = LiveRecord(
            id=self._next_id(),
            name=self._expand(name),
            type=record_type,
            content=content,
            proxied=proxied,
        )
        self.records.append(record)
        logger.info(f"Mock: Created record [{record_type}] {record.name} -> {content}")
        return record

    def update_record(
        self,
        zone_id: str,
        record_id: str,
        name: str,
        record_type: str,
        content: str,
        proxied: bool,
    ) -> None:
        """Update an existing DNS record."""
        self._check(self._expand(name), "update")
        i = self._find(record_id)
        self.records[i] = LiveRecord(
            id=record_id,
            name=self._expand(name),
            type=record_type,
            content=content,
            proxied=proxied,
        )
        logger.info(f"Mock: Updated record [{record_type}] {self.records[i].name} -> {content}")

    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        i = self._find(record_id)
        self._check(self.records[i].name, "delete")
        removed = self.records.pop(i)
        logger.info(f"Mock: Deleted record [{removed.type}] {removed.name}")
