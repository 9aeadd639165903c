"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common interface for different DNS providers,
currently supporting Cloudflare and an in-memory mock.
"""

import logging
from typing import Dict, List

from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider
from ..core.records import LiveRecord

logger = logging.getLogger(__name__)


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "cloudflare")
        provider_config = self.config.get("dns_providers", {}).get(provider_name, {})

        if provider_name == "cloudflare":
            return CloudflareProvider(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            raise ValueError(f"Unknown DNS provider '{provider_name}'")

    def verify(self) -> None:
        """Check the provider credentials."""
        self.provider.verify()

    def list_records(self, zone_id: str) -> List[LiveRecord]:
        """Get all DNS records for a zone."""
        return self.provider.list_records(zone_id)

    def create_record(
        self, zone_id: str, name: str, record_type: str, content: str, proxied: bool
    ) -> LiveRecord:
        """Create a new DNS record."""
        return self.provider.create_record(zone_id, name, record_type, content, proxied)

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
        self.provider.update_record(
            zone_id, record_id, name, record_type, content, proxied
        )

    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        self.provider.delete_record(zone_id, record_id)

    def close(self) -> None:
        self.provider.close()
