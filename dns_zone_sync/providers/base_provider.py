"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..core.records import LiveRecord


class ProviderError(RuntimeError):
    """Raised when a DNS provider rejects or fails a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def list_records(self, zone_id: str) -> List[LiveRecord]:
        """Get all DNS records for a zone."""
        pass

    @abstractmethod
    def create_record(
        self, zone_id: str, name: str, record_type: str, content: str, proxied: bool
    ) -> LiveRecord:
        """Create a new DNS record."""
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        pass

    def verify(self) -> None:
        """Check that the provider credentials are usable."""

    def close(self) -> None:
        """Release any resources held by the provider."""
