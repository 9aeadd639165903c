"""
Record models - In-memory representation of declared and live DNS records

Declared records come from the zone configuration file, live records come
from the DNS provider. Both are rebuilt on every run.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

SUPPORTED_TYPES = ("A", "CNAME")
APEX = "@"


def resolve_name(name: str, domain: str) -> str:
    """Expand a short record name into a fully-qualified name for the zone."""
    if name == APEX:
        return domain

    return f"{name}.{domain}"


def is_supported_type(record_type: str) -> bool:
    """Only A and CNAME records take part in reconciliation."""
    return record_type in SUPPORTED_TYPES


@dataclass
class LiveRecord:
    """A record as currently held by the DNS provider."""

    id: str
    name: str
    type: str
    content: str
    proxied: bool = False

    @classmethod
    def from_api(cls, data: Dict) -> "LiveRecord":
        """Build a live record from a provider API payload."""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            type=data["type"],
            content=data["content"],
            proxied=bool(data.get("proxied", False)),
        )


@dataclass
class DeclaredRecord:
    """A record declared in the zone configuration.

    ``matched_live`` is only set on the copies the reconciliation engine
    places in the update bucket.
    """

    name: str
    type: str
    content: str
    proxied: bool = False
    matched_live: Optional[LiveRecord] = None

    def full_name(self, domain: str) -> str:
        return resolve_name(self.name, domain)

    def matches(self, domain: str, live: LiveRecord) -> bool:
        """Match on (full name, type) only, content and proxy flag are ignored."""
        return self.full_name(domain) == live.name and self.type == live.type

    def needs_update(self) -> bool:
        """Check whether the paired live record differs in content or proxy flag."""
        if self.matched_live is None:
            return False

        return (
            self.proxied != self.matched_live.proxied
            or self.content != self.matched_live.content
        )


@dataclass
class ReconciliationResult:
    """Outcome of a reconciliation pass."""

    to_create: List[DeclaredRecord] = field(default_factory=list)
    to_update: List[DeclaredRecord] = field(default_factory=list)
    to_delete: List[LiveRecord] = field(default_factory=list)
    in_sync: List[DeclaredRecord] = field(default_factory=list)

    @property
    def total_changes(self) -> int:
        return len(self.to_create) + len(self.to_update) + len(self.to_delete)

    def is_empty(self) -> bool:
        return self.total_changes == 0
