"""
Core DNS reconciliation functionality.

This package contains the record models, the reconciliation engine and the
manager that applies the resulting changes.
"""

from .dns_manager import ApplyReport, DNSManager, SyncResult
from .record_manager import RecordManager
from .records import DeclaredRecord, LiveRecord, ReconciliationResult, resolve_name

__all__ = [
    "ApplyReport",
    "DNSManager",
    "SyncResult",
    "RecordManager",
    "DeclaredRecord",
    "LiveRecord",
    "ReconciliationResult",
    "resolve_name",
]
