"""
DNS Zone Sync - Declarative DNS record management

Reconciles the A and CNAME records of a Cloudflare zone against a record set
declared in a YAML file, creating, updating and deleting records as needed.
"""

__version__ = "1.0.0"
__author__ = "DNS Zone Sync Team"
__description__ = "Reconcile Cloudflare DNS zones against a declared record set"

from .core.dns_manager import DNSManager
from .core.record_manager import RecordManager
from .providers.dns_client import DNSClient

__all__ = [
    "DNSManager",
    "RecordManager",
    "DNSClient",
]
