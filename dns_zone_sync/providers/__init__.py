"""
DNS provider implementations.

This package contains implementations for the supported DNS providers,
Cloudflare and an in-memory mock provider.
"""

from .base_provider import DNSProvider, ProviderError
from .cloudflare_provider import CloudflareAPIError, CloudflareProvider
from .dns_client import DNSClient
from .mock_provider import MockDNSProvider

__all__ = [
    "DNSClient",
    "DNSProvider",
    "ProviderError",
    "CloudflareProvider",
    "CloudflareAPIError",
    "MockDNSProvider",
]
