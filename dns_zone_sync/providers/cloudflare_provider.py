"""
Cloudflare DNS provider implementation.

This module talks to the Cloudflare v4 REST API using the requests library.
"""

import logging
from typing import Dict, List, Optional

import requests

from .base_provider import DNSProvider, ProviderError
from ..core.records import LiveRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_TIMEOUT = 30
DEFAULT_PER_PAGE = 100


class CloudflareAPIError(ProviderError):
    """Error reported by the Cloudflare API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[List[Dict]] = None,
    ):
        self.errors = errors or []
        super().__init__(message, status_code)


class CloudflareProvider(DNSProvider):
    """Cloudflare DNS provider implementation using the v4 REST API."""

    def __init__(self, config: Dict):
        """Initialize Cloudflare provider."""
        self.config = config
        self.token = config.get("token", "")
        self.base_url = config.get("base_url", DEFAULT_BASE_URL).rstrip("/")
        self.timeout = config.get("timeout", DEFAULT_TIMEOUT)
        self.per_page = config.get("per_page", DEFAULT_PER_PAGE)

        if not self.token:
            raise ValueError("Cloudflare provider requires an API token")

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.token}",
                "Content-Type": "application/json",
            }
        )

        logger.info(f"Cloudflare provider initialized for {self.base_url}")

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict] = None,
        payload: Optional[Dict] = None,
    ) -> Dict:
        """Send a request and return the decoded Cloudflare envelope."""
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url} params={params} payload={payload}")

        try:
            response = self.session.request(
                method, url, params=params, json=payload, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Cloudflare request {method} {path} failed: {e}")

        try:
            body = response.json()
        except ValueError:
            raise CloudflareAPIError(
                f"Invalid JSON response from Cloudflare ({response.status_code})",
                status_code=response.status_code,
            )

        if not isinstance(body, dict):
            raise CloudflareAPIError(
                f"Unexpected response from Cloudflare ({response.status_code})",
                status_code=response.status_code,
            )

        if not response.ok or not body.get("success", False):
            errors = body.get("errors") or []
            messages = ", ".join(
                f"{err.get('code', '?')}: {err.get('message', 'unknown error')}"
                for err in errors
            ) or "unknown error"
            raise CloudflareAPIError(
                f"Cloudflare API error ({response.status_code}): {messages}",
                status_code=response.status_code,
                errors=errors,
            )

        return body

    def verify(self) -> None:
        """Verify the API token is valid and active."""
        body = self._request("GET", "/user/tokens/verify")
        status = (body.get("result") or {}).get("status")
        if status != "active":
            raise CloudflareAPIError(f"Cloudflare API token is not active: {status}")
        logger.info("Cloudflare API token verified")

    def list_records(self, zone_id: str) -> List[LiveRecord]:
        """Get all DNS records for a zone, following pagination."""
        records = []
        page = 1

        while True:
            body = self._request(
                "GET",
                f"/zones/{zone_id}/dns_records",
                params={"page": page, "per_page": self.per_page},
            )
            records.extend(LiveRecord.from_api(item) for item in body.get("result") or [])

            total_pages = (body.get("result_info") or {}).get("total_pages", 1)
            if page >= total_pages:
                break
            page += 1

        logger.info(f"Retrieved {len(records)} records from Cloudflare")
        return records

    def create_record(
        self, zone_id: str, name: str, record_type: str, content: str, proxied: bool
    ) -> LiveRecord:
        """Create a new DNS record."""
        body = self._request(
            "POST",
            f"/zones/{zone_id}/dns_records",
            payload=self._payload(name, record_type, content, proxied),
        )
        result = body.get("result")
        if not isinstance(result, dict):
            raise CloudflareAPIError("Cloudflare returned no record for the create request")
        return LiveRecord.from_api(result)

    def update_record(
        self,
        zone_id: str,
        record_id: str,
        name: str,
        record_type: str,
        content: str,
        proxied: bool,
    ) -> None:
        """Update an existing DNS record, leaving unmanaged fields such as ttl as they are."""
        self._request(
            "PATCH",
            f"/zones/{zone_id}/dns_records/{record_id}",
            payload=self._payload(name, record_type, content, proxied),
        )

    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        self._request("DELETE", f"/zones/{zone_id}/dns_records/{record_id}")

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _payload(name: str, record_type: str, content: str, proxied: bool) -> Dict:
        return {
            "name": name,
            "type": record_type,
            "content": content,
            "proxied": proxied,
        }
