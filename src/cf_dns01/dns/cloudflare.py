"""Cloudflare DNS provider: list zones and create/delete TXT records via the Cloudflare REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from cf_dns01.dns.base import DnsProvider
from cf_dns01.exceptions import RemoteApiError
from cf_dns01.models import DnsRecord, Zone

logger = logging.getLogger(__name__)

_API_BASE = "https://api.cloudflare.com/client/v4"
_HTTP_TIMEOUT = 30


class CloudflareDnsProvider(DnsProvider):
    """DNS provider backed by the Cloudflare API."""

    def __init__(
        self,
        api_token: str,
        _http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = _http_client or httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {api_token}",
                "Content-Type": "application/json",
            },
            timeout=_HTTP_TIMEOUT,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send one request and unwrap the ``{success, result, errors}`` envelope."""
        try:
            resp = await self._client.request(method, f"{_API_BASE}{path}", **kwargs)
        except httpx.HTTPError as exc:
            raise RemoteApiError([f"{method} {path} failed: {exc}"]) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise RemoteApiError(
                [f"{method} {path} returned a non-JSON response (HTTP {resp.status_code})"],
                status_code=resp.status_code,
            ) from exc

        if not isinstance(data, dict) or not data.get("success"):
            error = RemoteApiError.from_envelope(data if isinstance(data, dict) else {}, resp.status_code)
            logger.error("Cloudflare %s %s failed (HTTP %d): %s", method, path, resp.status_code, error.detail)
            raise error

        return data.get("result")

    async def list_zones(self, name: str) -> list[Zone]:
        result = await self._request("GET", "/zones", params={"name": name})
        return [Zone.from_api(z) for z in result or []]

    async def create_txt_record(self, zone_id: str, name: str, content: str, ttl: int) -> DnsRecord:
        result = await self._request(
            "POST",
            f"/zones/{zone_id}/dns_records",
            json={"type": "TXT", "name": name, "content": content, "ttl": ttl},
        )
        record = DnsRecord.from_api(result)
        logger.info("Created TXT record %s (id %s) in Cloudflare zone %s", name, record.id, zone_id)
        return record

    async def delete_record(self, zone_id: str, record_id: str) -> None:
        await self._request("DELETE", f"/zones/{zone_id}/dns_records/{record_id}")
        logger.info("Deleted record %s from Cloudflare zone %s", record_id, zone_id)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
