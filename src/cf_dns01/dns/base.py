"""Abstract base class for DNS providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from cf_dns01.models import DnsRecord, Zone


class DnsProvider(ABC):
    """Interface for the zone and record API the DNS-01 solver drives.

    Implementations raise ``RemoteApiError`` when the provider rejects a call.
    """

    async def aclose(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    @abstractmethod
    async def list_zones(self, name: str) -> list[Zone]:
        """Return the zones whose name is exactly ``name`` (possibly none)."""

    @abstractmethod
    async def create_txt_record(self, zone_id: str, name: str, content: str, ttl: int) -> DnsRecord:
        """Create a TXT record.

        Args:
            zone_id: Provider zone identifier.
            name: Fully qualified record name (e.g. "_acme-challenge.example.com").
            content: TXT value (the ACME challenge token).
            ttl: Record time-to-live in seconds.

        Returns:
            The created record, including its provider-assigned id.
        """

    @abstractmethod
    async def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a record by id."""
