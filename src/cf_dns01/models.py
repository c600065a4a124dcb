"""Data classes shared by the solver and the DNS provider."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChallengePreparation:
    """One DNS-01 challenge: the TXT name to publish and the value it must carry."""

    target: str
    value: str

    def to_dict(self) -> dict:
        return {
            "target": self.target,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ChallengePreparation:
        return cls(
            target=data["target"],
            value=data["value"],
        )


@dataclass(frozen=True)
class Zone:
    """A Cloudflare zone. The solver only ever reads these."""

    id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict) -> Zone:
        return cls(id=data["id"], name=data["name"])

    @classmethod
    def from_api(cls, data: dict) -> Zone:
        """Build from a zone object in a Cloudflare ``result`` payload."""
        return cls(id=data["id"], name=data.get("name", ""))


@dataclass(frozen=True)
class DnsRecord:
    """A DNS record as returned by the Cloudflare API."""

    id: str
    type: str
    name: str
    content: str
    ttl: int | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "content": self.content,
            "ttl": self.ttl,
        }

    @classmethod
    def from_dict(cls, data: dict) -> DnsRecord:
        return cls(
            id=data["id"],
            type=data["type"],
            name=data["name"],
            content=data["content"],
            ttl=data.get("ttl"),
        )

    @classmethod
    def from_api(cls, data: dict) -> DnsRecord:
        return cls(
            id=data["id"],
            type=data.get("type", ""),
            name=data.get("name", ""),
            content=data.get("content", ""),
            ttl=data.get("ttl"),
        )
