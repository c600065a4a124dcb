"""Shared test fixtures for cloudflare-dns01-solver."""

from unittest.mock import AsyncMock

import pytest

from cf_dns01.config import SolverConfig
from cf_dns01.dns.base import DnsProvider
from cf_dns01.models import ChallengePreparation, DnsRecord, Zone


@pytest.fixture(autouse=True)
def _clear_solver_env(monkeypatch):
    """Keep real Cloudflare settings from leaking into tests."""
    for name in (
        "CLOUDFLARE_API_TOKEN",
        "CLOUDFLARE_ZONE_ID",
        "DNS_PROPAGATION_INTERVAL_MS",
        "DNS_PROPAGATION_TIMEOUT_MS",
        "DNS_NAMESERVERS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> SolverConfig:
    return SolverConfig(api_token="tok", propagation_interval=10, propagation_timeout=50)


@pytest.fixture
def preparation() -> ChallengePreparation:
    return ChallengePreparation(target="_acme-challenge.example.com", value="token-abc")


@pytest.fixture
def provider() -> AsyncMock:
    """DnsProvider double that knows the example.com zone and hands out sequential record ids."""
    mock = AsyncMock(spec=DnsProvider)
    mock.list_zones.side_effect = lambda name: [Zone(id="zone-123", name=name)] if name == "example.com" else []

    counter = iter(range(1, 1000))

    def _create(zone_id, name, content, ttl):
        return DnsRecord(id=f"rec-{next(counter)}", type="TXT", name=name, content=content, ttl=ttl)

    mock.create_txt_record.side_effect = _create
    return mock
