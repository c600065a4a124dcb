"""DNS provider factory."""

from __future__ import annotations

from cf_dns01.config import SolverConfig
from cf_dns01.dns.base import DnsProvider
from cf_dns01.dns.cloudflare import CloudflareDnsProvider


def get_dns_provider(config: SolverConfig) -> DnsProvider:
    """Instantiate the DNS provider for a solver configuration."""
    return CloudflareDnsProvider(api_token=config.api_token)
