"""Solver configuration and loading from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

_DEFAULT_PROPAGATION_INTERVAL_MS = 5_000
_DEFAULT_PROPAGATION_TIMEOUT_MS = 120_000


@dataclass(frozen=True)
class SolverConfig:
    """Settings for one solver instance.

    ``propagation_interval`` and ``propagation_timeout`` are in milliseconds.
    ``zone_id`` skips zone lookup entirely when set; an empty string counts as unset.
    ``nameservers`` points the propagation check at specific resolvers instead of
    the system configuration.
    """

    api_token: str
    zone_id: str | None = None
    propagation_interval: int = _DEFAULT_PROPAGATION_INTERVAL_MS
    propagation_timeout: int = _DEFAULT_PROPAGATION_TIMEOUT_MS
    nameservers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.api_token:
            raise ValueError("api_token is required")
        if self.propagation_interval <= 0:
            raise ValueError(f"propagation_interval must be positive, got: {self.propagation_interval}")
        if self.propagation_timeout <= 0:
            raise ValueError(f"propagation_timeout must be positive, got: {self.propagation_timeout}")


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ValueError(f"Required environment variable {name} is not set")
    return value


def _positive_int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got: {value}")
    return value


def load_config() -> SolverConfig:
    """Load and validate solver configuration from environment variables."""
    api_token = _require_env("CLOUDFLARE_API_TOKEN")
    zone_id = os.environ.get("CLOUDFLARE_ZONE_ID") or None

    propagation_interval = _positive_int_env("DNS_PROPAGATION_INTERVAL_MS", _DEFAULT_PROPAGATION_INTERVAL_MS)
    propagation_timeout = _positive_int_env("DNS_PROPAGATION_TIMEOUT_MS", _DEFAULT_PROPAGATION_TIMEOUT_MS)

    raw_nameservers = os.environ.get("DNS_NAMESERVERS", "")
    nameservers = tuple(ns.strip() for ns in raw_nameservers.split(",") if ns.strip())

    return SolverConfig(
        api_token=api_token,
        zone_id=zone_id,
        propagation_interval=propagation_interval,
        propagation_timeout=propagation_timeout,
        nameservers=nameservers,
    )
