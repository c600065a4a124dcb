"""DNS-01 challenge solver: provision TXT records, wait for propagation, reclaim them.

Typical use::

    async with create_cloudflare_dns01_solver() as solver:
        for preparation in preparations:
            await solver.set_dns(preparation)
        for preparation in preparations:
            await solver.wait_for(preparation)
        ...  # answer the ACME challenges
        await solver.cleanup_all()

The solver does no locking. Calls for different targets may run concurrently,
but provisioning and cleanup for the same target must be serialized by the caller.
"""

from __future__ import annotations

import logging
from typing import Self

from cf_dns01.config import SolverConfig, load_config
from cf_dns01.dns import get_dns_provider
from cf_dns01.dns.base import DnsProvider
from cf_dns01.dns.util import zone_candidates
from cf_dns01.exceptions import ZoneNotFoundError
from cf_dns01.models import ChallengePreparation
from cf_dns01.propagation import TxtLookupSource, TxtResolver, wait_for_txt

logger = logging.getLogger(__name__)

_CHALLENGE_TTL = 120


async def find_zone_id(provider: DnsProvider, target: str) -> str:
    """Find the id of the most specific zone that owns ``target``.

    Probes each candidate from ``zone_candidates`` in order and returns the first
    zone the provider knows about.

    Raises:
        ZoneNotFoundError: If no candidate matches.
    """
    for candidate in zone_candidates(target):
        logger.debug("Probing zone %s for %s", candidate, target)
        zones = await provider.list_zones(candidate)
        if zones:
            logger.debug("Zone %s (%s) owns %s", zones[0].name or candidate, zones[0].id, target)
            return zones[0].id
    raise ZoneNotFoundError(target)


class CloudflareDns01Solver:
    """Tracks the TXT records it created so they can be removed again.

    Args:
        config: Solver settings.
        _provider: Zone/record API; defaults to the Cloudflare provider for ``config``.
        _resolver: TXT lookup source for propagation checks.
    """

    def __init__(
        self,
        config: SolverConfig,
        _provider: DnsProvider | None = None,
        _resolver: TxtLookupSource | None = None,
    ) -> None:
        self._config = config
        self._provider = _provider or get_dns_provider(config)
        self._resolver = _resolver or TxtResolver(nameservers=config.nameservers)
        # target -> record id, present only between a successful create and a successful delete
        self._record_ids: dict[str, str] = {}
        # every preparation passed to set_dns, in order; drained by cleanup_all
        self._preparations: list[ChallengePreparation] = []

    @property
    def managed_records(self) -> dict[str, str]:
        """Snapshot of ``target -> record id`` for records not yet reclaimed."""
        return dict(self._record_ids)

    @property
    def preparations(self) -> tuple[ChallengePreparation, ...]:
        return tuple(self._preparations)

    async def resolve_zone(self, target: str) -> str:
        """Return the zone id for ``target``, honouring a configured ``zone_id``."""
        if self._config.zone_id:
            return self._config.zone_id
        return await find_zone_id(self._provider, target)

    async def set_dns(self, preparation: ChallengePreparation) -> str:
        """Create the challenge TXT record and remember its id.

        The preparation is registered before anything else so ``cleanup_all``
        sees it even when provisioning fails.

        Returns:
            The provider id of the created record.
        """
        self._preparations.append(preparation)
        zone_id = await self.resolve_zone(preparation.target)

        record = await self._provider.create_txt_record(
            zone_id,
            preparation.target,
            preparation.value,
            ttl=_CHALLENGE_TTL,
        )

        self._record_ids[preparation.target] = record.id
        return record.id

    async def wait_for(self, preparation: ChallengePreparation) -> None:
        """Block until the challenge value resolves publicly.

        Raises:
            PropagationTimeoutError: If ``propagation_timeout`` elapses first.
        """
        await wait_for_txt(
            self._resolver,
            preparation.target,
            preparation.value,
            interval=self._config.propagation_interval,
            timeout=self._config.propagation_timeout,
        )

    async def cleanup(self, preparation: ChallengePreparation) -> None:
        """Delete the record created for ``preparation``. No-op if there is none.

        On failure the record id is kept so a later call can retry.
        """
        record_id = self._record_ids.get(preparation.target)
        if not record_id:
            logger.debug("No managed record for %s, skipping cleanup", preparation.target)
            return

        zone_id = await self.resolve_zone(preparation.target)
        await self._provider.delete_record(zone_id, record_id)

        self._record_ids.pop(preparation.target, None)

    async def cleanup_all(self) -> None:
        """Clean up every registered preparation, one at a time, then clear the registry.

        The first failure propagates and leaves the registry untouched; entries
        already reclaimed are no-ops when ``cleanup_all`` runs again.
        """
        for preparation in self._preparations:
            await self.cleanup(preparation)
        self._preparations.clear()

    async def aclose(self) -> None:
        await self._provider.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()


def create_cloudflare_dns01_solver(config: SolverConfig | None = None) -> CloudflareDns01Solver:
    """Build a solver, reading configuration from the environment when none is given."""
    return CloudflareDns01Solver(config or load_config())
