"""Polling public DNS until a challenge TXT record becomes visible."""

from __future__ import annotations

import asyncio
import enum
import logging
import time
from dataclasses import dataclass
from typing import Protocol

import dns.asyncresolver
import dns.exception
import dns.resolver

from cf_dns01.exceptions import PropagationTimeoutError

logger = logging.getLogger(__name__)

_DEFAULT_LOOKUP_LIFETIME = 5.0


class LookupStatus(enum.Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSIENT_ERROR = "transient_error"


@dataclass(frozen=True)
class TxtLookup:
    """Outcome of one TXT query. ``values`` is only populated when FOUND."""

    status: LookupStatus
    values: tuple[str, ...] = ()
    error: str | None = None

    def contains(self, value: str) -> bool:
        return self.status is LookupStatus.FOUND and value in self.values


class TxtLookupSource(Protocol):
    async def lookup(self, name: str) -> TxtLookup: ...


class TxtResolver:
    """TXT lookups through dnspython's async resolver.

    Every character string of every TXT record in the answer becomes one value,
    so a record published as several strings shows up as several values.

    Args:
        nameservers: Resolver addresses to query. Uses the system configuration when empty.
        lifetime: Upper bound in seconds for a single lookup, retries included.
    """

    def __init__(
        self,
        nameservers: tuple[str, ...] | list[str] = (),
        lifetime: float = _DEFAULT_LOOKUP_LIFETIME,
        _resolver: dns.asyncresolver.Resolver | None = None,
    ) -> None:
        self._nameservers = list(nameservers)
        self._lifetime = lifetime
        self._resolver = _resolver

    def _get_resolver(self) -> dns.asyncresolver.Resolver:
        # Built lazily; reading the system configuration can fail on hosts without one.
        if self._resolver is None:
            if self._nameservers:
                resolver = dns.asyncresolver.Resolver(configure=False)
                resolver.nameservers = self._nameservers
            else:
                resolver = dns.asyncresolver.Resolver()
            self._resolver = resolver
        return self._resolver

    async def lookup(self, name: str) -> TxtLookup:
        try:
            answer = await self._get_resolver().resolve(name, "TXT", lifetime=self._lifetime)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            return TxtLookup(LookupStatus.NOT_FOUND)
        except dns.exception.DNSException as exc:
            return TxtLookup(LookupStatus.TRANSIENT_ERROR, error=str(exc) or type(exc).__name__)

        values = tuple(s.decode("utf-8", errors="replace") for rdata in answer for s in rdata.strings)
        return TxtLookup(LookupStatus.FOUND, values=values)


async def wait_for_txt(
    resolver: TxtLookupSource,
    target: str,
    value: str,
    *,
    interval: float,
    timeout: float,
) -> None:
    """Poll until ``value`` is among the TXT values published at ``target``.

    NOT_FOUND and TRANSIENT_ERROR outcomes are both treated as "not yet". The
    deadline is fixed on entry and checked before each poll, so slow lookups
    shorten the number of polls rather than extend the wait.

    Args:
        resolver: Anything with an async ``lookup(name) -> TxtLookup``.
        target: Record name to query.
        value: Exact TXT value expected.
        interval: Delay between polls, in milliseconds.
        timeout: Total budget, in milliseconds.

    Raises:
        PropagationTimeoutError: If the value was not observed before the deadline.
    """
    start = time.monotonic()
    deadline = start + timeout / 1000
    polls = 0

    while time.monotonic() < deadline:
        polls += 1
        result = await resolver.lookup(target)
        if result.contains(value):
            logger.info(
                "TXT record %s propagated after %d poll(s) in %.0fms",
                target,
                polls,
                (time.monotonic() - start) * 1000,
            )
            return
        logger.debug("Poll %d for %s: %s %s", polls, target, result.status.value, result.error or "")
        await asyncio.sleep(interval / 1000)

    logger.warning("TXT record %s not visible after %d poll(s)", target, polls)
    raise PropagationTimeoutError(target, timeout)
