"""DNS name helpers."""

from __future__ import annotations

_CHALLENGE_PREFIX = "_acme-challenge."


def strip_challenge_prefix(target: str) -> str:
    """Drop a leading ``_acme-challenge.`` label and any trailing root dot."""
    return target.rstrip(".").removeprefix(_CHALLENGE_PREFIX)


def zone_candidates(target: str) -> list[str]:
    """List the zone names that could own ``target``, most specific first.

    The bare top-level label is never a candidate, so
    ``_acme-challenge.sub.example.com`` yields ``["sub.example.com", "example.com"]``.

    Args:
        target: Challenge record name (e.g. "_acme-challenge.sub.example.com").

    Returns:
        Candidate zone names; empty for single-label names.
    """
    labels = strip_challenge_prefix(target).split(".")
    return [".".join(labels[i:]) for i in range(len(labels) - 1)]
