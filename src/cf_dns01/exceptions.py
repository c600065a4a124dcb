"""Errors raised by the DNS-01 solver."""

from __future__ import annotations

from typing import Any

_FALLBACK_API_ERROR = "Unknown Cloudflare API error"


class Dns01Error(Exception):
    """Base class for solver errors."""


class ZoneNotFoundError(Dns01Error):
    """No Cloudflare zone owns any suffix of the challenge target."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Could not find Cloudflare zone for domain: {target}")


class RemoteApiError(Dns01Error):
    """The Cloudflare API rejected a request or could not be reached.

    ``messages`` holds the provider's error messages in the order they were
    returned; the exception text joins them with ``", "``.
    """

    def __init__(self, messages: list[str], status_code: int | None = None) -> None:
        self.messages = list(messages)
        self.status_code = status_code
        self.detail = ", ".join(self.messages) or _FALLBACK_API_ERROR
        super().__init__(f"Cloudflare API error: {self.detail}")

    @classmethod
    def from_envelope(cls, data: dict[str, Any], status_code: int | None = None) -> RemoteApiError:
        """Build an error from a ``{success, result, errors}`` response envelope."""
        errors = data.get("errors") or []
        messages = [str(e.get("message", "")) for e in errors if isinstance(e, dict)]
        return cls(messages, status_code=status_code)


class PropagationTimeoutError(Dns01Error, TimeoutError):
    """The expected TXT value never showed up in DNS before the deadline."""

    def __init__(self, target: str, timeout: float) -> None:
        self.target = target
        self.timeout = timeout
        super().__init__(f"DNS propagation timeout after {timeout}ms for {target}")
