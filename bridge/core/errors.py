"""Error taxonomy shared by the store, pricing, quote providers and handlers."""

from __future__ import annotations

from typing import Sequence, Tuple


class BridgeError(Exception):
    """Base class for all application errors."""


class ValidationError(BridgeError):
    """Client payload failed a presence or type check.

    ``fields`` lists every field the payload was expected to carry, not only
    the ones that failed.
    """

    def __init__(self, message: str, fields: Sequence[str] = ()):
        super().__init__(message)
        self.message = message
        self.fields: Tuple[str, ...] = tuple(fields)


class UpstreamError(BridgeError):
    """Remote quote source was unreachable or returned an unusable response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(BridgeError):
    """Invalid deployment configuration."""
