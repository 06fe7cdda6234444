"""Domain errors raised by services and translated to HTTP responses by the endpoints."""

from __future__ import annotations


class UpstreamError(Exception):
    """The random-user API could not be reached or returned an unusable payload."""


class InvalidArgumentError(ValueError):
    """A write was attempted with a blank employee id or note content.

    The message is safe to show to API clients.
    """
