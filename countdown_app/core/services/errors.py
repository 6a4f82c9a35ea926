"""Errors raised by host-backed services."""

from __future__ import annotations


class HostServiceError(RuntimeError):
    """A settings store or scheduler could not complete a request."""
