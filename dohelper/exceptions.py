"""Exception hierarchy for do-helper.

All do-helper exceptions inherit from DoHelperError, so the command line
entry point can turn any of them into an exit status with a single except
clause.
"""

from __future__ import annotations


class DoHelperError(Exception):
    """Base exception for all do-helper errors."""


class ConfigurationError(DoHelperError):
    """Raised for invalid configuration or missing required settings."""


class UpstreamError(DoHelperError):
    """Raised when the DigitalOcean API cannot be listed or parsed."""


class EmptyResultError(DoHelperError):
    """Raised when the listing succeeded but returned no droplets."""

    def __init__(self) -> None:
        super().__init__("No droplets returned by the DigitalOcean API")
