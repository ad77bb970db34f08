"""Exceptions raised by wifi-stats."""


class WifiStatsError(Exception):
    """Base exception for wifi-stats."""


class UsageError(WifiStatsError):
    """Collection was requested with invalid options."""
