"""wifi-stats: Wi-Fi, gateway, DNS and throughput diagnostics."""

__version__ = "0.1.0"
