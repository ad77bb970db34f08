"""Probes for local network telemetry.

Each probe runs one external diagnostic utility and parses its output into
a typed record. Tool failures are returned as data, never raised.
"""

from .base import BaseProbe
from .connectivity import GatewayProbe, PingProbe, get_default_gateway, ping_host
from .dns import DnsLookupProbe, DnsServerProbe, dns_lookup, get_dns_server
from .platform import CommandExecutor, CommandResult, Platform
from .speedtest import SpeedTestProbe, run_speed_test
from .wifi import WifiProbe, WifiSource, get_wifi_info

__all__ = [
    "BaseProbe",
    "CommandExecutor",
    "CommandResult",
    "DnsLookupProbe",
    "DnsServerProbe",
    "GatewayProbe",
    "PingProbe",
    "Platform",
    "SpeedTestProbe",
    "WifiProbe",
    "WifiSource",
    "dns_lookup",
    "get_default_gateway",
    "get_dns_server",
    "get_wifi_info",
    "ping_host",
    "run_speed_test",
]
