"""Parsers for the text output of the diagnostic utilities.

Every parser here is total: fields that cannot be found come back as None
and no input, however malformed, raises.
"""

import re

from ..models import PingStats, WifiStats

_LEADING_INT = re.compile(r"^\s*(-?\d+)")

_PROFILER_SSID = re.compile(
    r"Current Network Information:[ \t]*\n[ \t]*(.+?):[ \t]*$",
    re.MULTILINE,
)
_PROFILER_SIGNAL = re.compile(r"Signal / Noise: (-?\d+) dBm / (-?\d+) dBm")
_PROFILER_CHANNEL = re.compile(r"Channel: (\d+) \(([^)]+)\)")
_PROFILER_BAND = re.compile(r"(\d+(?:\.\d+)?)\s*GHz", re.IGNORECASE)
_PROFILER_TX_RATE = re.compile(r"Transmit Rate: (\d+)")

_PING_LOSS = re.compile(r"(\d+(?:\.\d+)?)% packet loss")
# macOS: "round-trip min/avg/max/stddev = ..."; Linux: "rtt min/avg/max/mdev = ..."
_PING_RTT = re.compile(
    r"(?:round-trip|rtt) min/avg/max/(?:stddev|mdev) = "
    r"([\d.]+)/([\d.]+)/([\d.]+)/([\d.]+) ms"
)

_GATEWAY = re.compile(r"gateway: (.+)")
_DNS_SERVER = re.compile(r"nameserver\[0\] : (\S+)")
_QUERY_TIME = re.compile(r"Query time: (\d+) msec")


def _parse_int(value: str | None) -> int | None:
    """Parse the leading integer of a value, ignoring anything after it."""
    if not value:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _parse_float(value: str) -> float | None:
    try:
        return float(value)
    except ValueError:
        return None


def band_for_channel(channel: int | None) -> str | None:
    """Classify a Wi-Fi channel number into its frequency band."""
    if not channel:
        return None
    return "5 GHz" if channel > 14 else "2.4 GHz"


def parse_airport_output(output: str) -> WifiStats:
    """
    Parse `airport -I` key:value output.

    Each line is split on its first colon and both sides are trimmed; when a
    key repeats, the last occurrence wins.

    Args:
        output: Raw stdout of the airport tool

    Returns:
        WifiStats with any missing field set to None
    """
    data: dict[str, str] = {}

    for line in output.splitlines():
        if ":" not in line:
            continue
        raw_key, _, raw_value = line.partition(":")
        key = raw_key.strip()
        if not key:
            continue
        data[key] = raw_value.strip()

    # "48,1" -> primary channel 48, secondary offset 1
    channel_value = data.get("channel", "").split(",")[0]
    channel = _parse_int(channel_value)

    return WifiStats(
        ssid=data.get("SSID") or None,
        bssid=data.get("BSSID") or None,
        signal_dbm=_parse_int(data.get("agrCtlRSSI")),
        noise_dbm=_parse_int(data.get("agrCtlNoise")),
        channel=channel,
        band=band_for_channel(channel),
        link_rate_mbps=_parse_int(data.get("lastTxRate")),
    )


def parse_system_profiler_output(output: str) -> WifiStats:
    """
    Parse `system_profiler SPAirPortDataType` output.

    Only the first match of each pattern is used, which is the current
    network; the "Other Local Wi-Fi Networks" block follows it.

    Args:
        output: Raw stdout of system_profiler

    Returns:
        WifiStats (BSSID is never reported by this tool)
    """
    ssid_match = _PROFILER_SSID.search(output)
    signal_match = _PROFILER_SIGNAL.search(output)
    channel_match = _PROFILER_CHANNEL.search(output)
    transmit_match = _PROFILER_TX_RATE.search(output)

    channel = int(channel_match.group(1)) if channel_match else None
    band = None
    if channel_match:
        band_match = _PROFILER_BAND.search(channel_match.group(2))
        band = f"{band_match.group(1)} GHz" if band_match else None

    return WifiStats(
        ssid=ssid_match.group(1).strip() if ssid_match else None,
        bssid=None,
        signal_dbm=int(signal_match.group(1)) if signal_match else None,
        noise_dbm=int(signal_match.group(2)) if signal_match else None,
        channel=channel,
        band=band,
        link_rate_mbps=int(transmit_match.group(1)) if transmit_match else None,
    )


def parse_ping_stats(output: str) -> PingStats:
    """
    Parse the summary lines of ping output.

    The average and standard deviation of the round-trip quadruple are
    reported as latency and jitter. A loss of "0.0%" parses to 0.0.
    """
    loss_match = _PING_LOSS.search(output)
    rtt_match = _PING_RTT.search(output)

    return PingStats(
        avg_ms=_parse_float(rtt_match.group(2)) if rtt_match else None,
        jitter_ms=_parse_float(rtt_match.group(4)) if rtt_match else None,
        loss_pct=float(loss_match.group(1)) if loss_match else None,
    )


def parse_default_gateway(output: str) -> str | None:
    """Extract the gateway address from `route -n get default` output."""
    match = _GATEWAY.search(output)
    if not match:
        return None
    return match.group(1).strip() or None


def parse_dns_server(output: str) -> str | None:
    """Extract the first resolver's first nameserver from `scutil --dns`."""
    match = _DNS_SERVER.search(output)
    return match.group(1) if match else None


def parse_query_time(output: str) -> int | None:
    """Extract the query time in milliseconds from `dig +stats` output."""
    match = _QUERY_TIME.search(output)
    return int(match.group(1)) if match else None
