"""Report rendering (JSON and human-readable)."""

from rich.console import Console
from rich.markup import escape

from .models import DiagnosticReport, PingResult

NOT_AVAILABLE = "n/a"
UNKNOWN = "Unknown"


def render_json(report: DiagnosticReport) -> str:
    """Serialize the report; undetermined values are explicit nulls."""
    return report.model_dump_json(indent=2)


def _metric(label: str, value: int | float | str | None, unit: str, color: str) -> str:
    display = NOT_AVAILABLE if value is None else escape(str(value))
    suffix = f" {unit}" if unit else ""
    return f"  {label}: [{color}]{display}[/{color}]{suffix}"


def _ping_lines(ping: PingResult, latency_color: str, loss_color: str) -> list[str]:
    lines = [
        _metric("Ping", ping.avg_ms, "ms", latency_color),
        _metric("Jitter", ping.jitter_ms, "ms", "red"),
        _metric("Loss", ping.loss_pct, "%", loss_color),
    ]
    if ping.error:
        lines.append(f"  Error: {escape(ping.error)}")
    return lines


def render_pretty(report: DiagnosticReport, console: Console) -> None:
    """Print the report as labelled sections."""
    lines = ["[bold]Wi-Fi Stats[/bold]"]

    lines.append("\nWi-Fi")
    wifi = report.wifi
    if wifi:
        band = f" ({wifi.band})" if wifi.band else ""
        lines.append(f"  SSID: {escape(wifi.ssid or UNKNOWN)}{band}")
        lines.append(f"  BSSID: {escape(wifi.bssid or UNKNOWN)}")
        lines.append(_metric("Link Rate", wifi.link_rate_mbps, "Mbps", "green"))
        lines.append(_metric("Signal", wifi.signal_dbm, "dBm", "yellow"))
        lines.append(_metric("Noise", wifi.noise_dbm, "dBm", "green"))
        lines.append(f"  Channel: {wifi.channel if wifi.channel is not None else UNKNOWN}")
    else:
        lines.append(f"  {NOT_AVAILABLE}")

    lines.append("\nRouter")
    lines.append(f"  Gateway: {escape(report.router.gateway or UNKNOWN)}")
    if report.router.ping:
        lines.extend(_ping_lines(report.router.ping, "green", "yellow"))

    lines.append("\nInternet")
    lines.append(f"  Target: {escape(report.internet.target)}")
    if report.internet.ping:
        lines.extend(_ping_lines(report.internet.ping, "yellow", "green"))

    lines.append("\nDNS")
    lines.append(f"  Server: {escape(report.dns.server or UNKNOWN)} ({report.dns.source})")
    lookup = report.dns.lookup
    if lookup:
        lines.append(_metric("Lookup", lookup.lookup_ms, "ms", "green"))
        if lookup.error:
            lines.append(f"  Error: {escape(lookup.error)}")

    speedtest = report.speedtest
    if speedtest:
        lines.append("\nSpeed Test")
        if speedtest.error:
            lines.append(f"  Error: {escape(speedtest.error)}")
        else:
            lines.append(_metric("Download", speedtest.download_mbps, "Mbps", "green"))
            lines.append(_metric("Upload", speedtest.upload_mbps, "Mbps", "green"))
            lines.append(_metric("Base RTT", speedtest.base_rtt_ms, "ms", "yellow"))
            lines.append(_metric("Responsiveness", speedtest.responsiveness_ms, "ms", "yellow"))
            if speedtest.endpoint:
                lines.append(f"  Endpoint: {escape(speedtest.endpoint)}")

    for line in lines:
        console.print(line, highlight=False)
