"""DNS probes (resolver discovery and lookup timing)."""

from ..logging_config import EventSink
from ..models import DnsLookupResult
from .base import BaseProbe
from .parsers import parse_dns_server, parse_query_time
from .platform import CommandExecutor


class DnsServerProbe(BaseProbe):
    """Find the system's primary DNS server."""

    name = "dns-server"
    description = "Primary nameserver from system DNS configuration"

    async def run(self) -> str | None:
        self._emit("info", "start")
        result = await self.executor.run(["scutil", "--dns"])
        server = parse_dns_server(result.stdout)

        if not server:
            self._emit("error", "error", stderr=result.stderr)
            return None

        self._emit("success", "success", server=server)
        return server


class DnsLookupProbe(BaseProbe):
    """Time a single DNS query."""

    name = "dns-lookup"
    description = "DNS lookup latency"

    async def run(self, host: str, server: str | None = None) -> DnsLookupResult:
        """
        Resolve a hostname once and report the query time.

        Args:
            host: Hostname to resolve
            server: DNS server to query (system default if None)

        Returns:
            DnsLookupResult with lookup_ms, or an error if no time was reported
        """
        self._emit("info", "start", host=host, server=server)
        command = ["dig", "+stats", "+tries=1", "+time=2", host]
        if server:
            command.append(f"@{server}")

        result = await self.executor.run(command, timeout=self.settings.dns_timeout)
        lookup_ms = parse_query_time(result.stdout)

        if lookup_ms is None:
            self._emit("error", "error", stderr=result.stderr)
            return DnsLookupResult(
                host=host,
                server=server,
                error=result.stderr or "dns lookup failed",
            )

        self._emit("success", "success", host=host, lookup_ms=lookup_ms)
        return DnsLookupResult(
            host=host,
            server=server,
            lookup_ms=lookup_ms,
            error=result.error,
        )


async def get_dns_server(
    executor: CommandExecutor | None = None,
    sink: EventSink | None = None,
) -> str | None:
    """Find the primary DNS server."""
    probe = DnsServerProbe(executor=executor, sink=sink)
    return await probe.run()


async def dns_lookup(
    host: str,
    server: str | None = None,
    executor: CommandExecutor | None = None,
    sink: EventSink | None = None,
) -> DnsLookupResult:
    """Time a DNS lookup."""
    probe = DnsLookupProbe(executor=executor, sink=sink)
    return await probe.run(host, server)
