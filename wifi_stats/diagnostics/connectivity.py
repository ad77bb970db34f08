"""Connectivity probes (default gateway and ping)."""

from ..logging_config import EventSink
from ..models import PingResult
from .base import BaseProbe
from .parsers import parse_default_gateway, parse_ping_stats
from .platform import CommandExecutor


class GatewayProbe(BaseProbe):
    """Look up the default route's gateway."""

    name = "gateway"
    description = "Default gateway address"

    async def run(self) -> str | None:
        """
        Query the routing table for the default gateway.

        Returns:
            Gateway address, or None if no default route was reported
        """
        self._emit("info", "start")
        result = await self.executor.run(["route", "-n", "get", "default"])
        gateway = parse_default_gateway(result.stdout)

        if not gateway:
            self._emit("error", "error", stderr=result.stderr)
            return None

        self._emit("success", "success", gateway=gateway)
        return gateway


class PingProbe(BaseProbe):
    """Measure latency, jitter and loss to one host."""

    name = "ping"
    description = "Ping statistics for a host"

    async def run(self, host: str, count: int) -> PingResult:
        """
        Ping a host.

        Parsed statistics win over the exit status: ping exits non-zero on
        any loss, so a failed process that still printed an average keeps
        its statistics and reports the failure as an advisory error.

        Args:
            host: Target host or address
            count: Number of echo requests

        Returns:
            PingResult for the host
        """
        self._emit("info", "start", host=host, count=count)
        result = await self.executor.run(
            ["ping", "-n", "-c", str(count), host],
            timeout=count + self.settings.ping_timeout_grace,
        )
        stats = parse_ping_stats(result.stdout)

        if stats.avg_ms is None and not result.success:
            self._emit("error", "error", host=host, stderr=result.stderr)
            return PingResult(
                target=host,
                samples=count,
                error=result.stderr or "ping failed",
            )

        self._emit(
            "success",
            "success",
            host=host,
            avg_ms=stats.avg_ms,
            jitter_ms=stats.jitter_ms,
            loss_pct=stats.loss_pct,
        )
        return PingResult(
            target=host,
            samples=count,
            avg_ms=stats.avg_ms,
            jitter_ms=stats.jitter_ms,
            loss_pct=stats.loss_pct,
            error=result.error,
        )


async def get_default_gateway(
    executor: CommandExecutor | None = None,
    sink: EventSink | None = None,
) -> str | None:
    """Look up the default gateway."""
    probe = GatewayProbe(executor=executor, sink=sink)
    return await probe.run()


async def ping_host(
    host: str,
    count: int,
    executor: CommandExecutor | None = None,
    sink: EventSink | None = None,
) -> PingResult:
    """Ping a host."""
    probe = PingProbe(executor=executor, sink=sink)
    return await probe.run(host, count)
