"""Throughput test probe built on macOS networkQuality."""

import json
import math
from typing import Any

from ..logging_config import EventSink
from ..models import SpeedTestMetadata, SpeedTestResult
from .base import BaseProbe
from .platform import CommandExecutor

PARSE_FAILED = "networkQuality output parse failed"


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _to_mbps(bits_per_second: Any) -> int | None:
    """Convert bits/s to whole megabits/s."""
    value = _number(bits_per_second)
    if value is None:
        return None
    # Halves round up
    return math.floor(value / 1_000_000 + 0.5)


class SpeedTestProbe(BaseProbe):
    """Measure download/upload throughput and responsiveness."""

    name = "speedtest"
    description = "networkQuality throughput test"

    async def run(self) -> SpeedTestResult:
        """
        Run networkQuality in machine-readable mode.

        A failed process and unreadable output are reported as different
        errors.

        Returns:
            SpeedTestResult with throughput in Mbps
        """
        self._emit("info", "start")
        result = await self.executor.run(
            ["networkQuality", "-c"],
            timeout=self.settings.speedtest_timeout,
        )

        if not result.success:
            self._emit("error", "error", stderr=result.stderr)
            return SpeedTestResult(error=result.stderr or "networkQuality failed")

        try:
            payload = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            self._emit("error", "parse-error", error=str(e))
            return SpeedTestResult(error=PARSE_FAILED)

        if not isinstance(payload, dict):
            self._emit("error", "parse-error", error=f"expected object, got {type(payload).__name__}")
            return SpeedTestResult(error=PARSE_FAILED)

        speedtest = SpeedTestResult(
            download_mbps=_to_mbps(payload.get("dl_throughput")),
            upload_mbps=_to_mbps(payload.get("ul_throughput")),
            base_rtt_ms=_number(payload.get("base_rtt")),
            responsiveness_ms=_number(payload.get("responsiveness")),
            interface_name=_text(payload.get("interface_name")),
            endpoint=_text(payload.get("test_endpoint")),
            raw=SpeedTestMetadata(
                start_date=_text(payload.get("start_date")),
                end_date=_text(payload.get("end_date")),
                os_version=_text(payload.get("os_version")),
            ),
        )

        self._emit(
            "success",
            "success",
            download_mbps=speedtest.download_mbps,
            upload_mbps=speedtest.upload_mbps,
            base_rtt_ms=speedtest.base_rtt_ms,
        )
        return speedtest


async def run_speed_test(
    executor: CommandExecutor | None = None,
    sink: EventSink | None = None,
) -> SpeedTestResult:
    """Run the throughput test."""
    probe = SpeedTestProbe(executor=executor, sink=sink)
    return await probe.run()
