"""Wi-Fi radio state probe.

The adapter state is read from the first source that works: the private
airport tool when it is installed, then system_profiler.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..logging_config import EventSink
from ..models import WifiStats
from .base import BaseProbe
from .parsers import parse_airport_output, parse_system_profiler_output
from .platform import CommandExecutor


@dataclass(frozen=True)
class WifiSource:
    """One step of the Wi-Fi fallback chain."""

    name: str
    command: list[str]
    parser: Callable[[str], WifiStats]
    is_available: Callable[[], bool] = lambda: True


class WifiProbe(BaseProbe):
    """Read SSID, signal, noise, channel and link rate."""

    name = "wifi"
    description = "Wi-Fi adapter state with fallback"

    def sources(self) -> list[WifiSource]:
        """Sources to try, in order."""
        airport_path = self.settings.airport_path
        return [
            WifiSource(
                name="airport",
                command=[airport_path, "-I"],
                parser=parse_airport_output,
                is_available=lambda: Path(airport_path).exists(),
            ),
            WifiSource(
                name="system-profiler",
                command=["system_profiler", "SPAirPortDataType", "-detailLevel", "basic"],
                parser=parse_system_profiler_output,
            ),
        ]

    async def run(self) -> WifiStats | None:
        """
        Collect Wi-Fi state.

        Returns:
            WifiStats from the first source that succeeded, or None if every
            source was missing or failed
        """
        for source in self.sources():
            self.sink.emit("info", f"collect.{source.name}.start", {"command": source.command[0]})

            if not source.is_available():
                self.sink.emit(
                    "error",
                    f"collect.{source.name}.missing",
                    {"error": f"{source.command[0]} not found"},
                )
                continue

            result = await self.executor.run(source.command)
            if not result.success:
                self.sink.emit("error", f"collect.{source.name}.error", {"stderr": result.stderr})
                continue

            stats = source.parser(result.stdout)
            self.sink.emit("success", f"collect.{source.name}.success", {"ssid": stats.ssid})
            return stats

        return None


async def get_wifi_info(
    executor: CommandExecutor | None = None,
    sink: EventSink | None = None,
) -> WifiStats | None:
    """Collect Wi-Fi state."""
    probe = WifiProbe(executor=executor, sink=sink)
    return await probe.run()
