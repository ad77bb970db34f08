"""Base probe class."""

from abc import ABC, abstractmethod
from typing import Any

from ..config import Settings, get_settings
from ..logging_config import EventLevel, EventSink, NullSink
from .platform import CommandExecutor, get_executor


class BaseProbe(ABC):
    """Base class for all probes.

    A probe owns one external command invocation per run. The command
    executor and the event sink are injected so probes can run against
    fakes in tests.
    """

    # Override in subclass
    name: str = "base"
    description: str = "Base probe"

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        sink: EventSink | None = None,
        settings: Settings | None = None,
    ):
        """Initialize probe with command executor and event sink."""
        self.settings = settings or get_settings()
        self.executor = executor or get_executor(self.settings.command_timeout)
        self.sink = sink or NullSink()

    @abstractmethod
    async def run(self, *args: Any, **kwargs: Any) -> Any:
        """
        Execute the probe.

        Returns:
            The probe's typed result; never raises for tool failures
        """

    def _emit(self, level: EventLevel, stage: str, **data: Any) -> None:
        """Emit a `collect.<name>.<stage>` lifecycle event."""
        self.sink.emit(level, f"collect.{self.name}.{stage}", data)
