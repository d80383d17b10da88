from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List

from ..logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class TelemetryEvent:
    """Generic telemetry event; ``kind`` names it (e.g. ``http.start``)."""

    kind: str
    payload: dict[str, Any]


class TelemetryService:
    """Fans events out to any number of sinks."""

    def __init__(self) -> None:
        self._sinks: List[Callable[[TelemetryEvent], None]] = []

    def add_sink(self, sink: Callable[[TelemetryEvent], None]) -> None:
        self._sinks.append(sink)

    def emit(self, event: TelemetryEvent) -> None:
        for sink in list(self._sinks):
            sink(event)


def log_event(event: TelemetryEvent) -> None:
    logger.debug("%s %s", event.kind, event.payload)
