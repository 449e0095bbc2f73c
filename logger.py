"""
Logging sinks for Food Tracker.
Every tracker event is stamped with the time it happened and handed to a sink.
"""

from datetime import datetime
from typing import Callable, List, Optional, Protocol, Tuple

from rich.console import Console
from rich.text import Text


class Logger(Protocol):
    """Anything with a log(message) method can receive tracker events."""

    def log(self, message: str) -> None:
        ...


class ConsoleLogger:
    """Print events as "[<timestamp>] <message>" to a rich console."""

    def __init__(self, console: Optional[Console] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.console = console or Console()
        self.clock = clock

    def log(self, message: str) -> None:
        timestamp = self.clock().isoformat()
        # Item names are user input; print them verbatim, without markup or emoji codes
        line = Text.assemble((f"[{timestamp}]", "dim"), " ", message)
        self.console.print(line, markup=False, emoji=False, highlight=False)


class RecordingLogger:
    """Keep events in memory instead of printing them."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self.records: List[Tuple[datetime, str]] = []

    def log(self, message: str) -> None:
        self.records.append((self.clock(), message))

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self.records]

    def clear(self):
        self.records.clear()
