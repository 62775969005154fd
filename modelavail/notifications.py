"""
Notification delivery for operator-facing messages.
"""

from enum import Enum
from typing import List, Optional, Protocol, Tuple

from rich.console import Console
from rich.markup import escape

from .utils import get_logger

logger = get_logger(__name__)


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notifier(Protocol):
    """Anything the controller can hand a (message, severity) pair to."""

    def notify(self, message: str, severity: Severity) -> None: ...


class ConsoleNotifier:
    """Prints notifications to a rich console and keeps the latest few for redraws."""

    STYLES = {
        Severity.SUCCESS: ("green", ":white_check_mark:"),
        Severity.ERROR: ("red", ":x:"),
    }

    def __init__(self, console: Optional[Console] = None, keep: int = 5):
        self.console = console or Console(emoji_variant="text")
        self.keep = keep
        self.recent: List[Tuple[str, Severity]] = []

    def markup(self, message: str, severity: Severity) -> str:
        color, icon = self.STYLES[Severity(severity)]
        return f"[{color}]{icon} {escape(message)}[/{color}]"

    def notify(self, message: str, severity: Severity) -> None:
        severity = Severity(severity)
        logger.debug(f"Notification ({severity.value}): {message}")
        self.recent = (self.recent + [(message, severity)])[-self.keep :]
        self.console.print(self.markup(message, severity))

    def replay(self, console: Console) -> None:
        """Print and forget pending notifications, e.g. after the screen was cleared."""
        for message, severity in self.drain():
            console.print(self.markup(message, severity))

    def drain(self) -> List[Tuple[str, Severity]]:
        """Return and forget the notifications collected since the last drain."""
        recent, self.recent = self.recent, []
        return recent
