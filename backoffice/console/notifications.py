"""User-visible notifications (toasts) raised by console actions."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..utils.logging import get_logger

logger = get_logger("console.notifications")


@dataclass
class Notification:
    level: str  # success / error
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier:
    """Collects notifications for display and mirrors them to the log."""

    def __init__(self, max_history: int = 100):
        self._max_history = max_history
        self.history: list[Notification] = []

    def success(self, message: str) -> None:
        self._push(Notification("success", message))
        logger.info("notify_success", message=message)

    def error(self, message: str) -> None:
        self._push(Notification("error", message))
        logger.warning("notify_error", message=message)

    @property
    def last(self) -> Notification | None:
        return self.history[-1] if self.history else None

    def messages(self, level: str | None = None) -> list[str]:
        return [n.message for n in self.history if level is None or n.level == level]

    def _push(self, notification: Notification) -> None:
        self.history.append(notification)
        if len(self.history) > self._max_history:
            del self.history[: len(self.history) - self._max_history]
