"""Mini README: Notification events emitted by the ledger.

Structure:
    * NotificationKind - enum of the mutations that produce a notification.
    * Notification - immutable event with display hints for toast-style UIs.
    * NotificationBus - synchronous publish/subscribe hub with bounded history.

The ledger publishes exactly one notification per successful mutation. The
web dashboard subscribes to surface them as messages and reads ``latest``
to echo the event back in JSON responses. Handlers run in subscription
order on the caller's thread; there is no queueing or acknowledgement.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, Dict, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

NotificationHandler = Callable[["Notification"], None]

_TITLES = {
    "added": "Transaction Added",
    "updated": "Transaction Updated",
    "deleted": "Transaction Deleted",
}


class NotificationKind(str, Enum):
    """Enumerate the ledger mutations that users are told about."""

    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(slots=True, frozen=True)
class Notification:
    """Ephemeral, user-facing description of a completed mutation."""

    kind: NotificationKind
    transaction_id: int
    duration_ms: int = 2000

    @property
    def title(self) -> str:
        return _TITLES[self.kind.value]

    @property
    def status(self) -> str:
        # Deletions render with the destructive colour scheme.
        return "error" if self.kind is NotificationKind.DELETED else "success"

    def as_dict(self) -> Dict[str, object]:
        """Export the notification with serialisable values."""

        return {
            "kind": self.kind.value,
            "transaction_id": self.transaction_id,
            "title": self.title,
            "status": self.status,
            "duration_ms": self.duration_ms,
        }


class NotificationBus:
    """Fan notifications out to subscribers and remember the most recent ones."""

    def __init__(self, max_history: int = 5) -> None:
        if max_history < 1:
            raise ValueError("Notification history must hold at least one entry.")
        self._handlers: List[NotificationHandler] = []
        self._history: Deque[Notification] = deque(maxlen=max_history)

    def subscribe(self, handler: NotificationHandler) -> None:
        """Register a handler invoked for every published notification."""

        self._handlers.append(handler)
        LOGGER.debug("Subscribed notification handler %r", handler)

    def unsubscribe(self, handler: NotificationHandler) -> None:
        """Remove a handler; unknown handlers are ignored."""

        if handler in self._handlers:
            self._handlers.remove(handler)

    def publish(self, notification: Notification) -> Notification:
        """Record the notification and deliver it to each subscriber in order."""

        self._history.appendleft(notification)
        LOGGER.debug(
            "Publishing %s notification for transaction %s",
            notification.kind.value,
            notification.transaction_id,
        )
        for handler in list(self._handlers):
            handler(notification)
        return notification

    def history(self) -> List[Notification]:
        """Return retained notifications, most recent first."""

        return list(self._history)

    def latest(self) -> Optional[Notification]:
        return self._history[0] if self._history else None
