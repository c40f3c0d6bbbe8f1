"""Notification collaborator protocol. Informed of workflow decisions; delivery is best-effort."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Protocol


class NotificationType(str, Enum):
    SELLER_APPROVED = "seller_approved"
    SELLER_DENIED = "seller_denied"
    EVENT_APPROVED = "event_approved"
    EVENT_REJECTED = "event_rejected"


@dataclass(frozen=True)
class Notification:
    type: NotificationType
    account_email: str
    payload: Dict[str, Any] = field(default_factory=dict)


class NotificationCollaborator(Protocol):
    async def notify(self, notification: Notification) -> None:
        """Deliver the notification. May raise NotificationError; callers must not propagate it."""
        ...
