"""
Internal User Notification DTOs

Payload handed to notification subscribers when a user is created,
updated or deleted.
"""

from dataclasses import dataclass
from typing import Dict

from constants import UserEventType


@dataclass(frozen=True)
class UserNotificationDto:
    """
    Email plus event type for one user lifecycle event.

    Serialised with camelCase keys to match the consumers' wire format.
    """

    email: str
    event_type: UserEventType

    def to_payload(self) -> Dict[str, str]:
        return {
            "email": self.email,
            "eventType": self.event_type.value,
        }
