"""
User notification publisher.

Fans UserNotificationDto payloads out to in-process subscribers after a
user change has been committed. A failing subscriber is logged and skipped
so one bad consumer cannot undo or block a committed write.
"""
from typing import Callable, Dict, List
import logging
import threading

from dtos.internal.user_notification_dto import UserNotificationDto

logger = logging.getLogger(__name__)

Subscriber = Callable[[Dict[str, str]], None]


class UserNotificationPublisher:
    """
    Process-wide registry of notification subscribers.

    Subscribers receive the serialised payload ({"email", "eventType"}).
    """

    def __init__(self):
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()

    def subscribe(self, subscriber: Subscriber) -> None:
        with self._lock:
            self._subscribers.append(subscriber)
        logger.info(f"Notification subscriber registered. Total subscribers: {len(self._subscribers)}")

    def unsubscribe(self, subscriber: Subscriber) -> None:
        with self._lock:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def publish(self, notification: UserNotificationDto) -> int:
        """
        Deliver a notification to every subscriber.

        Args:
            notification: Event to deliver

        Returns:
            Number of subscribers that accepted the payload
        """
        payload = notification.to_payload()
        with self._lock:
            subscribers = list(self._subscribers)

        logger.info(f"Publishing {payload['eventType']} for {payload['email']} to {len(subscribers)} subscriber(s)")

        delivered = 0
        for subscriber in subscribers:
            try:
                subscriber(payload)
                delivered += 1
            except Exception as e:
                logger.error(f"Notification subscriber {subscriber!r} failed for {payload['eventType']}: {e}", exc_info=True)
        return delivered


# Global publisher instance
publisher = UserNotificationPublisher()
