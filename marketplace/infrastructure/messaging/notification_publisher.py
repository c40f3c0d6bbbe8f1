"""Notification collaborators: RabbitMQ topic publisher and a log-only fallback for dev."""

import logging
import uuid

from marketplace.application.exceptions import NotificationError
from marketplace.application.notifications import Notification
from marketplace.core.context import correlation_id_ctx
from marketplace.infrastructure.messaging.rabbitmq_publisher import RabbitMQPublisher

NOTIFICATION_EXCHANGE = "notifications"


def routing_key_for(notification: Notification) -> str:
    return f"notification.{notification.type.value}"


def message_body(notification: Notification) -> dict:
    return {
        "type": notification.type.value,
        "account_email": notification.account_email,
        "payload": notification.payload,
        "correlation_id": correlation_id_ctx.get(),
    }


class RabbitMQNotifier:
    """Publishes each notification to the notifications topic exchange."""

    def __init__(self, publisher: RabbitMQPublisher, exchange_name: str = NOTIFICATION_EXCHANGE) -> None:
        self._publisher = publisher
        self._exchange = exchange_name

    async def notify(self, notification: Notification) -> None:
        try:
            await self._publisher.publish(
                exchange_name=self._exchange,
                routing_key=routing_key_for(notification),
                message=message_body(notification),
                message_id=str(uuid.uuid4()),
            )
        except Exception as e:
            raise NotificationError(
                f"Failed to publish {notification.type.value} notification: {e}"
            ) from e


class LoggingNotifier:
    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    async def notify(self, notification: Notification) -> None:
        self._logger.info(
            "notification_logged",
            extra={
                "notification_type": notification.type.value,
                "account_email": notification.account_email,
                "routing_key": routing_key_for(notification),
                "payload": notification.payload,
            },
        )
