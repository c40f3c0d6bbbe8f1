"""Notification adapters: RabbitMQ topic routing, message body, error wrapping, log-only adapter."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from marketplace.application.exceptions import NotificationError
from marketplace.application.notifications import Notification, NotificationType
from marketplace.core.context import correlation_id_ctx
from marketplace.infrastructure.messaging.notification_publisher import (
    NOTIFICATION_EXCHANGE,
    LoggingNotifier,
    RabbitMQNotifier,
)


def event_approved() -> Notification:
    return Notification(
        type=NotificationType.EVENT_APPROVED,
        account_email="seller-1@example.com",
        payload={"submission_id": "sub-1", "event_url": "https://tickets.example.com/events/spring-gala-1"},
    )


@pytest.mark.asyncio
async def test_rabbitmq_notifier_publishes_to_topic_exchange():
    publisher = AsyncMock()
    token = correlation_id_ctx.set("corr-42")
    try:
        await RabbitMQNotifier(publisher).notify(event_approved())
    finally:
        correlation_id_ctx.reset(token)

    publisher.publish.assert_awaited_once()
    kwargs = publisher.publish.await_args.kwargs
    assert kwargs["exchange_name"] == NOTIFICATION_EXCHANGE == "notifications"
    assert kwargs["routing_key"] == "notification.event_approved"
    assert kwargs["message"] == {
        "type": "event_approved",
        "account_email": "seller-1@example.com",
        "payload": {"submission_id": "sub-1", "event_url": "https://tickets.example.com/events/spring-gala-1"},
        "correlation_id": "corr-42",
    }
    assert kwargs["message_id"]


@pytest.mark.asyncio
async def test_rabbitmq_notifier_uses_fresh_message_ids():
    publisher = AsyncMock()
    notifier = RabbitMQNotifier(publisher)
    await notifier.notify(event_approved())
    await notifier.notify(event_approved())
    ids = [c.kwargs["message_id"] for c in publisher.publish.await_args_list]
    assert ids[0] != ids[1]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kind,routing_key",
    [
        (NotificationType.SELLER_APPROVED, "notification.seller_approved"),
        (NotificationType.SELLER_DENIED, "notification.seller_denied"),
        (NotificationType.EVENT_REJECTED, "notification.event_rejected"),
    ],
)
async def test_routing_key_follows_notification_type(kind, routing_key):
    publisher = AsyncMock()
    await RabbitMQNotifier(publisher).notify(Notification(type=kind, account_email="a@example.com"))
    assert publisher.publish.await_args.kwargs["routing_key"] == routing_key


@pytest.mark.asyncio
async def test_publish_failure_becomes_notification_error():
    publisher = AsyncMock()
    publisher.publish.side_effect = ConnectionError("broker unreachable")
    with pytest.raises(NotificationError) as exc_info:
        await RabbitMQNotifier(publisher).notify(event_approved())
    assert "event_approved" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.asyncio
async def test_logging_notifier_logs_one_structured_line():
    logger = MagicMock()
    await LoggingNotifier(logger).notify(event_approved())
    logger.info.assert_called_once()
    event_name = logger.info.call_args.args[0]
    extra = logger.info.call_args.kwargs["extra"]
    assert event_name == "notification_logged"
    assert extra["notification_type"] == "event_approved"
    assert extra["routing_key"] == "notification.event_approved"
    assert extra["account_email"] == "seller-1@example.com"
