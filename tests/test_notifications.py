from __future__ import annotations

from app.core import notifications
from app.core.notifications import CollectingNotificationSink, Notification
from app.domain.value_objects import Severity


def test_order_placed_message_truncates_id_and_shows_total() -> None:
    notification = notifications.order_placed("f00dbabe12345678", 245)

    assert notification.title == "Order placed successfully! 🎉"
    assert notification.description == "Your order #f00dbabe has been placed. Total: ₹245"
    assert notification.severity == Severity.SUCCESS


def test_failure_and_validation_messages_are_errors() -> None:
    for notification in (
        notifications.order_failed(),
        notifications.cart_empty(),
        notifications.login_required(),
    ):
        assert notification.severity == Severity.ERROR
        assert notification.description


def test_notification_to_dict() -> None:
    data = Notification(title="Hi", description="There").to_dict()

    assert data["severity"] == "info"
    assert data["title"] == "Hi"
    assert "created_at" in data


def test_collecting_sink_drains_in_order() -> None:
    sink = CollectingNotificationSink(max_pending=2)
    sink.notify(Notification("a", "1"))
    sink.notify(Notification("b", "2"))
    sink.notify(Notification("c", "3"))

    assert [n.title for n in sink.pending] == ["b", "c"]
    assert [n.title for n in sink.drain()] == ["b", "c"]
    assert sink.drain() == []
