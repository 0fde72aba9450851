import logging
import uuid
from decimal import Decimal

from ..models import Account, NotificationKind, User
from ..services import LoggingNotifier
from ..services.notifications import dispatch_notification, send_alerts


def make_account(email: str = "owner@example.com") -> Account:
    return Account(uuid.uuid4(), User(id=uuid.uuid4(), email=email), balance=Decimal("10"), paid_in=Decimal("10"))


def test_logging_notifier_writes_alerts(caplog) -> None:
    notifier = LoggingNotifier()

    with caplog.at_level(logging.INFO):
        notifier.notify_low_funds("a@example.com")
        notifier.notify_approaching_pay_in_limit("b@example.com")

    messages = [(record.getMessage(), record.email) for record in caplog.records]
    assert messages == [
        ("notification.low_funds", "a@example.com"),
        ("notification.approaching_pay_in_limit", "b@example.com"),
    ]


def test_dispatch_logs_failures(caplog, failing_notifier) -> None:
    account = make_account()

    with caplog.at_level(logging.ERROR):
        sent = dispatch_notification(failing_notifier, NotificationKind.LOW_FUNDS, account)

    assert sent is False
    assert caplog.records[-1].getMessage() == "notification.failed"
    assert caplog.records[-1].notification == "low_funds"


def test_send_alerts_skips_untriggered(notifier) -> None:
    low = make_account("low@example.com")
    near = make_account("near@example.com")

    notified, failed = send_alerts(
        notifier,
        (
            (NotificationKind.LOW_FUNDS, low, True),
            (NotificationKind.APPROACHING_PAY_IN_LIMIT, near, False),
        ),
    )

    assert notified == (NotificationKind.LOW_FUNDS,)
    assert failed == ()
    assert notifier.low_funds == ["low@example.com"]
    assert notifier.approaching_pay_in_limit == []
