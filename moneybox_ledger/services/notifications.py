from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from ..models import Account, NotificationKind
from .ports import Notifier


logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Notifier that writes alerts to the log instead of sending email."""

    def notify_low_funds(self, email: str) -> None:
        logger.info("notification.low_funds", extra={"email": email})

    def notify_approaching_pay_in_limit(self, email: str) -> None:
        logger.info("notification.approaching_pay_in_limit", extra={"email": email})


def dispatch_notification(
    notifier: Notifier,
    kind: NotificationKind,
    account: Account,
) -> bool:
    """Send one alert for ``account``'s owner.

    Delivery is best effort. A failing notifier is logged and reported by
    returning ``False``; the exception is not re-raised.
    """
    email = account.owner.email
    try:
        if kind is NotificationKind.LOW_FUNDS:
            notifier.notify_low_funds(email)
        else:
            notifier.notify_approaching_pay_in_limit(email)
    except Exception:
        logger.exception(
            "notification.failed",
            extra={"account_id": str(account.id), "notification": kind.value},
        )
        return False
    return True


def send_alerts(
    notifier: Notifier,
    alerts: Iterable[Tuple[NotificationKind, Account, bool]],
) -> Tuple[Tuple[NotificationKind, ...], Tuple[NotificationKind, ...]]:
    """Dispatch each triggered alert; return ``(notified, failed)``."""
    notified: List[NotificationKind] = []
    failed: List[NotificationKind] = []
    for kind, account, triggered in alerts:
        if not triggered:
            continue
        if dispatch_notification(notifier, kind, account):
            notified.append(kind)
        else:
            failed.append(kind)
    return tuple(notified), tuple(failed)
