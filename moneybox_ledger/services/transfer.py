from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from ..core.errors import ErrorKind, PersistenceError
from ..core.money import AmountLike, to_amount
from ..models import AccountSnapshot, NotificationKind, OperationResult
from .notifications import send_alerts
from .ports import AccountStore, Notifier


logger = logging.getLogger(__name__)


class TransferOperation:
    def __init__(self, store: AccountStore, notifier: Notifier) -> None:
        self.store = store
        self.notifier = notifier

    def execute(self, from_id: UUID, to_id: UUID, amount: AmountLike) -> OperationResult:
        """Move ``amount`` from one account to another.

        Debit, credit and save happen in that order and stop at the first
        failure, which is returned as a rejected result. Both accounts are
        saved together through ``AccountStore.save_all``, so a rejected
        transfer never leaves either account changed in storage. Low-funds
        and approaching-limit alerts go out only after a successful save.
        """
        amount = to_amount(amount)
        if from_id == to_id:
            raise ValueError("Cannot transfer to the same account")

        try:
            source = self.store.get(from_id)
            dest = self.store.get(to_id)
        except PersistenceError as exc:
            return self._reject(ErrorKind.PERSISTENCE_FAILURE, exc.detail, exc.account_id)

        if source is None:
            return self._reject(ErrorKind.ACCOUNT_NOT_FOUND, f"Account {from_id} not found", from_id)
        if dest is None:
            return self._reject(ErrorKind.ACCOUNT_NOT_FOUND, f"Account {to_id} not found", to_id)

        if not source.try_debit(amount):
            return self._reject(
                ErrorKind.INSUFFICIENT_FUNDS,
                "Insufficient funds to make transfer",
                from_id,
            )

        # source is debited in memory only; returning here persists nothing
        if not dest.try_credit(amount):
            return self._reject(
                ErrorKind.PAY_IN_LIMIT_EXCEEDED,
                "Account pay in limit reached",
                to_id,
            )

        try:
            self.store.save_all([source, dest])
        except PersistenceError as exc:
            return self._reject(ErrorKind.PERSISTENCE_FAILURE, exc.detail, exc.account_id)

        logger.info(
            "transfer.completed",
            extra={
                "source_account_id": str(from_id),
                "dest_account_id": str(to_id),
                "amount": str(amount),
                "source_balance": str(source.balance),
                "dest_paid_in": str(dest.paid_in),
            },
        )

        notified, failed = send_alerts(
            self.notifier,
            (
                (NotificationKind.LOW_FUNDS, source, source.has_low_funds()),
                (
                    NotificationKind.APPROACHING_PAY_IN_LIMIT,
                    dest,
                    dest.is_approaching_pay_in_limit(),
                ),
            ),
        )
        return OperationResult.completed(
            accounts=(AccountSnapshot.from_account(source), AccountSnapshot.from_account(dest)),
            notified=notified,
            notification_failures=failed,
        )

    def _reject(
        self,
        error: ErrorKind,
        detail: str,
        account_id: Optional[UUID],
    ) -> OperationResult:
        logger.info(
            "transfer.rejected",
            extra={
                "error": error.value,
                "account_id": str(account_id) if account_id else None,
            },
        )
        return OperationResult.rejected(error, detail, account_id)
