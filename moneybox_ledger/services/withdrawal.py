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


class WithdrawalOperation:
    def __init__(self, store: AccountStore, notifier: Notifier) -> None:
        self.store = store
        self.notifier = notifier

    def execute(self, account_id: UUID, amount: AmountLike) -> OperationResult:
        amount = to_amount(amount)

        try:
            account = self.store.get(account_id)
        except PersistenceError as exc:
            return self._reject(ErrorKind.PERSISTENCE_FAILURE, exc.detail, account_id)

        if account is None:
            return self._reject(
                ErrorKind.ACCOUNT_NOT_FOUND, f"Account {account_id} not found", account_id
            )

        if not account.try_debit(amount):
            return self._reject(
                ErrorKind.INSUFFICIENT_FUNDS,
                "Insufficient funds for withdrawal",
                account_id,
            )

        try:
            self.store.save(account)
        except PersistenceError as exc:
            return self._reject(ErrorKind.PERSISTENCE_FAILURE, exc.detail, account_id)

        logger.info(
            "withdrawal.completed",
            extra={
                "account_id": str(account_id),
                "amount": str(amount),
                "balance": str(account.balance),
            },
        )

        notified, failed = send_alerts(
            self.notifier,
            ((NotificationKind.LOW_FUNDS, account, account.has_low_funds()),),
        )
        return OperationResult.completed(
            accounts=(AccountSnapshot.from_account(account),),
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
            "withdrawal.rejected",
            extra={"error": error.value, "account_id": str(account_id)},
        )
        return OperationResult.rejected(error, detail, account_id)
