from __future__ import annotations

from enum import Enum
from typing import Optional
from uuid import UUID


class ErrorKind(str, Enum):
    ACCOUNT_NOT_FOUND = "account_not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    PAY_IN_LIMIT_EXCEEDED = "pay_in_limit_exceeded"
    PERSISTENCE_FAILURE = "persistence_failure"
    NOTIFICATION_FAILURE = "notification_failure"


class LedgerError(Exception):
    """Base class for ledger errors; ``kind`` tells callers which one."""

    kind: ErrorKind

    def __init__(self, detail: str, account_id: Optional[UUID] = None) -> None:
        self.detail = detail
        self.account_id = account_id
        super().__init__(detail)


class AccountNotFoundError(LedgerError):
    """Raised when an account id is missing from the store."""

    kind = ErrorKind.ACCOUNT_NOT_FOUND


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal/transfer would drop balance below zero."""

    kind = ErrorKind.INSUFFICIENT_FUNDS


class PayInLimitExceededError(LedgerError):
    """Raised when a credit would push lifetime pay-ins over the limit."""

    kind = ErrorKind.PAY_IN_LIMIT_EXCEEDED


class PersistenceError(LedgerError):
    """Raised by an account store when a save is rejected."""

    kind = ErrorKind.PERSISTENCE_FAILURE


class NotificationError(LedgerError):
    """Raised by a notifier that could not deliver an alert."""

    kind = ErrorKind.NOTIFICATION_FAILURE


class InvalidAmountError(ValueError):
    """Raised when an amount is not a positive, exact decimal."""


ERRORS_BY_KIND: dict[ErrorKind, type[LedgerError]] = {
    error.kind: error
    for error in (
        AccountNotFoundError,
        InsufficientFundsError,
        PayInLimitExceededError,
        PersistenceError,
        NotificationError,
    )
}
