from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import ERRORS_BY_KIND, ErrorKind
from .account import Account


class OperationStatus(str, Enum):
    COMPLETED = "completed"
    REJECTED = "rejected"


class NotificationKind(str, Enum):
    LOW_FUNDS = "low_funds"
    APPROACHING_PAY_IN_LIMIT = "approaching_pay_in_limit"


class AccountSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    owner_email: str
    balance: Decimal = Field(..., ge=0)
    withdrawn: Decimal = Field(..., le=0)
    paid_in: Decimal = Field(..., ge=0)

    @classmethod
    def from_account(cls, account: Account) -> "AccountSnapshot":
        return cls(
            id=account.id,
            owner_email=account.owner.email,
            balance=account.balance,
            withdrawn=account.withdrawn,
            paid_in=account.paid_in,
        )


class OperationResult(BaseModel):
    """
    Outcome of a transfer or withdrawal.

    A rejected result carries the ``error`` kind and a ``detail`` message and
    guarantees nothing was persisted. A completed result carries the
    post-operation snapshots (source first for transfers), the alerts that
    were sent, and any alerts that failed to go out.
    """

    model_config = ConfigDict(frozen=True)

    status: OperationStatus
    error: Optional[ErrorKind] = None
    detail: Optional[str] = None
    account_id: Optional[UUID] = None
    accounts: tuple[AccountSnapshot, ...] = ()
    notified: tuple[NotificationKind, ...] = ()
    notification_failures: tuple[NotificationKind, ...] = ()

    @classmethod
    def completed(
        cls,
        accounts: tuple[AccountSnapshot, ...],
        notified: tuple[NotificationKind, ...] = (),
        notification_failures: tuple[NotificationKind, ...] = (),
    ) -> "OperationResult":
        return cls(
            status=OperationStatus.COMPLETED,
            accounts=accounts,
            notified=notified,
            notification_failures=notification_failures,
        )

    @classmethod
    def rejected(
        cls,
        error: ErrorKind,
        detail: str,
        account_id: Optional[UUID] = None,
    ) -> "OperationResult":
        return cls(
            status=OperationStatus.REJECTED,
            error=error,
            detail=detail,
            account_id=account_id,
        )

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.COMPLETED

    def raise_for_error(self) -> "OperationResult":
        """Raise the matching ``LedgerError`` for a rejected result."""
        if self.ok:
            return self
        error_cls = ERRORS_BY_KIND[self.error]
        raise error_cls(self.detail or self.error.value, account_id=self.account_id)
