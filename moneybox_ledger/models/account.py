from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from ..core.config import LedgerLimits
from ..core.money import AmountLike, to_amount


@dataclass(frozen=True)
class User:
    id: UUID
    email: str


class Account:
    """A ledger account.

    State is read-only from the outside. ``try_credit`` and ``try_debit`` are
    the only ways to move money, and each refuses a change that would break
    its invariant rather than applying it:

    * ``balance`` never drops below zero;
    * a credit never takes ``paid_in`` past ``limits.pay_in_limit``.

    An account loaded after the limit was lowered may already sit above it;
    it can still be debited, but every credit is refused.

    ``withdrawn`` is a running total of debits kept as a non-positive number.
    """

    def __init__(
        self,
        id: UUID,
        owner: User,
        *,
        balance: Decimal = Decimal("0"),
        withdrawn: Decimal = Decimal("0"),
        paid_in: Decimal = Decimal("0"),
        limits: Optional[LedgerLimits] = None,
    ) -> None:
        limits = limits or LedgerLimits()
        if balance < 0:
            raise ValueError(f"balance cannot be negative, got {balance}")
        if withdrawn > 0:
            raise ValueError(f"withdrawn cannot be positive, got {withdrawn}")
        if paid_in < 0:
            raise ValueError(f"paid_in cannot be negative, got {paid_in}")

        self._id = id
        self._owner = owner
        self._balance = Decimal(balance)
        self._withdrawn = Decimal(withdrawn)
        self._paid_in = Decimal(paid_in)
        self._limits = limits

    def __repr__(self) -> str:
        return (
            f"Account({self._id}, balance={self._balance}, "
            f"withdrawn={self._withdrawn}, paid_in={self._paid_in})"
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def owner(self) -> User:
        return self._owner

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def withdrawn(self) -> Decimal:
        return self._withdrawn

    @property
    def paid_in(self) -> Decimal:
        return self._paid_in

    @property
    def limits(self) -> LedgerLimits:
        return self._limits

    @property
    def pay_in_headroom(self) -> Decimal:
        return self._limits.pay_in_limit - self._paid_in

    def try_credit(self, amount: AmountLike) -> bool:
        amount = to_amount(amount)
        paid_in = self._paid_in + amount
        if paid_in > self._limits.pay_in_limit:
            return False

        self._balance += amount
        self._paid_in = paid_in
        return True

    def try_debit(self, amount: AmountLike) -> bool:
        amount = to_amount(amount)
        balance = self._balance - amount
        if balance < 0:
            return False

        self._balance = balance
        self._withdrawn -= amount
        return True

    def is_approaching_pay_in_limit(self) -> bool:
        return self.pay_in_headroom < self._limits.approaching_pay_in_limit_threshold

    def has_low_funds(self) -> bool:
        return self._balance < self._limits.low_funds_threshold
