from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional
from uuid import UUID, uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..core.config import LedgerLimits
from ..core.errors import PersistenceError
from ..core.money import from_minor_units, to_minor_units
from ..models import Account, AccountRecord, User, UserRecord


logger = logging.getLogger(__name__)


class SqlAccountStore:
    """Account store backed by a SQLModel session."""

    def __init__(self, session: Session, limits: Optional[LedgerLimits] = None) -> None:
        self.session = session
        self.limits = limits or LedgerLimits()

    # Account opening ----------------------------------------------------
    def open_account(
        self,
        email: str,
        *,
        balance: Decimal = Decimal("0"),
        withdrawn: Decimal = Decimal("0"),
        paid_in: Decimal = Decimal("0"),
    ) -> Account:
        account = Account(
            uuid4(),
            User(id=uuid4(), email=email),
            balance=balance,
            withdrawn=withdrawn,
            paid_in=paid_in,
            limits=self.limits,
        )
        user = UserRecord(id=account.owner.id, email=email)
        record = AccountRecord(id=account.id, user_id=user.id)
        self._copy_to_record(account, record)
        self.session.add(user)
        self.session.add(record)
        self.session.commit()
        return account

    # AccountStore -------------------------------------------------------
    def get(self, account_id: UUID) -> Optional[Account]:
        record = self.session.get(AccountRecord, account_id)
        if record is None:
            return None
        # Always read the committed row, not a cached identity-map copy.
        self.session.refresh(record)
        user = self.session.get(UserRecord, record.user_id)
        if user is None:
            raise PersistenceError(
                f"Account {account_id} references missing user {record.user_id}",
                account_id=account_id,
            )
        return Account(
            record.id,
            User(id=user.id, email=user.email),
            balance=from_minor_units(record.balance_minor),
            withdrawn=from_minor_units(record.withdrawn_minor),
            paid_in=from_minor_units(record.paid_in_minor),
            limits=self.limits,
        )

    def save(self, account: Account) -> None:
        self.save_all([account])

    def save_all(self, accounts: Sequence[Account]) -> None:
        try:
            for account in accounts:
                record = self.session.get(AccountRecord, account.id)
                if record is None:
                    raise PersistenceError(
                        f"Account {account.id} has not been opened",
                        account_id=account.id,
                    )
                self._copy_to_record(account, record)
                self.session.add(record)
            self.session.commit()
        except PersistenceError:
            self.session.rollback()
            raise
        except (SQLAlchemyError, ValueError) as exc:
            self.session.rollback()
            logger.error(
                "store.save_failed",
                extra={"account_ids": [str(a.id) for a in accounts], "error": str(exc)},
            )
            raise PersistenceError(f"Could not save accounts: {exc}") from exc

    def _copy_to_record(self, account: Account, record: AccountRecord) -> None:
        record.balance_minor = to_minor_units(account.balance)
        record.withdrawn_minor = to_minor_units(account.withdrawn)
        record.paid_in_minor = to_minor_units(account.paid_in)


@dataclass
class _AccountState:
    owner: User
    balance: Decimal
    withdrawn: Decimal
    paid_in: Decimal


class InMemoryAccountStore:
    """Dict-backed account store.

    Saved state is copied in and out so callers never share an ``Account``
    instance with the store.
    """

    def __init__(self, limits: Optional[LedgerLimits] = None) -> None:
        self.limits = limits or LedgerLimits()
        self._accounts: Dict[UUID, _AccountState] = {}

    def open_account(
        self,
        email: str,
        *,
        balance: Decimal = Decimal("0"),
        withdrawn: Decimal = Decimal("0"),
        paid_in: Decimal = Decimal("0"),
    ) -> Account:
        account = Account(
            uuid4(),
            User(id=uuid4(), email=email),
            balance=balance,
            withdrawn=withdrawn,
            paid_in=paid_in,
            limits=self.limits,
        )
        self._accounts[account.id] = self._state_of(account)
        return account

    def get(self, account_id: UUID) -> Optional[Account]:
        state = self._accounts.get(account_id)
        if state is None:
            return None
        return Account(
            account_id,
            state.owner,
            balance=state.balance,
            withdrawn=state.withdrawn,
            paid_in=state.paid_in,
            limits=self.limits,
        )

    def save(self, account: Account) -> None:
        self.save_all([account])

    def save_all(self, accounts: Sequence[Account]) -> None:
        staged: Dict[UUID, _AccountState] = {}
        for account in accounts:
            if account.id not in self._accounts:
                raise PersistenceError(
                    f"Account {account.id} has not been opened",
                    account_id=account.id,
                )
            staged[account.id] = self._state_of(account)
        self._accounts.update(staged)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    @staticmethod
    def _state_of(account: Account) -> _AccountState:
        return _AccountState(
            owner=account.owner,
            balance=account.balance,
            withdrawn=account.withdrawn,
            paid_in=account.paid_in,
        )
