from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Protocol, runtime_checkable
from uuid import UUID

from ..models import Account


@runtime_checkable
class AccountStore(Protocol):
    """Where accounts are loaded from and saved back to.

    ``save_all`` is one unit of work: either every account is written or,
    on ``PersistenceError``, none is. ``get`` returns ``None`` for an unknown
    id and raises ``PersistenceError`` when the stored row cannot be read.
    """

    def get(self, account_id: UUID) -> Optional[Account]: ...

    def save(self, account: Account) -> None: ...

    def save_all(self, accounts: Sequence[Account]) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    def notify_low_funds(self, email: str) -> None: ...

    def notify_approaching_pay_in_limit(self, email: str) -> None: ...
