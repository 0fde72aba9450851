from __future__ import annotations

from typing import Optional

from sqlmodel import Session

from ..services import (
    AccountStore,
    LoggingNotifier,
    Notifier,
    SqlAccountStore,
    TransferOperation,
    WithdrawalOperation,
)
from .config import Settings, get_settings
from .db import open_session


def get_account_store(
    session: Optional[Session] = None,
    settings: Optional[Settings] = None,
) -> SqlAccountStore:
    """Build a SQL store; without a session, one is opened on the shared engine."""
    settings = settings or get_settings()
    if session is None:
        session = open_session(settings)
    return SqlAccountStore(session, settings.limits())


def get_transfer_operation(
    store: AccountStore,
    notifier: Optional[Notifier] = None,
) -> TransferOperation:
    return TransferOperation(store, notifier or LoggingNotifier())


def get_withdrawal_operation(
    store: AccountStore,
    notifier: Optional[Notifier] = None,
) -> WithdrawalOperation:
    return WithdrawalOperation(store, notifier or LoggingNotifier())
