from __future__ import annotations

from collections.abc import Sequence

import pytest
from sqlmodel import Session, SQLModel

from ..core.config import LedgerLimits
from ..core.db import create_engine_for_url
from ..core.errors import NotificationError, PersistenceError
from ..models import Account
from ..services import InMemoryAccountStore, SqlAccountStore


class RecordingNotifier:
    def __init__(self) -> None:
        self.low_funds: list[str] = []
        self.approaching_pay_in_limit: list[str] = []

    def notify_low_funds(self, email: str) -> None:
        self.low_funds.append(email)

    def notify_approaching_pay_in_limit(self, email: str) -> None:
        self.approaching_pay_in_limit.append(email)


class FailingNotifier:
    def notify_low_funds(self, email: str) -> None:
        raise NotificationError(f"mail server refused {email}")

    def notify_approaching_pay_in_limit(self, email: str) -> None:
        raise NotificationError(f"mail server refused {email}")


class CountingStore(InMemoryAccountStore):
    """In-memory store that records every save call."""

    def __init__(self, limits: LedgerLimits) -> None:
        super().__init__(limits)
        self.saved: list[list[Account]] = []

    def save_all(self, accounts: Sequence[Account]) -> None:
        self.saved.append(list(accounts))
        super().save_all(accounts)


class BrokenStore(CountingStore):
    def save_all(self, accounts: Sequence[Account]) -> None:
        self.saved.append(list(accounts))
        raise PersistenceError("database unavailable")


@pytest.fixture
def limits() -> LedgerLimits:
    return LedgerLimits()


@pytest.fixture
def store(limits: LedgerLimits) -> CountingStore:
    return CountingStore(limits)


@pytest.fixture
def broken_store(limits: LedgerLimits) -> BrokenStore:
    return BrokenStore(limits)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def session(tmp_path):
    engine = create_engine_for_url(f"sqlite:///{tmp_path / 'test.db'}")
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def sql_store(session: Session, limits: LedgerLimits) -> SqlAccountStore:
    return SqlAccountStore(session, limits)


@pytest.fixture
def failing_notifier() -> FailingNotifier:
    return FailingNotifier()
