import random
import uuid
from decimal import Decimal

import pytest

from ..core.config import LedgerLimits
from ..core.errors import InvalidAmountError
from ..models import Account, User


def make_account(
    balance: str = "0",
    paid_in: str = "0",
    withdrawn: str = "0",
    limits: LedgerLimits | None = None,
) -> Account:
    return Account(
        uuid.uuid4(),
        User(id=uuid.uuid4(), email="owner@example.com"),
        balance=Decimal(balance),
        withdrawn=Decimal(withdrawn),
        paid_in=Decimal(paid_in),
        limits=limits,
    )


def state(account: Account) -> tuple[Decimal, Decimal, Decimal]:
    return account.balance, account.withdrawn, account.paid_in


def test_debit_entire_balance() -> None:
    account = make_account(balance="400", paid_in="400")

    assert account.try_debit(Decimal("400")) is True
    assert account.balance == Decimal("0")
    assert account.withdrawn == Decimal("-400")


def test_debit_more_than_balance_is_refused() -> None:
    account = make_account(balance="399", paid_in="399")
    before = state(account)

    assert account.try_debit(Decimal("400")) is False
    assert state(account) == before


def test_credit_up_to_pay_in_limit() -> None:
    account = make_account(balance="0", paid_in="3990")

    assert account.try_credit(Decimal("10")) is True
    assert account.paid_in == Decimal("4000")
    assert account.balance == Decimal("10")


def test_credit_over_pay_in_limit_is_refused() -> None:
    account = make_account(balance="0", paid_in="3990")
    before = state(account)

    assert account.try_credit(Decimal("11")) is False
    assert state(account) == before


def test_credit_does_not_touch_withdrawn() -> None:
    account = make_account(balance="50", paid_in="100", withdrawn="-50")

    account.try_credit(Decimal("25.50"))

    assert account.withdrawn == Decimal("-50")
    assert account.balance == Decimal("75.50")


def test_low_funds_boundary() -> None:
    assert make_account(balance="499.99").has_low_funds() is True
    assert make_account(balance="500").has_low_funds() is False


def test_approaching_pay_in_limit_boundary() -> None:
    assert make_account(paid_in="3501").is_approaching_pay_in_limit() is True
    assert make_account(paid_in="3500").is_approaching_pay_in_limit() is False


def test_custom_limits_are_honoured() -> None:
    limits = LedgerLimits(
        pay_in_limit=Decimal("100"),
        low_funds_threshold=Decimal("20"),
        approaching_pay_in_limit_threshold=Decimal("10"),
    )
    account = make_account(balance="30", paid_in="85", limits=limits)

    assert account.try_credit(Decimal("16")) is False
    assert account.try_credit(Decimal("15")) is True
    assert account.is_approaching_pay_in_limit() is True
    assert account.try_debit(Decimal("26")) is True
    assert account.has_low_funds() is True


def test_decimal_amounts_do_not_drift() -> None:
    account = make_account()

    for _ in range(10):
        assert account.try_credit(Decimal("0.10"))

    assert account.balance == Decimal("1.00")
    assert account.paid_in == Decimal("1.00")


@pytest.mark.parametrize("amount", [0, -5, Decimal("-0.01"), Decimal("0.001"), 1.5, True, "NaN", "abc"])
def test_invalid_amounts_are_rejected(amount) -> None:
    account = make_account(balance="100", paid_in="100")
    before = state(account)

    with pytest.raises(InvalidAmountError):
        account.try_debit(amount)
    with pytest.raises(InvalidAmountError):
        account.try_credit(amount)
    assert state(account) == before


@pytest.mark.parametrize(
    "kwargs",
    [
        {"balance": "-1"},
        {"withdrawn": "1"},
        {"paid_in": "-1"},
    ],
)
def test_construction_rejects_broken_state(kwargs) -> None:
    with pytest.raises(ValueError):
        make_account(**kwargs)


def test_state_is_read_only() -> None:
    account = make_account(balance="10", paid_in="10")

    with pytest.raises(AttributeError):
        account.balance = Decimal("1000")  # type: ignore[misc]


def test_invariants_hold_over_random_sequences() -> None:
    rng = random.Random(20240601)
    account = make_account(balance="250", paid_in="250")

    for _ in range(2000):
        amount = Decimal(rng.randint(1, 60000)).scaleb(-2)
        before = state(account)
        if rng.random() < 0.5:
            applied = account.try_credit(amount)
        else:
            applied = account.try_debit(amount)

        assert account.balance >= 0
        assert account.withdrawn <= 0
        assert Decimal("0") <= account.paid_in <= Decimal("4000")
        if not applied:
            assert state(account) == before


def test_over_precise_credit_cannot_slip_past_pay_in_limit() -> None:
    account = make_account(paid_in="3990")
    before = state(account)

    with pytest.raises(InvalidAmountError):
        account.try_credit(Decimal("10.0000000000000000000000000001"))
    assert state(account) == before
    assert account.try_credit(Decimal("10.00")) is True
    assert account.paid_in == Decimal("4000")


def test_account_above_a_lowered_limit_can_debit_but_not_credit() -> None:
    limits = LedgerLimits(pay_in_limit=Decimal("3000"))
    account = make_account(balance="3800", paid_in="3800", limits=limits)

    assert account.is_approaching_pay_in_limit() is True
    assert account.try_credit(Decimal("0.01")) is False
    assert account.try_debit(Decimal("100")) is True
    assert account.balance == Decimal("3700")
    assert account.paid_in == Decimal("3800")
