from .core.config import LedgerLimits, Settings, get_settings
from .core.errors import (
    AccountNotFoundError,
    ErrorKind,
    InsufficientFundsError,
    InvalidAmountError,
    LedgerError,
    NotificationError,
    PayInLimitExceededError,
    PersistenceError,
)
from .models import Account, OperationResult, OperationStatus, User
from .services import (
    InMemoryAccountStore,
    LoggingNotifier,
    SqlAccountStore,
    TransferOperation,
    WithdrawalOperation,
)

__all__ = [
    "Account",
    "User",
    "LedgerLimits",
    "Settings",
    "get_settings",
    "ErrorKind",
    "LedgerError",
    "AccountNotFoundError",
    "InsufficientFundsError",
    "PayInLimitExceededError",
    "PersistenceError",
    "NotificationError",
    "InvalidAmountError",
    "OperationResult",
    "OperationStatus",
    "InMemoryAccountStore",
    "SqlAccountStore",
    "LoggingNotifier",
    "TransferOperation",
    "WithdrawalOperation",
]
