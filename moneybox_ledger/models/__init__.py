from .account import Account, User
from .db import AccountRecord, UserRecord
from .results import (
    AccountSnapshot,
    NotificationKind,
    OperationResult,
    OperationStatus,
)

__all__ = [
    "Account",
    "User",
    "AccountSnapshot",
    "NotificationKind",
    "OperationResult",
    "OperationStatus",
    "AccountRecord",
    "UserRecord",
]
