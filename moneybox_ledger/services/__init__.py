from .notifications import LoggingNotifier
from .ports import AccountStore, Notifier
from .repository import InMemoryAccountStore, SqlAccountStore
from .transfer import TransferOperation
from .withdrawal import WithdrawalOperation

__all__ = [
    "AccountStore",
    "Notifier",
    "LoggingNotifier",
    "InMemoryAccountStore",
    "SqlAccountStore",
    "TransferOperation",
    "WithdrawalOperation",
]
