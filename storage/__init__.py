"""Account storage backends."""

from .account_store import AccountStore
from .sql_store import SqlAccountStore

__all__ = ["AccountStore", "SqlAccountStore"]
