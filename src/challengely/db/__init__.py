"""Database layer for challengely."""

from .engine import get_db_path, init_db
from .repositories import KeyValueRepository
from .storage import Storage

__all__ = [
    "get_db_path",
    "init_db",
    "KeyValueRepository",
    "Storage",
]
