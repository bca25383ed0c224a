"""
Storage Services Package

Provides the collaborator interfaces the engine reads from, and an
in-memory implementation of them.
"""

from networth.services.storage.interface import (
    AccountStorageInterface,
    AssumptionsStorageInterface,
    BalanceHistoryStorageInterface,
    NotFoundError,
    StorageConnectionError,
    StorageError,
)
from networth.services.storage.memory import InMemoryStorage

__all__ = [
    # Interfaces
    "AccountStorageInterface",
    "AssumptionsStorageInterface",
    "BalanceHistoryStorageInterface",
    # Exceptions
    "NotFoundError",
    "StorageConnectionError",
    "StorageError",
    # In-memory implementation
    "InMemoryStorage",
]
