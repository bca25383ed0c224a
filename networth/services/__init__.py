"""
Services package.

Async glue between the storage collaborators and the pure engine.
"""

from typing import Optional

from networth.config import get_settings
from networth.logger import configure_logging
from networth.services.assumptions import AssumptionsProvider
from networth.services.forecast import ForecastService
from networth.services.report import ReportService
from networth.services.retry import read_with_retry
from networth.services.storage import (
    AccountStorageInterface,
    AssumptionsStorageInterface,
    BalanceHistoryStorageInterface,
    InMemoryStorage,
    NotFoundError,
    StorageConnectionError,
    StorageError,
)


def create_services(
    storage: Optional[InMemoryStorage] = None,
) -> tuple[ForecastService, ReportService, AssumptionsProvider]:
    """
    Factory function wiring all services to a single storage backend.

    Args:
        storage: Backend implementing every storage interface.
                 Defaults to a fresh, empty InMemoryStorage.

    Returns:
        (forecast_service, report_service, assumptions_provider)
    """
    configure_logging(get_settings().app.log_level)

    storage = storage if storage is not None else InMemoryStorage()
    assumptions = AssumptionsProvider(storage)
    forecast = ForecastService(storage, storage, assumptions)
    report = ReportService(storage, storage)
    return forecast, report, assumptions


__all__ = [
    # Services
    "AssumptionsProvider",
    "ForecastService",
    "ReportService",
    "create_services",
    "read_with_retry",
    # Storage
    "AccountStorageInterface",
    "AssumptionsStorageInterface",
    "BalanceHistoryStorageInterface",
    "InMemoryStorage",
    "NotFoundError",
    "StorageConnectionError",
    "StorageError",
]
