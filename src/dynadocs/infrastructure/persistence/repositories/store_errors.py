"""Translation of driver errors into domain errors."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from sqlalchemy.exc import InterfaceError, OperationalError

from dynadocs.core.logging import get_logger
from dynadocs.domain.exceptions import StoreUnavailableError

logger = get_logger(__name__)


@asynccontextmanager
async def store_errors(operation: str) -> AsyncGenerator[None, None]:
    """Re-raise connection-level database failures as StoreUnavailableError.

    Args:
        operation: Name of the repository operation, for logging.
    """
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        logger.error("Database operation failed", operation=operation, error=str(e))
        raise StoreUnavailableError(f"Database unavailable during {operation}") from e


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps read back from SQLite."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
