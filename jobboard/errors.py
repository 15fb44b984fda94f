"""
Error taxonomy for the job board.

Every failure a request can hit is one of three kinds, each carrying the
HTTP status it maps to at the service boundary:

- ValidationError: malformed or missing input (400)
- NotFoundError: the addressed resource does not exist (404)
- StoreError: anything raised by the underlying MongoDB driver (500)

Repository methods are wrapped with ``store_operation`` so driver errors
never leak past the data store adapter.
"""

import logging
from functools import wraps
from typing import Callable, TypeVar

from pymongo.errors import PyMongoError

T = TypeVar("T")


class BoardError(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Convert to the JSON error body."""
        return {"error": self.message}


class ValidationError(BoardError):
    """Input failed a presence or format check."""

    status_code = 400


class NotFoundError(BoardError):
    """Requested job or referenced job does not exist."""

    status_code = 404


class StoreError(BoardError):
    """Underlying database failure."""

    status_code = 500


def store_operation(operation_name: str, collection: str = "unknown"):
    """
    Decorator for repository methods with consistent failure handling.

    Logs the failure at ERROR level with a stack trace and re-raises any
    ``PyMongoError`` as ``StoreError``. Other exceptions propagate untouched.

    Args:
        operation_name: Human-readable operation name (e.g., "insert_one")
        collection: Fallback collection label for log lines. When the wrapped
            method's instance exposes ``collection_name`` that is used instead.

    Usage:
        @store_operation("find_one_by_id")
        def find_one_by_id(self, object_id):
            return self._collection.find_one({"_id": object_id})
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except PyMongoError as e:
                label = getattr(args[0], "collection_name", collection) if args else collection
                logging.getLogger(func.__module__).error(
                    f"[{label}] [{operation_name}] Failed: {e}",
                    exc_info=True,
                )
                raise StoreError(f"Database error during {operation_name}") from e

        return wrapper

    return decorator
