"""
Base service class providing common functionality for all services.
"""

import logging
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from guests.core.exceptions import (
    BaseAppException,
    InternalServerError,
    NotFoundError,
    NotUniqueError,
)
from guests.repositories.base_repository import BaseRepository

TModel = TypeVar("TModel")
TRepo = TypeVar("TRepo", bound=BaseRepository)

# Session.info key counting nested service transactions
_TRANSACTION_DEPTH = "guests.transaction_depth"


def service_operation(operation: str) -> Callable:
    """
    Run a service method as one unit of work.

    The outermost decorated call commits on success and rolls back on
    failure; nested calls join the enclosing transaction. Application
    exceptions pass through unchanged, constraint violations become
    NotUniqueError and anything else is logged and raised as
    InternalServerError.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self: "BaseService", *args, **kwargs):
            try:
                with self.transaction():
                    return func(self, *args, **kwargs)
            except BaseAppException:
                raise
            except IntegrityError as e:
                raise self._handle_integrity_error(e, operation, args) from e
            except Exception as e:
                raise self._handle_exception(e, operation, args, kwargs) from e
        return wrapper
    return decorator


class BaseService(Generic[TModel, TRepo]):
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Transaction management
    - Consistent translation of failures into application exceptions
    - Lookup, listing and deletion by id
    """

    # Used to build "guestId: Missing guest 7" style messages
    entity_label: str = "entity"
    id_field: str = "id"

    def __init__(self, repository: TRepo, db_session: Session):
        """
        Initialize base service.

        Args:
            repository: Repository instance for data access
            db_session: SQLAlchemy database session
        """
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # -------------------------------------------------------------------------
    # Exception & Error Handling
    # -------------------------------------------------------------------------

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        args: tuple = (),
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> InternalServerError:
        """
        Log an unexpected exception with full context and convert it to an
        InternalServerError for the caller.
        """
        context = {
            "operation": operation,
            "arguments": [repr(arg) for arg in args],
            "keyword_arguments": {key: repr(value) for key, value in (kwargs or {}).items()},
            "exception_type": type(exception).__name__,
        }
        self._logger.error(
            f"{operation}({', '.join(context['arguments'])}): {exception}",
            exc_info=True,
            extra=context,
        )
        return InternalServerError(
            "Internal server error",
            details={"operation": operation},
        )

    def _handle_integrity_error(
        self,
        exception: IntegrityError,
        operation: str,
        args: tuple = (),
    ) -> NotUniqueError:
        self._logger.warning(
            f"Constraint violation during {operation}: {exception.orig}",
            extra={"operation": operation, "arguments": [repr(arg) for arg in args]},
        )
        return NotUniqueError(
            f"{self.entity_label}: Conflicts with an existing {self.entity_label}",
            details={"operation": operation},
        )

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(self):
        """
        Context manager for database transactions with automatic rollback.

        Only the outermost transaction on a session commits or rolls back.

        Example:
            with self.transaction():
                self.repository.create(entity)
        """
        depth = self.db.info.get(_TRANSACTION_DEPTH, 0)
        self.db.info[_TRANSACTION_DEPTH] = depth + 1
        try:
            yield self.db
            if depth == 0:
                self._commit()
        except Exception:
            if depth == 0:
                self._rollback()
            raise
        finally:
            self.db.info[_TRANSACTION_DEPTH] = depth

    def _commit(self) -> None:
        self.db.commit()
        self._logger.debug("Transaction committed")

    def _rollback(self) -> None:
        """Rollback the current transaction, logging rollback errors."""
        try:
            self.db.rollback()
            self._logger.debug("Transaction rolled back")
        except Exception as e:
            self._logger.warning(f"Rollback failed: {e}")

    # -------------------------------------------------------------------------
    # Common Operations
    # -------------------------------------------------------------------------

    def _missing(self, entity_id: Any) -> NotFoundError:
        return NotFoundError(f"{self.id_field}: Missing {self.entity_label} {entity_id}")

    def _get(self, entity_id: int) -> TModel:
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise self._missing(entity_id)
        return entity

    @service_operation("find")
    def find(self, entity_id: int) -> TModel:
        """Return the entity with this id or raise NotFoundError."""
        return self._get(entity_id)

    @service_operation("find_all")
    def find_all(self) -> List[TModel]:
        return self.repository.find_all()

    @service_operation("delete")
    def delete(self, entity_id: int) -> TModel:
        """Delete the entity with this id and return it."""
        entity = self.repository.delete(self._get(entity_id))
        self._logger.info(
            f"Deleted {self.entity_label} {entity_id}",
            extra={"entity_id": entity_id},
        )
        return entity
