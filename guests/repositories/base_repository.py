"""
Base repository with standardized CRUD operations.

Repositories never commit: they add, flush and query inside the session
owned by the calling service, which decides when the unit of work ends.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy.orm import Query, Session

from guests.models.base import BaseModel

logger = logging.getLogger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository for one model class.

    Provides create, read, update and delete operations plus simple
    criteria queries shared by all domain repositories.
    """

    # Default ordering for find_all, as column names (prefix with - for desc)
    default_order: Sequence[str] = ("id",)

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Create Operations ====================

    def create(self, entity: ModelType) -> ModelType:
        """
        Add a new entity and flush it so database defaults and the
        primary key are populated.
        """
        self.db.add(entity)
        self.db.flush()
        logger.debug(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    # ==================== Read Operations ====================

    def find_by_id(self, id: int) -> Optional[ModelType]:
        """Find entity by ID, or None."""
        return self.db.get(self.model, id)

    def find_all(self) -> List[ModelType]:
        """Return every entity in default order."""
        return self._ordered(self.db.query(self.model), self.default_order).all()

    def find_by_criteria(
        self,
        criteria: Dict[str, Any],
        order_by: Optional[Sequence[str]] = None,
    ) -> List[ModelType]:
        """
        Find entities whose columns equal the given values.

        Args:
            criteria: Column name to value; list or tuple values match any member
            order_by: Column names to order by (prefix with - for desc)

        Returns:
            List of matching entities
        """
        query = self.db.query(self.model)
        for key, value in criteria.items():
            column = getattr(self.model, key)
            if isinstance(value, (list, tuple)):
                query = query.filter(column.in_(value))
            else:
                query = query.filter(column == value)
        return self._ordered(query, order_by or self.default_order).all()

    def find_one_by_criteria(self, criteria: Dict[str, Any]) -> Optional[ModelType]:
        """Find a single entity matching criteria, or None."""
        results = self.find_by_criteria(criteria)
        return results[0] if results else None

    def count(self) -> int:
        return self.db.query(self.model).count()

    # ==================== Update Operations ====================

    def update(self, entity: ModelType, data: Dict[str, Any]) -> ModelType:
        """
        Apply column values to an entity and bump its version.

        Args:
            entity: Persistent entity to modify
            data: Column name to new value

        Returns:
            Updated entity
        """
        for key, value in data.items():
            if hasattr(entity, key):
                setattr(entity, key, value)

        entity.version += 1
        self.db.flush()
        logger.debug(f"Updated {self.model.__name__} with id: {entity.id}")
        return entity

    # ==================== Delete Operations ====================

    def delete(self, entity: ModelType) -> ModelType:
        """Hard delete an entity and return it."""
        self.db.delete(entity)
        self.db.flush()
        logger.debug(f"Deleted {self.model.__name__} with id: {entity.id}")
        return entity

    def delete_all(self) -> int:
        """Delete every row of this model in one statement."""
        count = self.db.query(self.model).delete(synchronize_session="fetch")
        self.db.flush()
        return count

    # ==================== Helpers ====================

    def _ordered(self, query: Query, order_by: Sequence[str]) -> Query:
        for field in order_by:
            if field.startswith('-'):
                query = query.order_by(getattr(self.model, field[1:]).desc())
            else:
                query = query.order_by(getattr(self.model, field))
        return query
