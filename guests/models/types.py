# guests/models/types.py
"""
Custom SQLAlchemy column types.
"""

from typing import Any, Iterable, List, Optional

from sqlalchemy import JSON, TypeDecorator

from guests.models.enums import FeatureType

__all__ = ["FeatureList"]


class FeatureList(TypeDecorator):
    """
    List of mat features stored as a JSON array of feature codes.

    An empty list is stored as NULL and read back as None.
    """

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Optional[Iterable[Any]], dialect) -> Optional[List[str]]:
        if not value:
            return None
        return [FeatureType(feature).value for feature in value]

    def process_result_value(self, value: Optional[List[str]], dialect) -> Optional[List[FeatureType]]:
        if not value:
            return None
        return [FeatureType(code) for code in value]
