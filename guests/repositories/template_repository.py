"""
Template repository.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from guests.models.template import Template
from guests.repositories.base_repository import BaseRepository


class TemplateRepository(BaseRepository[Template]):
    default_order = ("facility_id", "name")

    def __init__(self, db: Session):
        super().__init__(Template, db)

    def find_by_facility_id(self, facility_id: int) -> List[Template]:
        return self.find_by_criteria({"facility_id": facility_id}, order_by=("name",))

    def find_by_name(self, facility_id: int, name: str) -> List[Template]:
        return (
            self.db.query(Template)
            .filter(Template.facility_id == facility_id)
            .filter(Template.name.ilike(f"%{name}%"))
            .order_by(Template.name)
            .all()
        )

    def find_by_name_exact(self, facility_id: int, name: str) -> Optional[Template]:
        return self.find_one_by_criteria({"facility_id": facility_id, "name": name})
