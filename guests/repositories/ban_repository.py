"""
Ban repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from guests.models.ban import Ban
from guests.repositories.base_repository import BaseRepository


class BanRepository(BaseRepository[Ban]):
    default_order = ("guest_id", "ban_from")

    def __init__(self, db: Session):
        super().__init__(Ban, db)

    def find_by_guest_id(self, guest_id: int) -> List[Ban]:
        return self.find_by_criteria({"guest_id": guest_id}, order_by=("ban_from",))

    def find_by_guest_id_and_date(self, guest_id: int, when: date) -> Optional[Ban]:
        """The ban of this guest whose range includes ``when``, if any."""
        return (
            self.db.query(Ban)
            .filter(Ban.guest_id == guest_id)
            .filter(Ban.ban_from <= when)
            .filter(Ban.ban_to >= when)
            .first()
        )
