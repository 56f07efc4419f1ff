"""
Ban service.

A ban's date range is fixed once created: updates may only toggle
``active`` and edit ``comments`` and ``staff``. Ranges for one guest never
overlap.
"""

from datetime import date
from typing import List

from sqlalchemy.orm import Session

from guests.core.exceptions import BadRequestError, NotFoundError, NotUniqueError
from guests.models.ban import Ban
from guests.repositories.ban_repository import BanRepository
from guests.repositories.guest_repository import GuestRepository
from guests.schemas.ban import BanCreate, BanUpdate
from guests.services.base_service import BaseService, service_operation


class BanService(BaseService[Ban, BanRepository]):

    entity_label = "ban"
    id_field = "banId"

    def __init__(self, db: Session):
        super().__init__(BanRepository(db), db)
        self.guests = GuestRepository(db)

    @service_operation("find_by_guest_id")
    def find_by_guest_id(self, guest_id: int) -> List[Ban]:
        return self.repository.find_by_guest_id(guest_id)

    @service_operation("find_by_guest_id_and_date")
    def find_by_guest_id_and_date(self, guest_id: int, registration_date: date) -> Ban:
        ban = self.repository.find_by_guest_id_and_date(guest_id, registration_date)
        if ban is None:
            raise NotFoundError(
                f"guestId/registrationDate: Missing ban for guestId {guest_id} "
                f"and date {registration_date.isoformat()}"
            )
        return ban

    @service_operation("insert")
    def insert(self, data: BanCreate) -> Ban:
        if data.ban_from is None:
            raise BadRequestError("banFrom: Cannot be null")
        if data.ban_to is None:
            raise BadRequestError("banTo: Cannot be null")
        if data.ban_from > data.ban_to:
            raise BadRequestError("banFrom: Cannot be greater than banTo")

        if data.guest_id is None:
            raise BadRequestError("guestId: Cannot be null")
        if self.guests.find_by_id(data.guest_id) is None:
            raise BadRequestError(f"guestId: Missing guest {data.guest_id}")

        for existing in self.repository.find_by_guest_id(data.guest_id):
            if existing.ban_from <= data.ban_from <= existing.ban_to:
                raise NotUniqueError("banFrom: Overlaps existing ban")
            if existing.ban_from <= data.ban_to <= existing.ban_to:
                raise NotUniqueError("banTo: Overlaps existing ban")
            if data.ban_from <= existing.ban_from and data.ban_to >= existing.ban_to:
                raise NotUniqueError("banFrom/banTo: Overlaps existing ban")

        ban = self.repository.create(Ban(**data.model_dump()))
        self._logger.info(
            f"Inserted ban {ban.id} for guest {ban.guest_id}",
            extra={"ban": ban.to_dict()},
        )
        return ban

    @service_operation("update")
    def update(self, ban_id: int, data: BanUpdate) -> Ban:
        ban = self._get(ban_id)

        if data.ban_from != ban.ban_from:
            raise BadRequestError("banFrom: Cannot be changed on an update")
        if data.ban_to != ban.ban_to:
            raise BadRequestError("banTo: Cannot be changed on an update")
        if data.guest_id != ban.guest_id:
            raise BadRequestError("guestId: Cannot be changed on an update")

        ban = self.repository.update(ban, {
            "active": data.active,
            "comments": data.comments,
            "staff": data.staff,
        })
        self._logger.info(f"Updated ban {ban_id}")
        return ban
