"""
Admin-side editing of the vehicle catalog.

Input is validated through ``VehicleDraft`` before the catalog is touched, so
a rejected request never leaves a partial change behind.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Union

import pydantic
from pydantic import BaseModel

from ..errors import ValidationError, VehicleNotFoundError
from ..models import DailyPrice, Seats, Vehicle, Year
from .catalog import VehicleCatalog

logger = logging.getLogger(__name__)


class VehicleDraft(BaseModel):
    """Vehicle fields as submitted by an administrator."""

    make: str
    model: str
    year: Year
    color: str
    capacity: Seats
    pricePerDay: DailyPrice
    type: str


def build_draft(**fields) -> VehicleDraft:
    try:
        return VehicleDraft(**fields)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        raise ValidationError(f"{field}: {error['msg']}", field=field) from e


class AdminCatalogEditor:
    def __init__(self, catalog: VehicleCatalog) -> None:
        self.catalog = catalog

    def create_vehicle(
        self,
        make: str,
        model: str,
        year: int,
        color: str,
        capacity: int,
        price_per_day: Union[str, Decimal],
        type: str,
    ) -> Vehicle:
        draft = build_draft(
            make=make, model=model, year=year, color=color, capacity=capacity, pricePerDay=price_per_day, type=type
        )
        with self.catalog.lock:
            vehicle = Vehicle(id=self.catalog.next_id(), **draft.model_dump())
            self.catalog.add(vehicle)
        logger.info("Vehicle %s added: %s %s", vehicle.id, vehicle.make, vehicle.model)
        return vehicle

    def update_vehicle(
        self,
        vehicle_id: int,
        make: str,
        model: str,
        year: int,
        color: str,
        capacity: int,
        price_per_day: Union[str, Decimal],
        type: str,
    ) -> Vehicle:
        draft = build_draft(
            make=make, model=model, year=year, color=color, capacity=capacity, pricePerDay=price_per_day, type=type
        )
        with self.catalog.lock:
            current = self.catalog.get_by_id(vehicle_id)
            vehicle = Vehicle(
                id=vehicle_id,
                status=current.status,
                currentRenterId=current.currentRenterId,
                **draft.model_dump(),
            )
            if not self.catalog.replace(vehicle):
                raise VehicleNotFoundError(vehicle_id)
        logger.info("Vehicle %s updated", vehicle_id)
        return vehicle

    def delete_vehicle(self, vehicle_id: int) -> bool:
        deleted = self.catalog.remove(vehicle_id)
        if deleted:
            logger.info("Vehicle %s deleted", vehicle_id)
        return deleted
