from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_serializer, model_validator

Year = Annotated[int, Field(gt=0)]
Seats = Annotated[int, Field(gt=0)]
DailyPrice = Annotated[Decimal, Field(ge=0, allow_inf_nan=False)]


class VehicleStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    RENTED = "RENTED"


class Vehicle(BaseModel):
    id: int
    make: str
    model: str
    year: Year
    color: str
    capacity: Seats
    pricePerDay: DailyPrice
    type: str
    status: VehicleStatus = VehicleStatus.AVAILABLE
    currentRenterId: Optional[int] = None

    @model_validator(mode="after")
    def check_renter(self) -> "Vehicle":
        rented = self.status == VehicleStatus.RENTED
        if rented != (self.currentRenterId is not None):
            raise ValueError("currentRenterId must be set exactly when the vehicle is RENTED")
        return self

    @field_serializer("pricePerDay", when_used="json")
    def price_as_number(self, value: Decimal) -> float:
        return float(value)

    @property
    def available(self) -> bool:
        return self.status == VehicleStatus.AVAILABLE


class VehicleFilter(BaseModel):
    """Catalog search criteria; every field left as None matches anything."""

    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    color: Optional[str] = None
    minCapacity: Optional[int] = None
    maxPrice: Optional[Decimal] = None
    type: Optional[str] = None

    def matches(self, vehicle: Vehicle) -> bool:
        if self.make is not None and vehicle.make != self.make:
            return False
        if self.model is not None and vehicle.model != self.model:
            return False
        if self.year is not None and vehicle.year != self.year:
            return False
        if self.color is not None and vehicle.color != self.color:
            return False
        if self.minCapacity is not None and vehicle.capacity < self.minCapacity:
            return False
        if self.maxPrice is not None and vehicle.pricePerDay > self.maxPrice:
            return False
        if self.type is not None and vehicle.type != self.type:
            return False
        return True
