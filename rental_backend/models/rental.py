from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from enum import IntEnum

from pydantic import BaseModel, Field, field_serializer


class RentStatus(IntEnum):
    """Result codes answered by the rent operation; 0 means success."""

    INVALID_REQUEST = -1
    SUCCESS = 0
    VEHICLE_NOT_FOUND = 1
    VEHICLE_UNAVAILABLE = 2


class Rental(BaseModel):
    userId: int
    vehicleId: int
    totalCost: Decimal
    rentedAt: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @field_serializer("totalCost", when_used="json")
    def cost_as_number(self, value: Decimal) -> float:
        return float(value)
