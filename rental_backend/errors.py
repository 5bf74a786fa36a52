"""
Error types raised by the rental core.

The HTTP layer maps each family to a status code; nothing here terminates
the process.
"""
from typing import Optional


class RentalError(Exception):
    """Base class for every failure the rental core reports."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NotFoundError(RentalError):
    """A vehicle or user id is unknown."""


class VehicleNotFoundError(NotFoundError):
    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} not found")


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class ValidationError(RentalError):
    """Malformed or out-of-range vehicle data."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class InvalidDateRangeError(RentalError):
    """Rental dates are unparseable or not in chronological order."""


class VehicleUnavailableError(RentalError):
    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} is already rented")


class VehicleNotRentedError(RentalError):
    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} is not rented")


class RenterMismatchError(RentalError):
    def __init__(self, vehicle_id: int, user_id: int) -> None:
        self.vehicle_id = vehicle_id
        self.user_id = user_id
        super().__init__(f"Vehicle {vehicle_id} is not rented by user {user_id}")
