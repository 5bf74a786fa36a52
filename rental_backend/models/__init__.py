from .rental import Rental, RentStatus
from .user import User, UserBase
from .vehicle import DailyPrice, Seats, Vehicle, VehicleFilter, VehicleStatus, Year

__all__ = [
    "DailyPrice",
    "Rental",
    "RentStatus",
    "Seats",
    "User",
    "UserBase",
    "Vehicle",
    "VehicleFilter",
    "VehicleStatus",
    "Year",
]
