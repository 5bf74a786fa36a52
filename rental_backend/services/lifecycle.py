from __future__ import annotations

import logging
from decimal import Decimal

from ..errors import RentalError, VehicleNotFoundError, VehicleUnavailableError
from ..models import Rental, RentStatus, User, UserBase, Vehicle, VehicleStatus
from .store import DataStore

logger = logging.getLogger(__name__)


class RentalLifecycle:
    """AVAILABLE -> RENTED -> AVAILABLE transitions of catalog vehicles."""

    def __init__(self, store: DataStore) -> None:
        self.store = store
        self.catalog = store.catalog

    def start_rental(self, user: UserBase, vehicle_id: int, total_cost: Decimal) -> Rental:
        """Rent a vehicle out to ``user``.

        A ``User`` already known to the store is reused; any other renter
        details create a new user, but only once the vehicle is confirmed
        available, so a refused rent leaves the store untouched.

        Raises:
            VehicleNotFoundError: no vehicle with that id.
            VehicleUnavailableError: the vehicle is already rented.
        """
        with self.catalog.lock:
            vehicle = self.catalog.get_by_id(vehicle_id)
            if vehicle.status == VehicleStatus.RENTED:
                raise VehicleUnavailableError(vehicle_id)
            renter = self._resolve_renter(user)
            self.catalog.mark_rented(vehicle_id, renter.id)
        logger.info("Vehicle %s rented to user %s for %s", vehicle_id, renter.id, total_cost)
        return Rental(userId=renter.id, vehicleId=vehicle_id, totalCost=total_cost)

    def rent(self, user: UserBase, vehicle_id: int, total_cost: Decimal) -> RentStatus:
        try:
            self.start_rental(user, vehicle_id, total_cost)
        except VehicleNotFoundError as e:
            logger.info("Rent refused: %s", e.message)
            return RentStatus.VEHICLE_NOT_FOUND
        except VehicleUnavailableError as e:
            logger.info("Rent refused: %s", e.message)
            return RentStatus.VEHICLE_UNAVAILABLE
        return RentStatus.SUCCESS

    def end_rental(self, user_id: int, vehicle_id: int) -> Vehicle:
        """Hand a rented vehicle back.

        Raises:
            VehicleNotFoundError: no vehicle with that id.
            VehicleNotRentedError: the vehicle is not rented.
            RenterMismatchError: the vehicle is rented by another user.
        """
        vehicle = self.catalog.mark_available(vehicle_id, user_id)
        logger.info("Vehicle %s returned by user %s", vehicle_id, user_id)
        return vehicle

    def return_vehicle(self, user_id: int, vehicle_id: int) -> bool:
        try:
            self.end_rental(user_id, vehicle_id)
        except RentalError as e:
            logger.info("Return refused: %s", e.message)
            return False
        return True

    def _resolve_renter(self, user: UserBase) -> User:
        if isinstance(user, User) and user.id in self.store.users:
            return self.store.users[user.id]
        return self.store.create_user(user)
