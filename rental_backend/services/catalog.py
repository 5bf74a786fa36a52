from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List, Optional

from ..errors import RenterMismatchError, VehicleNotFoundError, VehicleNotRentedError, VehicleUnavailableError
from ..models import Vehicle, VehicleFilter, VehicleStatus

logger = logging.getLogger(__name__)


class VehicleCatalog:
    """In-memory set of vehicles, the only place vehicle state is changed.

    Callers always get copies back. Every read-check-write sequence runs under
    ``lock``; it is re-entrant so services can hold it across several calls.
    String filters compare case-sensitively.
    """

    def __init__(self, vehicles: Optional[Iterable[Vehicle]] = None) -> None:
        self.lock = threading.RLock()
        self._vehicles: Dict[int, Vehicle] = {}
        self._last_id = 0
        for vehicle in vehicles or ():
            self.add(vehicle)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self._vehicles

    def get_all(self) -> List[Vehicle]:
        with self.lock:
            return [vehicle.model_copy() for vehicle in self._vehicles.values()]

    def get_by_id(self, vehicle_id: int) -> Vehicle:
        with self.lock:
            return self._get(vehicle_id).model_copy()

    def filter(self, criteria: VehicleFilter) -> List[Vehicle]:
        with self.lock:
            return [v.model_copy() for v in self._vehicles.values() if criteria.matches(v)]

    def next_id(self) -> int:
        with self.lock:
            self._last_id += 1
            return self._last_id

    def add(self, vehicle: Vehicle) -> bool:
        with self.lock:
            if vehicle.id in self._vehicles:
                logger.info("Vehicle %s already exists, not added", vehicle.id)
                return False
            self._vehicles[vehicle.id] = vehicle.model_copy()
            self._last_id = max(self._last_id, vehicle.id)
            return True

    def replace(self, vehicle: Vehicle) -> bool:
        with self.lock:
            if vehicle.id not in self._vehicles:
                logger.info("Vehicle %s does not exist, not replaced", vehicle.id)
                return False
            self._vehicles[vehicle.id] = vehicle.model_copy()
            return True

    def remove(self, vehicle_id: int) -> bool:
        with self.lock:
            vehicle = self._vehicles.get(vehicle_id)
            if vehicle is None:
                logger.info("Vehicle %s does not exist, nothing removed", vehicle_id)
                return False
            if vehicle.status == VehicleStatus.RENTED:
                logger.info("Vehicle %s is rented by user %s, not removed", vehicle_id, vehicle.currentRenterId)
                return False
            del self._vehicles[vehicle_id]
            return True

    def mark_rented(self, vehicle_id: int, renter_id: int) -> Vehicle:
        with self.lock:
            vehicle = self._get(vehicle_id)
            if vehicle.status == VehicleStatus.RENTED:
                raise VehicleUnavailableError(vehicle_id)
            vehicle.status = VehicleStatus.RENTED
            vehicle.currentRenterId = renter_id
            return vehicle.model_copy()

    def mark_available(self, vehicle_id: int, renter_id: int) -> Vehicle:
        with self.lock:
            vehicle = self._get(vehicle_id)
            if vehicle.status != VehicleStatus.RENTED:
                raise VehicleNotRentedError(vehicle_id)
            if vehicle.currentRenterId != renter_id:
                raise RenterMismatchError(vehicle_id, renter_id)
            vehicle.status = VehicleStatus.AVAILABLE
            vehicle.currentRenterId = None
            return vehicle.model_copy()

    def _get(self, vehicle_id: int) -> Vehicle:
        vehicle = self._vehicles.get(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)
        return vehicle
