from __future__ import annotations

import logging
import threading
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import TypeAdapter

from ..errors import UserNotFoundError
from ..models import User, UserBase, Vehicle
from .catalog import VehicleCatalog

logger = logging.getLogger(__name__)

INITIAL_VEHICLES = [
    ("Toyota", "Corolla", 2021, "White", 5, "45.00", "Sedan"),
    ("Toyota", "RAV4", 2022, "Blue", 5, "65.50", "SUV"),
    ("Honda", "Civic", 2020, "Black", 5, "42.75", "Sedan"),
    ("Ford", "Transit", 2019, "White", 12, "89.99", "Van"),
    ("Tesla", "Model 3", 2023, "Red", 5, "99.00", "Electric"),
    ("Jeep", "Wrangler", 2021, "Green", 4, "74.25", "SUV"),
]

_vehicle_list = TypeAdapter(List[Vehicle])


class DataStore:
    def __init__(self, catalog: Optional[VehicleCatalog] = None) -> None:
        self.catalog = catalog if catalog is not None else VehicleCatalog()
        self.users: Dict[int, User] = {}
        self._users_lock = threading.Lock()
        self._last_user_id = 0

    def seed_vehicles(self) -> None:
        for make, model, year, color, capacity, price, vehicle_type in INITIAL_VEHICLES:
            vehicle = Vehicle(
                id=self.catalog.next_id(),
                make=make,
                model=model,
                year=year,
                color=color,
                capacity=capacity,
                pricePerDay=Decimal(price),
                type=vehicle_type,
            )
            self.catalog.add(vehicle)
        logger.info("Seeded %d demo vehicles", len(INITIAL_VEHICLES))

    def load_vehicles(self, path: Union[str, Path]) -> int:
        vehicles = _vehicle_list.validate_json(Path(path).read_bytes())
        loaded = sum(1 for vehicle in vehicles if self.catalog.add(vehicle))
        logger.info("Loaded %d vehicles from %s", loaded, path)
        return loaded

    def create_user(self, details: UserBase) -> User:
        with self._users_lock:
            self._last_user_id += 1
            user = User(id=self._last_user_id, **details.model_dump(include=set(UserBase.model_fields)))
            self.users[user.id] = user
        return user

    def get_user(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
