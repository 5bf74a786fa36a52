"""
Unit tests for DataStore
"""
import json

import pydantic
import pytest

from rental_backend.errors import UserNotFoundError
from rental_backend.services import DataStore
from rental_backend.services.store import INITIAL_VEHICLES


class TestUsers:
    def test_create_user_assigns_sequential_ids(self, store, renter, other_renter):
        first = store.create_user(renter)
        second = store.create_user(other_renter)
        assert (first.id, second.id) == (1, 2)
        assert store.get_user(2).lastName == "Turing"

    def test_get_unknown_user(self, store):
        with pytest.raises(UserNotFoundError):
            store.get_user(12)


class TestLoading:
    def test_seed_vehicles(self):
        store = DataStore()
        store.seed_vehicles()
        assert len(store.catalog) == len(INITIAL_VEHICLES)
        assert [v.id for v in store.catalog.get_all()] == list(range(1, len(INITIAL_VEHICLES) + 1))

    def test_load_vehicles_from_file(self, tmp_path):
        path = tmp_path / "vehicles.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "id": 10,
                        "make": "Kia",
                        "model": "Rio",
                        "year": 2018,
                        "color": "Red",
                        "capacity": 5,
                        "pricePerDay": 35.5,
                        "type": "Hatchback",
                    },
                    {
                        "id": 11,
                        "make": "BMW",
                        "model": "X5",
                        "year": 2023,
                        "color": "Black",
                        "capacity": 5,
                        "pricePerDay": "120.00",
                        "type": "SUV",
                        "status": "RENTED",
                        "currentRenterId": 3,
                    },
                ]
            )
        )
        store = DataStore()

        assert store.load_vehicles(path) == 2
        assert store.catalog.get_by_id(11).currentRenterId == 3
        assert store.catalog.next_id() == 12

    def test_load_rejects_impossible_vehicle(self, tmp_path):
        """A file with a negative price or no seats is refused as a whole"""
        path = tmp_path / "vehicles.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "id": 1,
                        "make": "Kia",
                        "model": "Rio",
                        "year": 2018,
                        "color": "Red",
                        "capacity": 5,
                        "pricePerDay": "35.50",
                        "type": "Hatchback",
                    },
                    {
                        "id": 2,
                        "make": "Broken",
                        "model": "Car",
                        "year": -1,
                        "color": "Grey",
                        "capacity": 0,
                        "pricePerDay": "-10",
                        "type": "Sedan",
                    },
                ]
            )
        )
        store = DataStore()

        with pytest.raises(pydantic.ValidationError) as exc_info:
            store.load_vehicles(path)

        locations = {error["loc"] for error in exc_info.value.errors()}
        assert {(1, "year"), (1, "capacity"), (1, "pricePerDay")} <= locations
        assert len(store.catalog) == 0

    def test_load_rejects_malformed_json(self, tmp_path):
        path = tmp_path / "vehicles.json"
        path.write_text("[{\"id\": 1,")

        with pytest.raises(pydantic.ValidationError):
            DataStore().load_vehicles(path)
