"""
Shared pytest fixtures
"""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from rental_backend.config import Settings
from rental_backend.main import create_app
from rental_backend.models import UserBase, Vehicle
from rental_backend.services import AdminCatalogEditor, DataStore, RentalLifecycle, VehicleCatalog


def make_vehicle(vehicle_id: int, **overrides) -> Vehicle:
    fields = {
        "id": vehicle_id,
        "make": "Toyota",
        "model": "Corolla",
        "year": 2021,
        "color": "White",
        "capacity": 5,
        "pricePerDay": Decimal("45.00"),
        "type": "Sedan",
    }
    fields.update(overrides)
    return Vehicle(**fields)


@pytest.fixture
def vehicle_factory():
    return make_vehicle


@pytest.fixture
def sample_vehicles():
    """A small fleet with different makes, prices and capacities"""
    return [
        make_vehicle(1),
        make_vehicle(2, model="RAV4", pricePerDay=Decimal("65.50"), type="SUV", color="Blue"),
        make_vehicle(3, make="Honda", model="Civic", year=2020, pricePerDay=Decimal("42.75"), color="Black"),
        make_vehicle(4, make="Ford", model="Transit", year=2019, capacity=12, pricePerDay=Decimal("89.99"), type="Van"),
        make_vehicle(5, model="Yaris", pricePerDay=Decimal("49.99"), capacity=4, type="Hatchback"),
        make_vehicle(6, make="toyota", model="Camry", pricePerDay=Decimal("30.00")),
    ]


@pytest.fixture
def catalog(sample_vehicles) -> VehicleCatalog:
    return VehicleCatalog(sample_vehicles)


@pytest.fixture
def store(catalog) -> DataStore:
    return DataStore(catalog)


@pytest.fixture
def lifecycle(store) -> RentalLifecycle:
    return RentalLifecycle(store)


@pytest.fixture
def editor(catalog) -> AdminCatalogEditor:
    return AdminCatalogEditor(catalog)


@pytest.fixture
def renter() -> UserBase:
    return UserBase(firstName="Ada", lastName="Lovelace", email="ada@example.com", phoneNumber="555-0100")


@pytest.fixture
def other_renter() -> UserBase:
    return UserBase(firstName="Alan", lastName="Turing", email="alan@example.com", phoneNumber="555-0199")


@pytest.fixture
def test_settings() -> Settings:
    return Settings(seed_demo_data=False, vehicles_file=None, _env_file=None)


@pytest.fixture
def client(test_settings, store):
    """HTTP client bound to an app sharing the ``store`` fixture"""
    app = create_app(test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_env_vars(monkeypatch):
    """Keep RENTAL_* variables from the developer's shell out of the tests"""
    for key in ["RENTAL_SEED_DEMO_DATA", "RENTAL_VEHICLES_FILE", "RENTAL_PORT", "RENTAL_LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)
