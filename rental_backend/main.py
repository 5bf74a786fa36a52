import logging
from contextlib import asynccontextmanager
from decimal import Decimal, InvalidOperation
from typing import List, Mapping, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, configure_logging, get_settings
from .errors import (
    InvalidDateRangeError,
    NotFoundError,
    RenterMismatchError,
    RentalError,
    ValidationError,
    VehicleNotRentedError,
    VehicleUnavailableError,
)
from .models import RentStatus, User, UserBase, Vehicle, VehicleFilter
from .services import AdminCatalogEditor, DataStore, RentalLifecycle, compute_total_cost

logger = logging.getLogger(__name__)

RENT_FIELDS = ["fname", "lname", "email", "phonenum", "vid", "totalcost"]
RETURN_FIELDS = ["userid", "vid"]
VEHICLE_FIELDS = ["make", "model", "year", "color", "capacity", "price", "type"]

ERROR_STATUS = [
    (NotFoundError, 404),
    (ValidationError, 400),
    (InvalidDateRangeError, 400),
    (VehicleUnavailableError, 409),
    (VehicleNotRentedError, 409),
    (RenterMismatchError, 409),
]


def require_fields(params: Mapping[str, str], fields: List[str]) -> None:
    missing = [f for f in fields if f not in params]
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")


def int_param(params: Mapping[str, str], name: str) -> int:
    try:
        return int(params[name])
    except (KeyError, ValueError):
        raise ValidationError(f"{name} must be an integer", field=name) from None


def decimal_param(params: Mapping[str, str], name: str) -> Decimal:
    try:
        value = Decimal(params[name])
    except (KeyError, InvalidOperation):
        raise ValidationError(f"{name} must be a decimal number", field=name) from None
    if not value.is_finite():
        raise ValidationError(f"{name} must be a decimal number", field=name)
    return value


def vehicle_fields(params: Mapping[str, str]) -> dict:
    require_fields(params, VEHICLE_FIELDS)
    return {
        "make": params["make"],
        "model": params["model"],
        "year": int_param(params, "year"),
        "color": params["color"],
        "capacity": int_param(params, "capacity"),
        "price_per_day": params["price"],
        "type": params["type"],
    }


def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_lifecycle(request: Request) -> RentalLifecycle:
    return request.app.state.lifecycle


def get_editor(request: Request) -> AdminCatalogEditor:
    return request.app.state.editor


async def rental_error_handler(request: Request, exc: RentalError) -> JSONResponse:
    status_code = next((code for kind, code in ERROR_STATUS if isinstance(exc, kind)), 400)
    return JSONResponse({"error": exc.message}, status_code=status_code)


def create_app(settings: Optional[Settings] = None, store: Optional[DataStore] = None) -> FastAPI:
    """Build the API. The data store lives only between startup and shutdown;
    pass ``store`` to serve an existing one instead of a fresh, empty store.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        data = store if store is not None else DataStore()
        if settings.vehicles_file:
            data.load_vehicles(settings.vehicles_file)
        if settings.seed_demo_data and not len(data.catalog):
            data.seed_vehicles()
        app.state.store = data
        app.state.lifecycle = RentalLifecycle(data)
        app.state.editor = AdminCatalogEditor(data.catalog)
        logger.info("%s ready with %d vehicles", settings.app_name, len(data.catalog))
        yield
        logger.info("Shutting down %s", settings.app_name)
        for name in ("editor", "lifecycle", "store"):
            delattr(app.state, name)

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=settings.cors_max_age,
    )
    app.add_exception_handler(RentalError, rental_error_handler)

    app.state.settings = settings

    @app.get("/")
    def health(store: DataStore = Depends(get_store)) -> dict:
        return {"status": "ok", "vehicles": len(store.catalog), "users": len(store.users)}

    @app.get("/getAllVehicles", response_model=List[Vehicle])
    def get_all_vehicles(store: DataStore = Depends(get_store)):
        return store.catalog.get_all()

    @app.get("/getVehicle", response_model=Vehicle)
    def get_vehicle(vid: int, store: DataStore = Depends(get_store)):
        return store.catalog.get_by_id(vid)

    @app.get("/getFilteredVehicles", response_model=List[Vehicle])
    def get_filtered_vehicles(
        make: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
        color: Optional[str] = None,
        minCapacity: Optional[int] = None,
        maxPrice: Optional[Decimal] = None,
        type: Optional[str] = None,
        store: DataStore = Depends(get_store),
    ):
        criteria = VehicleFilter(
            make=make,
            model=model,
            year=year,
            color=color,
            minCapacity=minCapacity,
            maxPrice=maxPrice,
            type=type,
        )
        return store.catalog.filter(criteria)

    @app.get("/getTotalCost")
    def get_total_cost(vehicleId: int, startDate: str, endDate: str, store: DataStore = Depends(get_store)) -> float:
        vehicle = store.catalog.get_by_id(vehicleId)
        return float(compute_total_cost(vehicle, startDate, endDate))

    @app.get("/getUser", response_model=User)
    def get_user(uid: int, store: DataStore = Depends(get_store)):
        return store.get_user(uid)

    @app.post("/rent")
    def rent_vehicle(request: Request, lifecycle: RentalLifecycle = Depends(get_lifecycle)) -> int:
        params = request.query_params
        try:
            require_fields(params, RENT_FIELDS)
            renter = UserBase(
                firstName=params["fname"],
                lastName=params["lname"],
                email=params["email"],
                phoneNumber=params["phonenum"],
            )
            vehicle_id = int_param(params, "vid")
            total_cost = decimal_param(params, "totalcost")
        except ValidationError as e:
            logger.warning("Rent request rejected: %s", e.message)
            return int(RentStatus.INVALID_REQUEST)
        return int(lifecycle.rent(renter, vehicle_id, total_cost))

    @app.post("/returnVehicle")
    def return_vehicle(request: Request, lifecycle: RentalLifecycle = Depends(get_lifecycle)) -> bool:
        params = request.query_params
        try:
            require_fields(params, RETURN_FIELDS)
            user_id = int_param(params, "userid")
            vehicle_id = int_param(params, "vid")
        except ValidationError as e:
            logger.warning("Return request rejected: %s", e.message)
            return False
        return lifecycle.return_vehicle(user_id, vehicle_id)

    @app.post("/addVehicle")
    def add_vehicle(request: Request, editor: AdminCatalogEditor = Depends(get_editor)) -> bool:
        try:
            editor.create_vehicle(**vehicle_fields(request.query_params))
        except RentalError as e:
            logger.warning("Add vehicle rejected: %s", e.message)
            return False
        return True

    @app.post("/updateVehicle")
    def update_vehicle(request: Request, editor: AdminCatalogEditor = Depends(get_editor)) -> bool:
        params = request.query_params
        try:
            editor.update_vehicle(int_param(params, "vid"), **vehicle_fields(params))
        except RentalError as e:
            logger.warning("Update vehicle rejected: %s", e.message)
            return False
        return True

    @app.post("/deleteVehicle")
    def delete_vehicle(request: Request, editor: AdminCatalogEditor = Depends(get_editor)) -> bool:
        try:
            vehicle_id = int_param(request.query_params, "vid")
        except ValidationError as e:
            logger.warning("Delete vehicle rejected: %s", e.message)
            return False
        return editor.delete_vehicle(vehicle_id)

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
