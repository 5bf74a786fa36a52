from .admin import AdminCatalogEditor
from .catalog import VehicleCatalog
from .lifecycle import RentalLifecycle
from .pricing import compute_total_cost
from .store import DataStore

__all__ = ["AdminCatalogEditor", "VehicleCatalog", "RentalLifecycle", "compute_total_cost", "DataStore"]
