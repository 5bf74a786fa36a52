"""Vehicle rental backend: catalog, pricing and rental lifecycle behind a FastAPI app."""

__version__ = "1.0.0"
