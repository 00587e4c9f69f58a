"""Service layer exports."""

from .errors import FactoryError, SaveExportError
from .save_service import SaveService

__all__ = [
    "FactoryError",
    "SaveExportError",
    "SaveService",
]
