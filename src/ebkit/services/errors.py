"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class SaveExportError(Exception):
    """Raised when a save record cannot be written to disk."""
