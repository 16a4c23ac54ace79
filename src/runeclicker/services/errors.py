"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class ContentUnavailableError(Exception):
    """Raised when a rune id is not present in the loaded catalog."""
