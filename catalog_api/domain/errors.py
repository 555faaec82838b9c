# catalog_api/domain/errors.py


class CatalogError(Exception):
    """Base class for expected, caller-recoverable catalog failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Client supplied data (or filter) breaks a domain rule."""

    status_code = 400


class NotFoundError(CatalogError):
    """Nothing at the requested id, or nothing matches a filter."""

    status_code = 404
