"""Service layer — business logic orchestration."""


class ServiceError(Exception):
    """Base service exception."""


class NotFoundError(ServiceError):
    """Resource not found (-> HTTP 404)."""


class ConflictError(ServiceError):
    """Business rule conflict, e.g. duplicate email (-> HTTP 409)."""


class ValidationError(ServiceError):
    """Missing or malformed input (-> HTTP 400)."""


class AuthenticationError(ServiceError):
    """Authentication failure (-> HTTP 401)."""


class PersistenceError(ServiceError):
    """Underlying store failure (-> HTTP 500).

    ``detail`` carries the driver's error text for the ``error`` field of
    the response envelope.
    """

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail
