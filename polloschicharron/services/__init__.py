"""Service layer — business logic orchestration."""


class ServiceError(Exception):
    """Base service exception."""


class InvalidStateError(ServiceError):
    """Precondition violated: duplicate or missing key, id set on create, unknown record."""
