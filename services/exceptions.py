"""Service-layer exception hierarchy."""


class ServiceError(Exception):
    """Base class for service-layer failures."""


class NotFoundError(ServiceError):
    """Raised when no employee matches the requested ID."""

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"User by id {entity_id} was not found")
