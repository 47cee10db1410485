"""Typed errors raised by the service layer.

Routers never build status codes themselves; ``main.py`` maps each class
below to a response through a single exception handler.
"""


class ServiceError(Exception):
    status_code = 500
    kind = "Request failed"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400
    kind = "Validation error"


class NotFoundError(ServiceError):
    status_code = 404
    kind = "Not found"


class ConflictError(ServiceError):
    status_code = 409
    kind = "Conflict"


class BusinessRuleError(ServiceError):
    status_code = 400
    kind = "Business rule violation"


class ItemNotFoundError(BusinessRuleError):
    kind = "Invalid item"

    def __init__(self, item_name: str, available: list[str] | None = None):
        super().__init__(
            f'Medicine "{item_name}" not found in pharmacy stock. '
            "Please verify the medicine is available at this pharmacy."
        )
        self.item_name = item_name
        self.available = available or []


class InsufficientStockError(BusinessRuleError):
    kind = "Insufficient stock"

    def __init__(self, item_name: str, available: int):
        super().__init__(f"Only {available} available for {item_name}")
        self.item_name = item_name
        self.available = available
