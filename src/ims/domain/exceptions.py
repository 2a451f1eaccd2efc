"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
None of them is fatal: the menu treats each one as a prompt to retry.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidFieldError(ValidationError):
    """A supplied field value failed validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class DuplicateIdError(ValidationError):
    """An item with the same (normalized) ID already exists."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"An item with ID '{item_id}' already exists in the inventory")
        self.item_id = item_id


class ItemNotFoundError(DomainException):
    """No item with the requested ID exists."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item with ID '{item_id}' not found")
        self.item_id = item_id
