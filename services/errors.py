"""Errors raised by the data services."""

from typing import Dict


class NotFoundError(LookupError):
    """Raised when a record looked up by id does not exist."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class ValidationError(ValueError):
    """Raised when a create or update is rejected.

    Attributes:
        errors: Field name -> message for every rejected field.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Validation failed ({details})")
