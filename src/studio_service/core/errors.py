"""
Service Errors

Exception taxonomy shared by the store, validator, dispatcher and API layer.
"""

from dataclasses import dataclass
from typing import Iterable, List


class StudioError(Exception):
    """Base class for studio service errors"""


@dataclass(frozen=True)
class FieldViolation:
    """One rejected input field"""

    field: str
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ValidationError(StudioError):
    """Input rejected; carries every field-level violation found"""

    def __init__(self, violations: Iterable[FieldViolation]):
        self.violations: List[FieldViolation] = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"Invalid fields: {fields}")

    def as_list(self) -> List[dict]:
        return [v.as_dict() for v in self.violations]


class NotFoundError(StudioError):
    """Referenced record does not exist"""


class DeliveryError(StudioError):
    """Outbound messaging call failed"""


class StoreError(StudioError):
    """Unexpected persistence fault"""
