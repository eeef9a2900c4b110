from enum import Enum
from typing import Optional, Dict, Any

from .errors import DuplicateRegistrationError
from .objects import ObjectKind


class RegistrationStatus(Enum):
    ADDED = "added"
    ALREADY_REGISTERED = "already_registered"
    DUPLICATE = "duplicate"


class RegistrationResult:
    def __init__(
        self,
        status: RegistrationStatus,
        kind: ObjectKind,
        key: str,
        error: Optional[DuplicateRegistrationError] = None
    ):
        if not isinstance(status, RegistrationStatus):
            raise TypeError(f"status must be RegistrationStatus enum, got {type(status)}")
        if (status == RegistrationStatus.DUPLICATE) != (error is not None):
            raise ValueError("error is required for DUPLICATE status and only allowed there")

        self.status = status
        self.kind = kind
        self.key = key
        self.error = error

    @property
    def ok(self) -> bool:
        return self.status != RegistrationStatus.DUPLICATE

    def raise_for_error(self):
        """Raise the carried DuplicateRegistrationError, if any."""
        if self.error is not None:
            raise self.error

    def to_dict(self) -> Dict[str, Any]:
        result_dict = {
            'status': self.status.value,
            'collection': self.kind.collection_name,
            'key': self.key
        }

        if self.error is not None:
            result_dict['error'] = str(self.error)

        return result_dict

    def __repr__(self) -> str:
        return f"RegistrationResult(status={self.status.value}, {self.kind.collection_name}: {self.key})"
