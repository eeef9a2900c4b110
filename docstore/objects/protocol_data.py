"""
Protocol object representation.
"""

from .base_object import BaseObject
from .object_kind import ObjectKind


class ProtocolData(BaseObject):
    """Represents an Objective-C protocol declaration."""

    def __init__(self, name: str):
        super().__init__(ObjectKind.PROTOCOL, name)

    @property
    def display_name(self) -> str:
        return self.name
