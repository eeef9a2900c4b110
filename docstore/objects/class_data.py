"""
Class object representation.
"""

from .base_object import BaseObject
from .object_kind import ObjectKind


class ClassData(BaseObject):
    """
    Represents an Objective-C class declaration.

    Attributes:
        superclass_name: Name of the superclass, empty for root classes
    """

    def __init__(self, name: str):
        super().__init__(ObjectKind.CLASS, name)
        self.superclass_name: str = ''

    @property
    def display_name(self) -> str:
        return self.name

    def is_derived(self) -> bool:
        """Check if this class has a superclass."""
        return bool(self.superclass_name)
