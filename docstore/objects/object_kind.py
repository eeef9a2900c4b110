"""
Object kind enumeration for type-safe classification of top-level objects.
"""

from enum import Enum


class ObjectKind(Enum):
    """Type-safe enumeration of top-level Objective-C object kinds."""
    CLASS = "class"
    CATEGORY = "category"
    PROTOCOL = "protocol"

    @property
    def collection_name(self) -> str:
        """Name of the store collection holding objects of this kind."""
        return _COLLECTION_NAMES[self]


_COLLECTION_NAMES = {
    ObjectKind.CLASS: 'classes',
    ObjectKind.CATEGORY: 'categories',
    ObjectKind.PROTOCOL: 'protocols',
}
