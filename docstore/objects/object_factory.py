"""
Factory for creating appropriate top-level object subclass instances.
"""

from typing import Optional

from .object_kind import ObjectKind
from .base_object import BaseObject
from .class_data import ClassData
from .category_data import CategoryData
from .protocol_data import ProtocolData


class ObjectFactory:
    """
    Factory for instantiating appropriate object subclass based on kind.

    Lets parsers produce objects without depending on the concrete classes.
    """

    @staticmethod
    def create(kind: ObjectKind, name: str, category_name: Optional[str] = None) -> BaseObject:
        """
        Create appropriate object subclass instance based on kind.

        Args:
            kind: ObjectKind enum value
            name: Object name (class name for categories)
            category_name: Category name, only valid for CATEGORY kind

        Returns:
            Instance of appropriate BaseObject subclass

        Raises:
            ValueError: If kind is not supported or category_name is given for another kind
        """
        if kind != ObjectKind.CATEGORY and category_name:
            raise ValueError(f"category_name is only valid for categories, got {kind}")

        if kind == ObjectKind.CLASS:
            return ClassData(name)
        elif kind == ObjectKind.CATEGORY:
            return CategoryData(name, category_name)
        elif kind == ObjectKind.PROTOCOL:
            return ProtocolData(name)
        else:
            raise ValueError(f"Unsupported object kind: {kind}")

    @staticmethod
    def create_from_string(kind_str: str, name: str, category_name: Optional[str] = None) -> BaseObject:
        """
        Create object from string kind.

        Raises:
            ValueError: If kind_str is not a known ObjectKind value
        """
        kind = ObjectKind(kind_str)
        return ObjectFactory.create(kind, name, category_name)
