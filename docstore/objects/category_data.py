"""
Category and extension object representation.
"""

from typing import Optional

from .base_object import BaseObject
from .object_kind import ObjectKind


class CategoryData(BaseObject):
    """
    Represents a category or extension on an Objective-C class.

    `name` holds the name of the extended class. An empty (or None)
    category name denotes an extension.

    Attributes:
        class_name: Name of the class the category extends
        category_name: Name of the category, empty for extensions
    """

    def __init__(self, class_name: str, category_name: Optional[str] = None):
        super().__init__(ObjectKind.CATEGORY, class_name)
        self.category_name: str = category_name or ''

    @property
    def class_name(self) -> str:
        return self.name

    @property
    def is_extension(self) -> bool:
        return not self.category_name

    @property
    def category_id(self) -> str:
        """Textual id in the `ClassName(CategoryName)` form used by cross references."""
        return f"{self.class_name}({self.category_name})"

    @property
    def display_name(self) -> str:
        return self.category_id
