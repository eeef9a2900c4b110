"""
Abstract interface for store providers.
"""

from abc import ABC, abstractmethod
from typing import FrozenSet, List, Optional

from .objects import BaseObject, ClassData, CategoryData, ProtocolData
from .result import RegistrationResult


class StoreProviding(ABC):
    """
    Abstract base class for stores holding parsed top-level objects.

    Parsers register objects as they discover them; renderers look objects up
    by name and list them in sorted order.
    """

    @abstractmethod
    def register_class(self, class_data: ClassData) -> RegistrationResult:
        pass

    @abstractmethod
    def register_category(self, category: CategoryData) -> RegistrationResult:
        pass

    @abstractmethod
    def register_protocol(self, protocol: ProtocolData) -> RegistrationResult:
        pass

    @abstractmethod
    def unregister_top_level_object(self, obj: Optional[BaseObject]) -> bool:
        """Remove a class, category or protocol. Returns False if it was not registered."""
        pass

    @abstractmethod
    def unregister_class(self, class_data: ClassData) -> bool:
        pass

    @abstractmethod
    def unregister_category(self, category: CategoryData) -> bool:
        pass

    @abstractmethod
    def unregister_protocol(self, protocol: ProtocolData) -> bool:
        pass

    @abstractmethod
    def class_with_name(self, name: str) -> Optional[ClassData]:
        pass

    @abstractmethod
    def category_with_name(self, class_name: str, category_name: Optional[str] = '') -> Optional[CategoryData]:
        pass

    @abstractmethod
    def category_with_id(self, category_id: str) -> Optional[CategoryData]:
        """Look up a category by its `ClassName(CategoryName)` id."""
        pass

    @abstractmethod
    def protocol_with_name(self, name: str) -> Optional[ProtocolData]:
        pass

    @property
    @abstractmethod
    def classes(self) -> FrozenSet[ClassData]:
        pass

    @property
    @abstractmethod
    def categories(self) -> FrozenSet[CategoryData]:
        pass

    @property
    @abstractmethod
    def protocols(self) -> FrozenSet[ProtocolData]:
        pass

    @abstractmethod
    def classes_sorted_by_name(self) -> List[ClassData]:
        pass

    @abstractmethod
    def categories_sorted_by_name(self) -> List[CategoryData]:
        pass

    @abstractmethod
    def protocols_sorted_by_name(self) -> List[ProtocolData]:
        pass

    @abstractmethod
    def __contains__(self, obj) -> bool:
        """True if this exact instance is registered."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Total number of registered top-level objects."""
        pass
