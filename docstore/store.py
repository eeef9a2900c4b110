"""
Store class holding the classes, categories and protocols of a parsing run.
"""

import re
from typing import Callable, Dict, FrozenSet, Hashable, List, Optional

from .base_store import StoreProviding
from .errors import DuplicateRegistrationError
from .objects import BaseObject, ObjectKind, ClassData, CategoryData, ProtocolData
from .result import RegistrationResult, RegistrationStatus
from . import logger

_CATEGORY_ID_PATTERN = re.compile(r'^(?P<class_name>[^()]+)\((?P<category_name>[^()]*)\)$')


# Missing key fields give a key that matches nothing
def _class_key(obj: ClassData) -> str:
    return getattr(obj, 'name', None)


def _category_key(obj: CategoryData) -> tuple:
    return (getattr(obj, 'name', None), getattr(obj, 'category_name', None) or '')


def _protocol_key(obj: ProtocolData) -> str:
    return getattr(obj, 'name', None)


_KEY_FUNCTIONS: Dict[ObjectKind, Callable[[BaseObject], Hashable]] = {
    ObjectKind.CLASS: _class_key,
    ObjectKind.CATEGORY: _category_key,
    ObjectKind.PROTOCOL: _protocol_key,
}


class Store(StoreProviding):
    """
    In-memory registry of top-level objects.

    Each collection maps an identity key to the registered object:
    class name for classes, (class name, category name) for categories and
    protocol name for protocols. The store shares objects with the parser and
    renderers and never copies them.

    Not thread safe; populate from a single parsing pass, then read.
    """

    def __init__(self):
        self._classes: Dict[str, ClassData] = {}
        self._categories: Dict[tuple, CategoryData] = {}
        self._protocols: Dict[str, ProtocolData] = {}
        self._collections: Dict[ObjectKind, Dict] = {
            ObjectKind.CLASS: self._classes,
            ObjectKind.CATEGORY: self._categories,
            ObjectKind.PROTOCOL: self._protocols,
        }

    # Registration

    def register_class(self, class_data: ClassData) -> RegistrationResult:
        """
        Register a class.

        Registering the same instance again does nothing. Registering a
        different instance with the same name returns a DUPLICATE result
        and leaves the store unchanged.

        Raises:
            ValueError: If class_data is None, not a class or has no name
        """
        return self._register(class_data, ObjectKind.CLASS)

    def register_category(self, category: CategoryData) -> RegistrationResult:
        """Register a category or extension. See register_class."""
        return self._register(category, ObjectKind.CATEGORY)

    def register_protocol(self, protocol: ProtocolData) -> RegistrationResult:
        """Register a protocol. See register_class."""
        return self._register(protocol, ObjectKind.PROTOCOL)

    def _register(self, obj: BaseObject, kind: ObjectKind) -> RegistrationResult:
        self._validate(obj, kind)

        collection = self._collections[kind]
        key = _KEY_FUNCTIONS[kind](obj)
        display_key = obj.display_name
        existing = collection.get(key)

        if existing is obj:
            logger.debug(f"Already registered in {kind.collection_name}: {display_key}")
            return RegistrationResult(RegistrationStatus.ALREADY_REGISTERED, kind, display_key)

        if existing is not None:
            error = DuplicateRegistrationError(kind.collection_name, display_key)
            logger.error(str(error))
            return RegistrationResult(RegistrationStatus.DUPLICATE, kind, display_key, error)

        collection[key] = obj
        logger.debug(f"Registered in {kind.collection_name}: {display_key}")
        return RegistrationResult(RegistrationStatus.ADDED, kind, display_key)

    @staticmethod
    def _validate(obj: BaseObject, kind: ObjectKind):
        if obj is None:
            raise ValueError(f"Cannot register None in {kind.collection_name}")
        if getattr(obj, 'kind', None) != kind:
            raise ValueError(f"Expected {kind.value} object, got {obj!r}")
        if not obj.name:
            raise ValueError(f"Cannot register {kind.value} without a name")

    # Unregistration

    def unregister_top_level_object(self, obj: Optional[BaseObject]) -> bool:
        """
        Remove a class, category or protocol from the store.

        Dispatches on the object's kind. Objects that are not registered,
        and None, are ignored.

        Returns:
            True if an object was removed
        """
        kind = getattr(obj, 'kind', None)
        if kind not in _KEY_FUNCTIONS:
            return False
        return self._unregister(obj, kind)

    def unregister_class(self, class_data: ClassData) -> bool:
        """Remove a class. Anything that is not a registered class is ignored."""
        return self._unregister(class_data, ObjectKind.CLASS)

    def unregister_category(self, category: CategoryData) -> bool:
        """Remove a category or extension. See unregister_class."""
        return self._unregister(category, ObjectKind.CATEGORY)

    def unregister_protocol(self, protocol: ProtocolData) -> bool:
        """Remove a protocol. See unregister_class."""
        return self._unregister(protocol, ObjectKind.PROTOCOL)

    def _unregister(self, obj: BaseObject, kind: ObjectKind) -> bool:
        if getattr(obj, 'kind', None) != kind:
            return False

        key = _KEY_FUNCTIONS[kind](obj)
        removed = self._collections[kind].pop(key, None)
        if removed is None:
            return False

        logger.debug(f"Unregistered from {kind.collection_name}: {obj.display_name}")
        return True

    # Lookup

    def class_with_name(self, name: str) -> Optional[ClassData]:
        return self._classes.get(name)

    def category_with_name(self, class_name: str, category_name: Optional[str] = '') -> Optional[CategoryData]:
        """
        Get category by class name and category name.

        An empty or None category name looks up the class extension.
        """
        return self._categories.get((class_name, category_name or ''))

    def category_with_id(self, category_id: str) -> Optional[CategoryData]:
        """
        Get category by its `ClassName(CategoryName)` id.

        `ClassName()` resolves the extension. Returns None for text that is
        not a category id.
        """
        match = _CATEGORY_ID_PATTERN.match(category_id or '')
        if not match:
            return None
        return self.category_with_name(match.group('class_name'), match.group('category_name'))

    def protocol_with_name(self, name: str) -> Optional[ProtocolData]:
        return self._protocols.get(name)

    # Collections

    @property
    def classes(self) -> FrozenSet[ClassData]:
        return frozenset(self._classes.values())

    @property
    def categories(self) -> FrozenSet[CategoryData]:
        return frozenset(self._categories.values())

    @property
    def protocols(self) -> FrozenSet[ProtocolData]:
        return frozenset(self._protocols.values())

    def __contains__(self, obj) -> bool:
        kind = getattr(obj, 'kind', None)
        if kind not in self._collections:
            return False
        return self._collections[kind].get(_KEY_FUNCTIONS[kind](obj)) is obj

    def __len__(self) -> int:
        return sum(len(collection) for collection in self._collections.values())

    # Sorted views, recomputed on every call

    def classes_sorted_by_name(self) -> List[ClassData]:
        return sorted(self._classes.values(), key=_class_key)

    def categories_sorted_by_name(self) -> List[CategoryData]:
        """Sorted by class name, then category name with the extension first."""
        return sorted(self._categories.values(), key=_category_key)

    def protocols_sorted_by_name(self) -> List[ProtocolData]:
        return sorted(self._protocols.values(), key=_protocol_key)
