"""
Object hierarchy for top-level Objective-C declarations.

This package provides the records the parser hands to the store: classes,
categories (including extensions) and protocols.
"""

from .object_kind import ObjectKind
from .base_object import BaseObject
from .class_data import ClassData
from .category_data import CategoryData
from .protocol_data import ProtocolData
from .object_factory import ObjectFactory

__all__ = [
    'ObjectKind',
    'BaseObject',
    'ClassData',
    'CategoryData',
    'ProtocolData',
    'ObjectFactory',
]
