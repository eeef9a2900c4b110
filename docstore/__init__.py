"""
In-memory store of the classes, categories and protocols found by the parser.
"""

from .objects import ObjectKind, BaseObject, ClassData, CategoryData, ProtocolData, ObjectFactory
from .errors import DuplicateRegistrationError
from .result import RegistrationStatus, RegistrationResult
from .base_store import StoreProviding
from .store import Store

__all__ = ['ObjectKind', 'BaseObject', 'ClassData', 'CategoryData', 'ProtocolData', 'ObjectFactory',
           'DuplicateRegistrationError', 'RegistrationStatus', 'RegistrationResult',
           'StoreProviding', 'Store']
