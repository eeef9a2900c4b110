"""
Base object class for representing parsed top-level declarations.
"""

from abc import ABC, abstractmethod
from typing import List
from pathlib import Path

from .object_kind import ObjectKind


class BaseObject(ABC):
    """
    Abstract base class for top-level objects discovered by the parser.

    Contains common attributes shared by classes, categories and protocols.
    The store only reads `kind` and the fields making up the identity key;
    everything else is carried along for renderers.
    """

    def __init__(self, kind: ObjectKind, name: str):
        self.kind: ObjectKind = kind
        self.name: str = name
        self.file_path: str = ''
        self.line_number: int = 0
        self.adopted_protocols: List[str] = []
        self.methods: List[str] = []

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Name used in listings and log messages."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.value}: {self.display_name} at {self.file_path}:{self.line_number})"

    def get_file_path(self) -> Path:
        """Return file path as Path object."""
        return Path(self.file_path) if self.file_path else Path()
