"""Pipeline phases for building and checking a word graph."""

from .ingestion import DictionaryIngestionPhase
from .queries import PathQueryPhase
from .validation import ValidationPhase

__all__ = [
    "DictionaryIngestionPhase",
    "PathQueryPhase",
    "ValidationPhase",
]
