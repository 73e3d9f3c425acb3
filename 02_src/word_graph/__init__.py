"""Word-adjacency graph with precomputed shortest paths."""

from .adjacency import AdjacencyRule, EditDistanceOneRule
from .config import PrecomputePolicy, Settings, load_settings
from .errors import (
    ConfigurationError,
    IngestionError,
    NoPathError,
    NotPrecomputedError,
    PhaseOutputError,
    UnknownVertexError,
    WordGraphError,
)
from .graph import WordGraph
from .graph_processor import GraphProcessor
from .path_table import PathTable
from .pipeline import PipelinePhase, PipelineRunner
from .word_source import FileWordSource, SequenceWordSource, WordSource

__all__ = [
    "AdjacencyRule",
    "EditDistanceOneRule",
    "PrecomputePolicy",
    "Settings",
    "load_settings",
    "WordGraphError",
    "IngestionError",
    "UnknownVertexError",
    "NoPathError",
    "NotPrecomputedError",
    "ConfigurationError",
    "PhaseOutputError",
    "WordGraph",
    "GraphProcessor",
    "PathTable",
    "PipelinePhase",
    "PipelineRunner",
    "WordSource",
    "FileWordSource",
    "SequenceWordSource",
]
