"""Data model primitives for the word graph."""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass
class VertexState:
    distance: float = math.inf
    visited: bool = False
    predecessor: Optional[str] = None


@dataclass
class GraphState:
    vertices: List[str] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)
    adjacency: Dict[str, Set[str]] = field(default_factory=dict)
    edge_count: int = 0
