"""Undirected, unweighted vertex/edge store keyed by word."""

from typing import Any, Dict, List, Set

from .errors import UnknownVertexError
from .graph_model import GraphState


class WordGraph:
    """Owns vertex identities, their indexes and the adjacency relation."""

    def __init__(self) -> None:
        self.state = GraphState()

    def add_vertex(self, word: str) -> bool:
        if word in self.state.index:
            return False
        self.state.index[word] = len(self.state.vertices)
        self.state.vertices.append(word)
        self.state.adjacency[word] = set()
        return True

    def add_edge(self, first: str, second: str) -> bool:
        if first not in self.state.index:
            raise UnknownVertexError(first)
        if second not in self.state.index:
            raise UnknownVertexError(second)
        if first == second:
            raise ValueError(f"Self-loop on {first!r} is not allowed")

        if second in self.state.adjacency[first]:
            return False
        self.state.adjacency[first].add(second)
        self.state.adjacency[second].add(first)
        self.state.edge_count += 1
        return True

    def neighbors(self, word: str) -> Set[str]:
        if word not in self.state.adjacency:
            raise UnknownVertexError(word)
        return set(self.state.adjacency[word])

    def all_vertices(self) -> List[str]:
        return list(self.state.vertices)

    def index_of(self, word: str) -> int:
        try:
            return self.state.index[word]
        except KeyError:
            raise UnknownVertexError(word) from None

    @property
    def edge_count(self) -> int:
        return self.state.edge_count

    def __contains__(self, word: object) -> bool:
        return word in self.state.index

    def __len__(self) -> int:
        return len(self.state.vertices)

    def to_json(self) -> Dict[str, Any]:
        edges: List[List[str]] = []
        for word in self.state.vertices:
            position = self.state.index[word]
            for neighbor in sorted(self.state.adjacency[word]):
                if self.state.index[neighbor] > position:
                    edges.append([word, neighbor])
        return {
            "nodes": [
                {"word": word, "index": position, "degree": len(self.state.adjacency[word])}
                for position, word in enumerate(self.state.vertices)
            ],
            "edges": edges,
        }
