"""Graph ingestion, shortest-path precomputation and path queries."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

from .adjacency import AdjacencyRule, EditDistanceOneRule
from .config import PrecomputePolicy
from .errors import NoPathError, NotPrecomputedError
from .graph import WordGraph
from .path_table import PathTable
from .shortest_path import WeightFunction, single_source_search, unit_weight
from .word_source import FileWordSource, WordSource

logger = logging.getLogger(__name__)


class GraphProcessor:
    """Builds a word graph from a dictionary and serves cached shortest paths.

    ``populate_graph`` inserts words one at a time. After each inserted word
    its edges are discovered against every existing vertex. The path table
    is consistent with the graph whenever ``populate_graph`` returns or
    raises.

    How the table is maintained is set by ``policy``:

    * ``PrecomputePolicy.FULL`` (default) keeps every pair exact. Inserting a
      vertex with two or more edges can shorten or create a route between
      two vertices that were already present, so such an insertion makes
      the call end with one rebuild of the whole table. This is the only
      policy that always returns true shortest paths.
    * ``PrecomputePolicy.INCREMENTAL`` only computes paths between the new
      vertex and the earlier ones. Paths between earlier vertices keep the
      value cached when the later of the two was inserted, and may be longer
      than the true shortest path, or missing.

    For a pair (i, j) with i inserted before j, the cached path always comes
    from the search rooted at j, under both policies.
    """

    def __init__(
        self,
        adjacency_rule: Optional[AdjacencyRule] = None,
        policy: PrecomputePolicy = PrecomputePolicy.FULL,
        weight: WeightFunction = unit_weight,
    ) -> None:
        self._graph = WordGraph()
        self._paths = PathTable()
        self._rule: AdjacencyRule = adjacency_rule or EditDistanceOneRule()
        self._weight = weight
        self.policy = policy
        self._precomputed = False

    def populate_graph(self, source: Union[WordSource, str, Path]) -> int:
        """Add every new word from ``source`` and return how many were inserted.

        Raises ``IngestionError`` if the source cannot be read. Words inserted
        before the failure stay in the graph with their paths computed.

        Under ``FULL`` a word with fewer than two edges cannot lie between two
        other vertices, so only its own row is computed. The first word with
        two or more edges marks the table stale; rows are then skipped and the
        whole table is rebuilt once when the call ends, whether it succeeds
        or fails.
        """
        if isinstance(source, (str, Path)):
            source = FileWordSource(source)

        inserted = 0
        seen = 0
        stale = False
        try:
            for word in source.words():
                seen += 1
                if not self._graph.add_vertex(word):
                    continue
                inserted += 1
                degree = self._connect(word)
                self._paths.grow(word)
                if self.policy is PrecomputePolicy.FULL and (stale or degree >= 2):
                    stale = True
                else:
                    self.precompute_for_new_vertex(word)
        finally:
            if stale:
                self.shortest_path_precomputation()

        self._precomputed = True
        logger.info(
            "Ingested %s: %d words read, %d inserted, %d vertices, %d edges (policy=%s)",
            source,
            seen,
            inserted,
            len(self._graph),
            self._graph.edge_count,
            self.policy.value,
        )
        return inserted

    def precompute_for_new_vertex(self, word: str) -> None:
        """Cache paths between ``word`` and every vertex inserted before it."""
        result = single_source_search(self._graph, word, self._weight)
        position = self._graph.index_of(word)
        for earlier_index, earlier in enumerate(self._graph.all_vertices()[:position]):
            self._paths.store(position, earlier_index, result.path_to(earlier))
        self._precomputed = True

    def shortest_path_precomputation(self) -> None:
        """Rebuild every cached path against the current graph."""
        self._paths.reset(self._graph.all_vertices())
        for word in self._graph.all_vertices():
            self.precompute_for_new_vertex(word)
        self._precomputed = True

    def shortest_path(self, word1: str, word2: str) -> List[str]:
        if not self._precomputed:
            raise NotPrecomputedError("Shortest paths are not precomputed; call populate_graph first")
        first = self._graph.index_of(word1)
        second = self._graph.index_of(word2)
        path = self._paths.lookup(first, second)
        if path is None:
            raise NoPathError(word1, word2)
        return path

    def shortest_distance(self, word1: str, word2: str) -> int:
        return len(self.shortest_path(word1, word2)) - 1

    @property
    def vertex_count(self) -> int:
        return len(self._graph)

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    def words(self) -> List[str]:
        return self._graph.all_vertices()

    def neighbors(self, word: str) -> Set[str]:
        return self._graph.neighbors(word)

    def __contains__(self, word: object) -> bool:
        return word in self._graph

    def to_json(self) -> Dict[str, Any]:
        payload = self._graph.to_json()
        payload["policy"] = self.policy.value
        return payload

    def _connect(self, word: str) -> int:
        connected = 0
        for other in self._graph.all_vertices():
            if other == word:
                continue
            if self._rule.is_adjacent(word, other):
                self._graph.add_edge(word, other)
                connected += 1
        logger.debug("Added vertex %r with %d edges", word, connected)
        return connected
