"""Single-source shortest paths over the word graph.

The search is Dijkstra's algorithm. With the default unit weight it visits
vertices in the same order as a breadth-first search, but the relaxation
step is the general one, so a different ``weight`` callable works without
changes.

Vertices are popped by ascending tentative distance; equal distances are
broken by lexicographic word order. A vertex's predecessor is therefore the
lexicographically smallest neighbour on the previous distance level, which
makes every reconstructed path reproducible.

Transient per-vertex state (distance, visited flag, predecessor) lives in a
scratch mapping created for one run and returned inside ``SearchResult``;
nothing is written back to the graph.
"""

import heapq
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .errors import UnknownVertexError
from .graph import WordGraph
from .graph_model import VertexState

logger = logging.getLogger(__name__)

WeightFunction = Callable[[str, str], float]


def unit_weight(first: str, second: str) -> float:
    return 1


@dataclass
class SearchResult:
    source: str
    states: Dict[str, VertexState]

    def distance_to(self, target: str) -> Optional[float]:
        state = self.states.get(target)
        if state is None or not state.visited:
            return None
        return state.distance

    def path_to(self, target: str) -> Optional[List[str]]:
        """Return the path from ``source`` to ``target``, or None when unreached."""
        state = self.states.get(target)
        if state is None or not state.visited:
            return None

        path = [target]
        current = state.predecessor
        while current is not None:
            path.append(current)
            current = self.states[current].predecessor
        path.reverse()
        return path


def single_source_search(
    graph: WordGraph,
    source: str,
    weight: WeightFunction = unit_weight,
) -> SearchResult:
    states: Dict[str, VertexState] = {word: VertexState() for word in graph.all_vertices()}
    if source not in states:
        raise UnknownVertexError(source)

    states[source].distance = 0
    heap: List[Tuple[float, str]] = [(0, source)]
    pops = 0

    while heap:
        distance, word = heapq.heappop(heap)
        current = states[word]
        if current.visited or distance > current.distance:
            continue
        current.visited = True
        pops += 1

        for neighbor in graph.neighbors(word):
            candidate = states[neighbor]
            if candidate.visited:
                continue
            tentative = current.distance + weight(word, neighbor)
            if tentative < candidate.distance:
                candidate.distance = tentative
                candidate.predecessor = word
                heapq.heappush(heap, (tentative, neighbor))

    logger.debug("Search from %r settled %d of %d vertices", source, pops, len(states))
    return SearchResult(source=source, states=states)
