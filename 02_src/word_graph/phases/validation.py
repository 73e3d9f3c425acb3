"""Path table consistency checks."""

import logging
from itertools import combinations
from typing import Any, Dict, List

from ..errors import NoPathError
from ..graph_processor import GraphProcessor
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class ValidationPhase(PipelinePhase):
    phase_name = "validation"

    def __init__(self, max_vertices: int = 200) -> None:
        self._max_vertices = max_vertices

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        processor: GraphProcessor = context["processor"]
        words = processor.words()[: self._max_vertices]
        warnings: List[str] = []

        for word in words:
            if processor.shortest_path(word, word) != [word]:
                warnings.append(f"diagonal path of {word!r} is not [{word!r}]")

        checked_pairs = 0
        connected_pairs = 0
        for first, second in combinations(words, 2):
            checked_pairs += 1
            try:
                forward = processor.shortest_path(first, second)
            except NoPathError:
                continue

            connected_pairs += 1
            backward = processor.shortest_path(second, first)
            if backward != forward[::-1]:
                warnings.append(f"paths between {first!r} and {second!r} are not mirrored")
            if forward[0] != first or forward[-1] != second:
                warnings.append(f"path {forward} does not join {first!r} and {second!r}")
            for left, right in zip(forward, forward[1:]):
                if right not in processor.neighbors(left):
                    warnings.append(f"path {forward} uses missing edge {left!r}-{right!r}")
                    break

        for warning in warnings:
            logger.warning("Validation: %s", warning)

        qa_report = {
            "vertex_count": processor.vertex_count,
            "edge_count": processor.edge_count,
            "checked_vertices": len(words),
            "checked_pairs": checked_pairs,
            "connected_pairs": connected_pairs,
            "warnings": warnings,
        }
        return {"validation_report": qa_report}
