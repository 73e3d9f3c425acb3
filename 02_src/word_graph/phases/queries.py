"""Answers the shortest-path queries requested on the command line."""

from typing import Any, Dict, List, Sequence

from ..errors import WordGraphError
from ..graph_processor import GraphProcessor
from ..pipeline import PipelinePhase


class PathQueryPhase(PipelinePhase):
    phase_name = "queries"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        processor: GraphProcessor = context["processor"]
        uppercase = bool(context.get("uppercase", False))
        queries: Sequence[Sequence[str]] = context.get("queries", [])

        results: List[Dict[str, Any]] = []
        for pair in queries:
            source, target = (word.strip() for word in pair)
            if uppercase:
                source, target = source.upper(), target.upper()
            result: Dict[str, Any] = {"source": source, "target": target}
            try:
                path = processor.shortest_path(source, target)
            except WordGraphError as error:
                result["error"] = type(error).__name__
                result["message"] = str(error)
            else:
                result["path"] = path
                result["distance"] = len(path) - 1
            results.append(result)
        return {"query_results": results}
