"""Dictionary ingestion phase."""

from typing import Any, Dict

from ..graph_processor import GraphProcessor
from ..pipeline import PipelinePhase
from ..word_source import FileWordSource


class DictionaryIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        processor: GraphProcessor = context["processor"]
        dictionary_path = str(context["dictionary_path"])
        source = FileWordSource(dictionary_path, uppercase=bool(context.get("uppercase", False)))

        inserted = processor.populate_graph(source)
        return {
            "ingestion_report": {
                "dictionary_path": dictionary_path,
                "inserted": inserted,
                "vertex_count": processor.vertex_count,
                "edge_count": processor.edge_count,
                "policy": processor.policy.value,
            }
        }
