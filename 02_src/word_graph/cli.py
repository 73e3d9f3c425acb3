"""CLI entrypoint: build a word graph, answer path queries, save a JSON artifact."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .config import PrecomputePolicy, Settings, load_settings
from .errors import WordGraphError
from .graph_processor import GraphProcessor
from .phases import DictionaryIngestionPhase, PathQueryPhase, ValidationPhase
from .pipeline import PipelinePhase, PipelineRunner


def build_default_phases() -> List[PipelinePhase]:
    return [
        DictionaryIngestionPhase(),
        PathQueryPhase(),
        ValidationPhase(),
    ]


def run_pipeline(
    dictionary_path: str,
    queries: Sequence[Sequence[str]] = (),
    policy: PrecomputePolicy = PrecomputePolicy.FULL,
    uppercase: bool = False,
) -> Dict[str, Any]:
    processor = GraphProcessor(policy=policy)
    initial_context: Dict[str, Any] = {
        "dictionary_path": dictionary_path,
        "queries": [list(pair) for pair in queries],
        "uppercase": uppercase,
        "processor": processor,
    }
    runner = PipelineRunner(phases=build_default_phases())
    final_context = runner.run(initial_context)
    artifact = processor.to_json()
    artifact["meta"] = {
        "dictionary_path": dictionary_path,
        "ingestion_report": final_context.get("ingestion_report", {}),
        "query_results": final_context.get("query_results", []),
        "validation_report": final_context.get("validation_report", {}),
        "phase_seconds": final_context.get("phase_seconds", {}),
    }
    return artifact


def parse_args(argv: List[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        description="Build a word-adjacency graph and report shortest paths between words."
    )
    parser.add_argument(
        "--dictionary",
        default=settings.dictionary_path,
        required=not settings.dictionary_path,
        help="Path to the dictionary file, one word per line.",
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in PrecomputePolicy],
        default=settings.policy.value,
        help="Path table rebuild policy after each inserted word.",
    )
    parser.add_argument(
        "--query",
        nargs=2,
        action="append",
        default=[],
        metavar=("SOURCE", "TARGET"),
        help="Word pair to report the shortest path for; may be repeated.",
    )
    parser.add_argument(
        "--no-uppercase",
        dest="uppercase",
        action="store_false",
        default=settings.uppercase,
        help="Keep dictionary words in their original case.",
    )
    parser.add_argument(
        "--output-path",
        default=settings.output_path,
        help="Where to save resulting graph artifact JSON.",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    try:
        settings = load_settings()
    except WordGraphError as error:
        print(f"Configuration error: {error}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = parse_args(argv, settings)
    try:
        artifact = run_pipeline(
            dictionary_path=args.dictionary,
            queries=args.query,
            policy=PrecomputePolicy.parse(args.policy),
            uppercase=args.uppercase,
        )
    except WordGraphError as error:
        print(f"Word graph run failed: {error}", file=sys.stderr)
        return 1
    output_path = Path(args.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(artifact, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Word graph artifact saved to: {output_path.resolve()}")
    print(
        "Counts:",
        f"nodes={len(artifact['nodes'])}",
        f"edges={len(artifact['edges'])}",
        f"warnings={len(artifact['meta']['validation_report'].get('warnings', []))}",
    )
    for result in artifact["meta"]["query_results"]:
        if "path" in result:
            print(f"{result['source']} -> {result['target']}: {' -> '.join(result['path'])} ({result['distance']})")
        else:
            print(f"{result['source']} -> {result['target']}: {result['error']}: {result['message']}")
    return 0
