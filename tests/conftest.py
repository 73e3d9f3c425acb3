import sys
from pathlib import Path

import pytest

# Ensure the package is importable when pytest starts from any directory
SRC_ROOT = Path(__file__).resolve().parent.parent / "02_src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from word_graph import GraphProcessor, PrecomputePolicy, SequenceWordSource  # noqa: E402

SETTING_NAMES = [
    "WORD_GRAPH_DICTIONARY",
    "WORD_GRAPH_POLICY",
    "WORD_GRAPH_UPPERCASE",
    "WORD_GRAPH_LOG_LEVEL",
    "WORD_GRAPH_OUTPUT_PATH",
]

SCENARIO_WORDS = ["cat", "rat", "hat", "heat", "neat", "wheat", "kit"]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every setting and restore the original environment afterwards."""
    for name in SETTING_NAMES:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture(params=[PrecomputePolicy.FULL, PrecomputePolicy.INCREMENTAL], ids=lambda p: p.value)
def policy(request):
    return request.param


@pytest.fixture
def scenario_processor(policy):
    processor = GraphProcessor(policy=policy)
    processor.populate_graph(SequenceWordSource(SCENARIO_WORDS))
    return processor


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\nhat\n\n  heat \nwheat\ndog\n", encoding="utf-8")
    return path
