import pytest

from conftest import SCENARIO_WORDS
from word_graph import GraphProcessor, SequenceWordSource
from word_graph.phases import ValidationPhase


@pytest.fixture
def processor():
    p = GraphProcessor()
    p.populate_graph(SequenceWordSource(SCENARIO_WORDS))
    return p


def test_consistent_table_has_no_warnings(processor):
    report = ValidationPhase().run({"processor": processor})["validation_report"]
    assert report["warnings"] == []
    assert report["checked_vertices"] == 7
    assert report["checked_pairs"] == 21
    # kit is isolated, the other six words form one component
    assert report["connected_pairs"] == 15


def test_max_vertices_limits_the_check(processor):
    report = ValidationPhase(max_vertices=3).run({"processor": processor})["validation_report"]
    assert report["checked_vertices"] == 3
    assert report["checked_pairs"] == 3


def test_corrupted_cell_is_reported(processor):
    # cat is vertex 0 and hat vertex 2; overwrite one direction only
    processor._paths._rows[0][2] = ("cat", "kit", "hat")
    report = ValidationPhase().run({"processor": processor})["validation_report"]
    assert "paths between 'cat' and 'hat' are not mirrored" in report["warnings"]
    assert any("missing edge 'cat'-'kit'" in warning for warning in report["warnings"])
