from itertools import combinations, permutations

import pytest

from conftest import SCENARIO_WORDS
from word_graph import (
    EditDistanceOneRule,
    GraphProcessor,
    IngestionError,
    NoPathError,
    NotPrecomputedError,
    SequenceWordSource,
    UnknownVertexError,
)


class FailingSource:
    """Yields a few words, then fails like an unreadable file."""

    def __init__(self, words):
        self._words = list(words)

    def words(self):
        yield from self._words
        raise IngestionError("disk went away")


class FirstLetterRule:
    def is_adjacent(self, first, second):
        return first[0] == second[0]


def test_scenario_paths(scenario_processor):
    assert scenario_processor.shortest_path("cat", "hat") == ["cat", "hat"]
    assert scenario_processor.shortest_distance("cat", "hat") == 1
    assert scenario_processor.shortest_path("cat", "wheat") == ["cat", "hat", "heat", "wheat"]
    assert scenario_processor.shortest_distance("cat", "wheat") == 3
    assert scenario_processor.shortest_path("rat", "neat") == ["rat", "hat", "heat", "neat"]


def test_scenario_without_bridge_word(policy):
    processor = GraphProcessor(policy=policy)
    processor.populate_graph(SequenceWordSource(["cat", "rat", "hat", "neat", "wheat", "kit"]))
    assert processor.shortest_path("cat", "hat") == ["cat", "hat"]
    with pytest.raises(NoPathError):
        processor.shortest_path("cat", "wheat")


def test_disconnected_words(policy):
    processor = GraphProcessor(policy=policy)
    processor.populate_graph(SequenceWordSource(["dog", "cat"]))
    with pytest.raises(NoPathError) as excinfo:
        processor.shortest_path("dog", "cat")
    assert excinfo.value.source == "dog"
    with pytest.raises(NoPathError):
        processor.shortest_distance("cat", "dog")


def test_unknown_word(scenario_processor):
    with pytest.raises(UnknownVertexError):
        scenario_processor.shortest_path("cat", "zzz")
    with pytest.raises(UnknownVertexError):
        scenario_processor.shortest_distance("zzz", "cat")


def test_query_before_population():
    processor = GraphProcessor()
    with pytest.raises(NotPrecomputedError):
        processor.shortest_path("cat", "hat")
    with pytest.raises(NotPrecomputedError):
        processor.shortest_distance("cat", "hat")


def test_empty_population_enables_queries():
    processor = GraphProcessor()
    assert processor.populate_graph(SequenceWordSource([])) == 0
    with pytest.raises(UnknownVertexError):
        processor.shortest_path("cat", "hat")


def test_insertion_is_idempotent(policy):
    processor = GraphProcessor(policy=policy)
    assert processor.populate_graph(SequenceWordSource(["cat", "hat", "cat"])) == 2
    assert processor.populate_graph(SequenceWordSource(["hat", "rat"])) == 1
    assert processor.populate_graph(SequenceWordSource(["cat", "hat", "rat"])) == 0
    assert processor.vertex_count == 3
    assert processor.edge_count == 3
    assert processor.words() == ["cat", "hat", "rat"]


def test_repeated_calls_are_additive(policy):
    processor = GraphProcessor(policy=policy)
    processor.populate_graph(SequenceWordSource(["cat", "hat"]))
    processor.populate_graph(SequenceWordSource(["heat", "wheat"]))
    assert processor.shortest_path("wheat", "cat") == ["wheat", "heat", "hat", "cat"]


def test_self_path(scenario_processor):
    for word in SCENARIO_WORDS:
        assert scenario_processor.shortest_path(word, word) == [word]
        assert scenario_processor.shortest_distance(word, word) == 0


def test_paths_are_mirrored(scenario_processor):
    for first, second in combinations(SCENARIO_WORDS, 2):
        try:
            forward = scenario_processor.shortest_path(first, second)
        except NoPathError:
            with pytest.raises(NoPathError):
                scenario_processor.shortest_path(second, first)
            continue
        assert scenario_processor.shortest_path(second, first) == forward[::-1]


def test_triangle_inequality(scenario_processor):
    def distance(first, second):
        try:
            return scenario_processor.shortest_distance(first, second)
        except NoPathError:
            return None

    for first, second, via in permutations(SCENARIO_WORDS, 3):
        direct = distance(first, second)
        left = distance(first, via)
        right = distance(via, second)
        if left is not None and right is not None:
            assert direct is not None
            assert direct <= left + right


def test_edges_match_adjacency_rule(scenario_processor):
    rule = EditDistanceOneRule()
    for first, second in combinations(SCENARIO_WORDS, 2):
        assert (second in scenario_processor.neighbors(first)) == rule.is_adjacent(first, second)
    assert scenario_processor.edge_count == 6
    assert scenario_processor.neighbors("kit") == set()


def test_repeated_queries_are_stable(scenario_processor):
    first = scenario_processor.shortest_path("cat", "neat")
    for _ in range(3):
        assert scenario_processor.shortest_path("cat", "neat") == first


def test_returned_paths_cannot_mutate_cache(scenario_processor):
    path = scenario_processor.shortest_path("cat", "wheat")
    path.clear()
    assert scenario_processor.shortest_path("cat", "wheat") == ["cat", "hat", "heat", "wheat"]


def test_tie_break_prefers_smallest_word(policy):
    processor = GraphProcessor(policy=policy)
    processor.populate_graph(SequenceWordSource(["cat", "bat", "cot", "bot"]))
    assert processor.shortest_path("cat", "bot") == ["cat", "bat", "bot"]
    assert processor.shortest_path("bot", "cat") == ["bot", "bat", "cat"]


def test_partial_ingestion_is_kept(policy):
    processor = GraphProcessor(policy=policy)
    with pytest.raises(IngestionError):
        processor.populate_graph(FailingSource(["cat", "hat"]))
    assert processor.vertex_count == 2
    assert processor.shortest_path("cat", "hat") == ["cat", "hat"]
    assert processor.populate_graph(SequenceWordSource(["cat", "hat", "heat"])) == 1


def test_missing_dictionary_file(tmp_path):
    processor = GraphProcessor()
    with pytest.raises(IngestionError):
        processor.populate_graph(tmp_path / "missing.txt")
    assert processor.vertex_count == 0
    with pytest.raises(NotPrecomputedError):
        processor.shortest_path("cat", "hat")


def test_populate_from_path(dictionary_file):
    processor = GraphProcessor()
    assert processor.populate_graph(str(dictionary_file)) == 5
    assert processor.shortest_distance("cat", "wheat") == 3
    assert "dog" in processor


def test_custom_adjacency_rule():
    processor = GraphProcessor(adjacency_rule=FirstLetterRule())
    processor.populate_graph(SequenceWordSource(["cat", "cow", "dog", "cup"]))
    assert processor.neighbors("cat") == {"cow", "cup"}
    assert processor.shortest_path("cup", "cow") == ["cup", "cow"]
    with pytest.raises(NoPathError):
        processor.shortest_path("dog", "cat")


def test_to_json(scenario_processor, policy):
    payload = scenario_processor.to_json()
    assert [node["word"] for node in payload["nodes"]] == SCENARIO_WORDS
    assert len(payload["edges"]) == 6
    assert payload["policy"] == policy.value
