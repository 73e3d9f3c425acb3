"""Adjacency rules deciding which words share an edge."""

from typing import Protocol


class AdjacencyRule(Protocol):
    def is_adjacent(self, first: str, second: str) -> bool:
        ...


class EditDistanceOneRule:
    """Words are adjacent when one substitution, insertion or deletion turns one into the other.

    The rule is symmetric and identical words are never adjacent.
    """

    def is_adjacent(self, first: str, second: str) -> bool:
        if len(first) == len(second):
            return self._single_substitution(first, second)
        if len(first) - len(second) == 1:
            return self._single_deletion(first, second)
        if len(second) - len(first) == 1:
            return self._single_deletion(second, first)
        return False

    @staticmethod
    def _single_substitution(first: str, second: str) -> bool:
        mismatches = 0
        for left, right in zip(first, second):
            if left != right:
                mismatches += 1
                if mismatches > 1:
                    return False
        return mismatches == 1

    @staticmethod
    def _single_deletion(longer: str, shorter: str) -> bool:
        # Skip the first mismatching character of the longer word, the rest must line up.
        for position, (left, right) in enumerate(zip(longer, shorter)):
            if left != right:
                return longer[position + 1 :] == shorter[position:]
        return True
