"""Word sources feeding dictionary words into the graph."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Protocol, Union

from .errors import IngestionError

logger = logging.getLogger(__name__)


class WordSource(Protocol):
    def words(self) -> Iterator[str]:
        ...


def normalize_word(raw: str, uppercase: bool = False) -> str:
    word = raw.strip()
    return word.upper() if uppercase else word


class FileWordSource:
    """Reads one word per line from a dictionary file.

    Every call to ``words()`` reopens the file, so the source can be consumed
    more than once. Blank lines are skipped. Read failures surface as
    ``IngestionError`` at the point they happen, after the words already
    yielded.
    """

    def __init__(self, path: Union[str, Path], uppercase: bool = False) -> None:
        self.path = Path(path)
        self.uppercase = uppercase

    def words(self) -> Iterator[str]:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                for line in handle:
                    word = normalize_word(line, self.uppercase)
                    if word:
                        yield word
        except (OSError, UnicodeDecodeError) as error:
            logger.error("Failed to read dictionary %s: %s", self.path, error)
            raise IngestionError(f"Cannot read dictionary {self.path}: {error}") from error

    def __repr__(self) -> str:
        return f"FileWordSource({str(self.path)!r})"


class SequenceWordSource:
    def __init__(self, words: Iterable[str], uppercase: bool = False) -> None:
        self._words: List[str] = list(words)
        self.uppercase = uppercase

    def words(self) -> Iterator[str]:
        for raw in self._words:
            word = normalize_word(raw, self.uppercase)
            if word:
                yield word

    def __repr__(self) -> str:
        return f"SequenceWordSource({len(self._words)} words)"
