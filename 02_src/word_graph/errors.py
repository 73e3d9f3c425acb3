"""Error taxonomy for graph ingestion and path queries."""


class WordGraphError(Exception):
    """Base class for every error raised by the word graph package."""


class IngestionError(WordGraphError):
    """The word source could not be read."""


class UnknownVertexError(WordGraphError, KeyError):
    """A word was referenced that was never added to the graph."""

    def __init__(self, word: str) -> None:
        super().__init__(word)
        self.word = word

    def __str__(self) -> str:
        return f"Unknown vertex: {self.word!r}"


class NoPathError(WordGraphError):
    """Both words are in the graph but no chain of edges connects them."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"No path between {source!r} and {target!r}")
        self.source = source
        self.target = target


class NotPrecomputedError(WordGraphError):
    """A query arrived before any shortest-path precomputation ran."""


class ConfigurationError(WordGraphError):
    """A setting has a value the package cannot use."""


class PhaseOutputError(WordGraphError, TypeError):
    """A pipeline phase returned something other than a context dict."""

    def __init__(self, phase_name: str, output: object) -> None:
        super().__init__(
            f"Phase '{phase_name}' must return dict context, got {type(output).__name__}."
        )
        self.phase_name = phase_name
