"""Runtime settings read from the environment and an optional .env file."""

import logging
import os
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_OUTPUT_PATH = "03_data/01_word_graph/graph_artifact.json"


class PrecomputePolicy(str, Enum):
    """How much of the path table is rebuilt after a vertex is inserted.

    FULL replays the search for every vertex and is always correct.
    INCREMENTAL only computes the new vertex's row; a vertex inserted later
    can open a shorter route between two earlier vertices, and such cached
    paths are left stale.
    """

    FULL = "full"
    INCREMENTAL = "incremental"

    @classmethod
    def parse(cls, value: str) -> "PrecomputePolicy":
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = ", ".join(policy.value for policy in cls)
            raise ConfigurationError(
                f"Unknown precompute policy {value!r}; expected one of: {allowed}"
            ) from None


@dataclass
class Settings:
    dictionary_path: str = ""
    policy: PrecomputePolicy = PrecomputePolicy.FULL
    uppercase: bool = True
    log_level: str = "INFO"
    output_path: str = DEFAULT_OUTPUT_PATH


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {value!r}")


def load_settings(env_file: str | None = None) -> Settings:
    load_dotenv(env_file)
    log_level = os.getenv("WORD_GRAPH_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"WORD_GRAPH_LOG_LEVEL has unknown level {log_level!r}")

    return Settings(
        dictionary_path=os.getenv("WORD_GRAPH_DICTIONARY", ""),
        policy=PrecomputePolicy.parse(os.getenv("WORD_GRAPH_POLICY", PrecomputePolicy.FULL.value)),
        uppercase=_parse_bool("WORD_GRAPH_UPPERCASE", os.getenv("WORD_GRAPH_UPPERCASE", "1")),
        log_level=log_level,
        output_path=os.getenv("WORD_GRAPH_OUTPUT_PATH", DEFAULT_OUTPUT_PATH),
    )
