"""Phase abstraction and the sequential runner used by the CLI."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from .errors import PhaseOutputError

logger = logging.getLogger(__name__)


class PipelinePhase(ABC):
    phase_name: str

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


class PipelineRunner:
    """Runs phases in order, merging each phase's output into the shared context.

    The names of the phases that finished are kept under ``completed_phases``
    along with their wall-clock seconds under ``phase_seconds``.
    """

    def __init__(self, phases: Iterable[PipelinePhase]) -> None:
        self.phases: List[PipelinePhase] = list(phases)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        current = dict(context)
        completed: List[str] = []
        seconds: Dict[str, float] = {}
        for phase in self.phases:
            started = time.perf_counter()
            phase_result = phase.run(current)
            if not isinstance(phase_result, dict):
                raise PhaseOutputError(phase.phase_name, phase_result)
            current.update(phase_result)
            seconds[phase.phase_name] = time.perf_counter() - started
            completed.append(phase.phase_name)
            logger.debug("Phase %s finished in %.3fs", phase.phase_name, seconds[phase.phase_name])
        current["completed_phases"] = completed
        current["phase_seconds"] = seconds
        return current
