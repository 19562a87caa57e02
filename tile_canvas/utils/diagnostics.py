"""Diagnostic channel.

Recoverable problems (a tile that does not fit on the canvas, a PNG that
cannot be written) are not raised. They are reported as :class:`Diagnostic`
values to a ``DiagnosticFn`` callback injected into the compositor. The
default callback forwards them to :mod:`logging`; tests pass a
:class:`DiagnosticRecorder` and assert on what was captured.
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class DiagnosticKind(StrEnum):
    TILE_OUT_OF_BOUNDS = auto()
    BLOCK_OUT_OF_BOUNDS = auto()
    WRITE_FAILED = auto()


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem.

    Attributes:
        kind: Category of the problem.
        message: Human readable description.
        position: Pixel position involved, if any.
    """

    kind: DiagnosticKind
    message: str
    position: Optional[Tuple[int, int]] = None


DiagnosticFn = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    logger.warning("%s: %s", diagnostic.kind, diagnostic.message)


@dataclass
class DiagnosticRecorder:
    """Callable sink that keeps every diagnostic it receives."""

    diagnostics: List[Diagnostic] = field(default_factory=list)

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def kinds(self) -> List[DiagnosticKind]:
        return [d.kind for d in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()
