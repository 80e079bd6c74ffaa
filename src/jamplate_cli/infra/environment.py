"""Default runtime environment and diagnostic sink.

Engines receive a :class:`RuntimeEnvironment` from the CLI and record
their compilations and diagnostics in it.  The sink does not format
anything itself; it hands each message to a writer callable supplied by
the CLI layer, which renders it on the console.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jamplate_cli.core.protocols import Compilation


class DiagnosticLevel(str, Enum):
    """Severity of a diagnostic message."""

    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class DiagnosticMessage:
    """One message reported by the engine."""

    level: DiagnosticLevel
    text: str

    def __str__(self) -> str:
        return f"{self.level.value}: {self.text}"


class StreamDiagnostic:
    """Accumulating diagnostic sink that writes on :meth:`flush`.

    Parameters
    ----------
    writer:
        Callable receiving each message on flush, in report order.
    """

    def __init__(self, writer: Callable[[DiagnosticMessage], None]) -> None:
        self._writer: Callable[[DiagnosticMessage], None] = writer
        self._pending: list[DiagnosticMessage] = []

    @property
    def messages(self) -> tuple[DiagnosticMessage, ...]:
        """Snapshot of the messages not yet flushed."""
        return tuple(self._pending)

    def report(
        self,
        text: str,
        *,
        level: DiagnosticLevel = DiagnosticLevel.ERROR,
    ) -> None:
        self._pending.append(DiagnosticMessage(level=level, text=text))

    def flush(self) -> None:
        """Write every pending message, then clear them."""
        pending, self._pending = self._pending, []
        for message in pending:
            self._writer(message)


@dataclass(slots=True)
class RuntimeEnvironment:
    """Mutable context shared between the CLI and the engine for one run."""

    diagnostic: StreamDiagnostic
    meta: dict[Any, Any] = field(default_factory=dict)
    compilations: list[Compilation] = field(default_factory=list)
