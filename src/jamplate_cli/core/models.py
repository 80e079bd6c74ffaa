"""Domain models for jamplate-cli.

Value objects are **frozen** dataclasses: immutable, with no behaviour
beyond data access.  They carry zero I/O and no dependencies on the
engine, so they can be built and compared freely in tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from jamplate_cli.exceptions import NoInputError

if TYPE_CHECKING:
    from jamplate_cli.core.protocols import Document, Environment


DEFAULT_OUTPUT: str = "output"
"""Output directory used when the command line carries no ``-o``."""


def _empty_memory() -> Mapping[str, str]:
    return MappingProxyType({})


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, eq=True, unsafe_hash=False)
class Invocation:
    """One parsed command-line run.

    Equality covers the memory; the hash skips it since a read-only
    mapping is not hashable.

    Raises
    ------
    NoInputError
        If *input* is empty.
    """

    input: str
    """Path of the template file or project directory (never empty)."""

    output: str = DEFAULT_OUTPUT
    """Path of the output directory."""

    default_memory: Mapping[str, str] = field(default_factory=_empty_memory, hash=False)
    """Read-only ``key=value`` pairs handed to the engine's memory."""

    def __post_init__(self) -> None:
        if not self.input:
            raise NoInputError()
        object.__setattr__(self, "default_memory", MappingProxyType(dict(self.default_memory)))


# ---------------------------------------------------------------------------
# Environment metadata keys
# ---------------------------------------------------------------------------

class Meta(str, Enum):
    """Metadata keys written into the environment before compilation."""

    MEMORY = "MEMORY"
    """The default memory mapping (``dict[str, str]``)."""

    PROJECT = "PROJECT"
    """The input location (``pathlib.Path``)."""

    OUTPUT = "OUTPUT"
    """The output location (``pathlib.Path``)."""


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class PipelineState(Enum):
    """States of a single compile → execute run."""

    READY = "ready"
    COMPILED = "compiled"
    EXECUTED = "executed"
    COMPILE_FAILED = "compile_failed"
    EXECUTE_FAILED = "execute_failed"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES

    @property
    def is_failure(self) -> bool:
        return self in (PipelineState.COMPILE_FAILED, PipelineState.EXECUTE_FAILED)


_TERMINAL_STATES: frozenset[PipelineState] = frozenset(
    {
        PipelineState.EXECUTED,
        PipelineState.COMPILE_FAILED,
        PipelineState.EXECUTE_FAILED,
    }
)


@dataclass(frozen=True, slots=True)
class PreparedRun:
    """An environment ready for compilation, with the documents to compile.

    Produced by :func:`~jamplate_cli.core.environment_builder.build_environment`
    and consumed by :class:`~jamplate_cli.core.pipeline.Pipeline`.
    """

    environment: Environment
    documents: tuple[Document, ...]
