"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the template engine and the
infrastructure adapters must satisfy.  Core code depends ONLY on these
protocols, never on concrete implementations, preserving the
dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import MutableMapping, Sequence
from pathlib import Path
from typing import Any, Protocol


class Document(Protocol):
    """A single source document discovered from the input path."""

    @property
    def display_name(self) -> str:
        """Human-readable identity of the document, ending with its suffix."""
        ...  # pragma: no cover


class Compilation(Protocol):
    """The result of compiling one document."""

    @property
    def root_document(self) -> Document:
        """The document this compilation was produced from."""
        ...  # pragma: no cover


class DiagnosticSink(Protocol):
    """Accumulator of warnings and errors raised by the engine."""

    def flush(self) -> None:
        """Emit every accumulated message, then forget them."""
        ...  # pragma: no cover


class Environment(Protocol):
    """Runtime context of one pipeline run.

    ``compilations`` is filled by :meth:`Engine.compile` as a side
    effect; ``meta`` is seeded by the environment builder.
    """

    @property
    def meta(self) -> MutableMapping[Any, Any]:
        ...  # pragma: no cover

    @property
    def diagnostic(self) -> DiagnosticSink:
        ...  # pragma: no cover

    @property
    def compilations(self) -> Sequence[Compilation]:
        ...  # pragma: no cover


class Engine(Protocol):
    """Contract for template engines.

    Any object that implements :meth:`compile` and :meth:`execute` with
    the correct signatures satisfies this protocol structurally (no
    explicit inheritance required).  Failures are reported through the
    boolean result and the environment's diagnostic sink; engines
    must not raise for template errors.
    """

    def compile(self, environment: Environment, documents: Sequence[Document]) -> bool:
        """Compile *documents* together, recording results in *environment*.

        Returns
        -------
        bool
            ``True`` when every document compiled cleanly.
        """
        ...  # pragma: no cover

    def execute(self, environment: Environment, compilations: Sequence[Compilation]) -> bool:
        """Run *compilations*, writing their output below ``Meta.OUTPUT``.

        Returns
        -------
        bool
            ``True`` when every compilation executed cleanly.
        """
        ...  # pragma: no cover


class DocumentResolver(Protocol):
    """Callable turning the input path into an ordered document hierarchy.

    Raises
    ------
    DocumentResolutionError
        When *root* yields no documents.
    """

    def __call__(self, root: Path) -> Sequence[Document]:
        ...  # pragma: no cover


class EnvironmentFactory(Protocol):
    """Zero-argument callable producing a fresh :class:`Environment`."""

    def __call__(self) -> Environment:
        ...  # pragma: no cover
