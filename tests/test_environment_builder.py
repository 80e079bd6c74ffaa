"""Tests for environment construction (core/environment_builder.py).

The resolver and environment factory are mocked: no filesystem access.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from unittest.mock import MagicMock

import pytest

from jamplate_cli.core.environment_builder import build_environment
from jamplate_cli.core.models import Invocation, Meta
from jamplate_cli.exceptions import DocumentResolutionError
from jamplate_cli.infra.environment import RuntimeEnvironment, StreamDiagnostic


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _environment() -> RuntimeEnvironment:
    return RuntimeEnvironment(diagnostic=StreamDiagnostic(MagicMock()))


def _invocation(**overrides: object) -> Invocation:
    defaults: dict[str, object] = {
        "input": "project",
        "output": "out",
        "default_memory": MappingProxyType({"K": "V"}),
    }
    defaults.update(overrides)
    return Invocation(**defaults)  # type: ignore[arg-type]


def _resolver(*names: str) -> MagicMock:
    resolver = MagicMock()
    resolver.return_value = [MagicMock(display_name=name) for name in names]
    return resolver


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class TestMetadata:
    def test_all_three_keys_written(self) -> None:
        prepared = build_environment(
            _invocation(),
            resolver=_resolver("project/a.jamplate"),
            environment_factory=_environment,
        )
        meta = prepared.environment.meta
        assert meta[Meta.MEMORY] == {"K": "V"}
        assert meta[Meta.PROJECT] == Path("project")
        assert meta[Meta.OUTPUT] == Path("out")

    def test_memory_is_a_mutable_copy(self) -> None:
        invocation = _invocation()
        prepared = build_environment(
            invocation,
            resolver=_resolver("a.jamplate"),
            environment_factory=_environment,
        )
        memory = prepared.environment.meta[Meta.MEMORY]
        memory["extra"] = "x"
        assert "extra" not in invocation.default_memory

    def test_no_compilation_yet(self) -> None:
        prepared = build_environment(
            _invocation(),
            resolver=_resolver("a.jamplate"),
            environment_factory=_environment,
        )
        assert list(prepared.environment.compilations) == []

    def test_fresh_environment_per_call(self) -> None:
        factory = MagicMock(side_effect=_environment)
        first = build_environment(_invocation(), resolver=_resolver("a"), environment_factory=factory)
        second = build_environment(_invocation(), resolver=_resolver("a"), environment_factory=factory)
        assert factory.call_count == 2
        assert first.environment is not second.environment


# ---------------------------------------------------------------------------
# Document hierarchy
# ---------------------------------------------------------------------------

class TestDocuments:
    def test_resolver_receives_input_path(self) -> None:
        resolver = _resolver("a.jamplate")
        build_environment(_invocation(input="src"), resolver=resolver, environment_factory=_environment)
        resolver.assert_called_once_with(Path("src"))

    def test_documents_keep_resolver_order(self) -> None:
        prepared = build_environment(
            _invocation(),
            resolver=_resolver("b.inc", "a.jamplate"),
            environment_factory=_environment,
        )
        assert isinstance(prepared.documents, tuple)
        assert [doc.display_name for doc in prepared.documents] == ["b.inc", "a.jamplate"]

    def test_empty_hierarchy_raises(self) -> None:
        factory = MagicMock(side_effect=_environment)
        with pytest.raises(DocumentResolutionError, match="No documents"):
            build_environment(_invocation(), resolver=_resolver(), environment_factory=factory)
        factory.assert_not_called()

    def test_resolver_errors_propagate(self) -> None:
        resolver = MagicMock(side_effect=DocumentResolutionError("Input not found: x"))
        with pytest.raises(DocumentResolutionError, match="Input not found"):
            build_environment(_invocation(), resolver=resolver, environment_factory=_environment)
