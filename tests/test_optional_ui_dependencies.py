"""Regression tests for the optional Rich dependency.

These tests verify bootstrap commands and the whole pipeline keep
working with plain stderr output when Rich is missing.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from jamplate_cli.cli import exit_codes
from jamplate_cli.cli.app import main
from jamplate_cli.cli.console import configure_logging, escape_markup


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def _failing_engine() -> MagicMock:
    engine = MagicMock()

    def _compile(environment: object, documents: object) -> bool:
        environment.diagnostic.report("unexpected token")  # type: ignore[attr-defined]
        return False

    engine.compile.side_effect = _compile
    return engine


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_argument_error_prints_plain_text(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["a", "-x"]) == exit_codes.ARGUMENT_ERROR
    assert "Unknown option: -x" in capsys.readouterr().err


def test_compile_failure_prints_plain_diagnostics(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    template = tmp_path / "a.jamplate"
    template.write_text("", encoding="utf-8")

    code = main([str(template)], engine=_failing_engine())
    err = capsys.readouterr().err

    assert code == exit_codes.COMPILATION_ERROR
    assert "Compilation Error" in err
    assert "error: unexpected token" in err


def test_escape_markup_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert escape_markup("[bold]x[/bold]") == "[bold]x[/bold]"


def test_configure_logging_falls_back_to_stream_handler(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)

    configure_logging(logging.DEBUG)
    package_logger = logging.getLogger("jamplate_cli")
    assert len(package_logger.handlers) == 1
    assert type(package_logger.handlers[0]) is logging.StreamHandler
    assert package_logger.level == logging.DEBUG


def test_configure_logging_uses_rich_handler() -> None:
    from rich.logging import RichHandler

    configure_logging()
    configure_logging()
    handlers = logging.getLogger("jamplate_cli").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
