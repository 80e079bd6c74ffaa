"""CLI application entry point for jamplate-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~jamplate_cli.exceptions.JamplateCliError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here: parsing, environment construction and
  the pipeline all live in the core layer.
* ``print()`` is forbidden outside the CLI layer; the Rich console is
  used exclusively.
* This module is the only place that translates between the domain
  world (terminal :class:`~jamplate_cli.core.models.PipelineState`) and
  the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from jamplate_cli.cli import exit_codes
from jamplate_cli.cli.console import (
    configure_logging,
    console,
    escape_markup,
    write_diagnostic,
)
from jamplate_cli.core.arguments import parse_arguments
from jamplate_cli.core.environment_builder import build_environment
from jamplate_cli.core.models import Invocation, PipelineState
from jamplate_cli.core.pipeline import Pipeline
from jamplate_cli.core.protocols import Engine
from jamplate_cli.exceptions import ArgumentError, JamplateCliError
from jamplate_cli.infra.environment import RuntimeEnvironment, StreamDiagnostic
from jamplate_cli.infra.file_document import resolve_file_hierarchy
from jamplate_cli.version import __version__

_BOOTSTRAP_FLAGS: frozenset[str] = frozenset({"-h", "--help", "-V", "--version"})

_STATE_EXIT_CODES: dict[PipelineState, int] = {
    PipelineState.EXECUTED: exit_codes.SUCCESS,
    PipelineState.COMPILE_FAILED: exit_codes.COMPILATION_ERROR,
    PipelineState.EXECUTE_FAILED: exit_codes.RUNTIME_ERROR,
}


# ---------------------------------------------------------------------------
# Argument parser (help and version only)
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the parser used for ``--help``, ``--version`` and usage text.

    The run grammar itself is positional and handled by
    :func:`~jamplate_cli.core.arguments.parse_arguments`; argparse only
    sees the command line when it *starts* with one of its flags.
    """
    parser = argparse.ArgumentParser(
        prog="jamplate",
        usage="%(prog)s <input> [<key>=<value> ...] [-o <output>]",
        description="Compile and execute Jamplate templates.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Template file or project directory.",
    )
    parser.add_argument(
        "memory",
        nargs="*",
        metavar="<key>=<value>",
        help="Default memory entry exposed to the templates. Repeatable.",
    )
    parser.add_argument(
        "-o",
        dest="output",
        metavar="<output>",
        help="Output directory (default: output).",
    )
    return parser


def _leading_token(tokens: Sequence[str | None]) -> str | None:
    return next((token for token in tokens if token), None)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _new_environment() -> RuntimeEnvironment:
    return RuntimeEnvironment(diagnostic=StreamDiagnostic(write_diagnostic))


def _report_failure(message: str) -> None:
    console.print(f"[bold red]{message}[/bold red]")


def _handle_run(invocation: Invocation, engine: Engine | None) -> int:
    """Run the compile → execute pipeline for *invocation*.

    Flow:
    1. Resolve the document hierarchy and seed the environment.
    2. Locate the engine (unless one was injected).
    3. Compile, filter the template units, execute.
    """
    prepared = build_environment(
        invocation,
        resolver=resolve_file_hierarchy,
        environment_factory=_new_environment,
    )

    if engine is None:
        from jamplate_cli.infra.engine_loader import load_engine

        engine = load_engine()

    state = Pipeline(engine, prepared, on_error=_report_failure).run()
    return _STATE_EXIT_CODES[state]


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str | None] | None = None,
    *,
    engine: Engine | None = None,
) -> int:
    """Run the jamplate CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    engine:
        Engine to drive.  When ``None``, the installed engine plugin is
        discovered through its entry point.

    Returns
    -------
    int
        OS process exit code.
    """
    tokens: list[str | None] = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()

    leading = _leading_token(tokens)
    if leading in _BOOTSTRAP_FLAGS:
        # argparse prints help or version and raises SystemExit(0).
        parser.parse_args([leading])

    try:
        invocation = parse_arguments(tokens)
    except ArgumentError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        console.print(escape_markup(parser.format_usage().rstrip()))
        return exit_codes.ARGUMENT_ERROR

    return _handle_run(invocation, engine)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    configure_logging()
    try:
        code = main()
        sys.exit(code)
    except JamplateCliError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
