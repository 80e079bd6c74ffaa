"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from jamplate_cli.exceptions import EnvironmentError
from jamplate_cli.infra.environment import DiagnosticLevel, DiagnosticMessage

LOG_FORMAT: str = "%(name)s: %(message)s"

_LEVEL_STYLES: dict[DiagnosticLevel, str] = {
	DiagnosticLevel.NOTE: "cyan",
	DiagnosticLevel.WARNING: "yellow",
	DiagnosticLevel.ERROR: "bold red",
}


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr.

	Emoji codes and hard wrapping are off so engine messages and
	user-supplied tokens are printed verbatim.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, emoji=False, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def write_diagnostic(message: DiagnosticMessage) -> None:
	"""Writer for :class:`~jamplate_cli.infra.environment.StreamDiagnostic`."""
	style = _LEVEL_STYLES[message.level]
	try:
		rich_console = get_rich_console()
	except EnvironmentError:
		print(str(message), file=sys.stderr)
		return
	from rich.markup import escape

	rich_console.print(
		f"[{style}]{message.level.value}:[/{style}] {escape(message.text)}",
		markup=True,
		highlight=False,
	)


def configure_logging(level: int = logging.WARNING) -> None:
	"""Attach a stderr handler to the ``jamplate_cli`` logger.

	Uses ``rich.logging.RichHandler`` when Rich is importable.  Calling
	this more than once replaces the previously installed handler.
	"""
	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(f"%(levelname)s {LOG_FORMAT}"))
	else:
		handler = RichHandler(console=get_rich_console(), show_time=False, show_path=False)
		handler.setFormatter(logging.Formatter(LOG_FORMAT))

	package_logger = logging.getLogger("jamplate_cli")
	for existing in list(package_logger.handlers):
		package_logger.removeHandler(existing)
	package_logger.addHandler(handler)
	package_logger.setLevel(level)


def escape_markup(text: str) -> str:
	"""Escape Rich markup in user-supplied *text* (identity without Rich)."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)
