"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  The
argument, compilation and runtime codes follow the BSD ``sysexits.h``
convention.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: both pipeline phases completed without error."""

GENERAL_ERROR: int = 1
"""A known JamplateCliError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

ARGUMENT_ERROR: int = 64
"""The command line was rejected (``EX_USAGE``)."""

COMPILATION_ERROR: int = 65
"""The engine failed to compile the documents (``EX_DATAERR``)."""

RUNTIME_ERROR: int = 70
"""The engine failed while executing the templates (``EX_SOFTWARE``)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
