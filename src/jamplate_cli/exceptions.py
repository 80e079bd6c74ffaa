"""Custom exception hierarchy for jamplate-cli.

All exceptions that cross layer boundaries must inherit from
:class:`JamplateCliError`.  Compile and execute failures are *not*
exceptions: the engine reports them through its boolean result and the
diagnostic sink, and the pipeline turns them into terminal states.

Hierarchy
---------
JamplateCliError
├── ArgumentError
│   ├── NoInputError
│   └── UnknownOptionError
├── DocumentResolutionError
├── DocumentReadError
├── EnvironmentError
│   └── EngineNotFoundError
└── PipelineStateError
"""

from __future__ import annotations


class JamplateCliError(Exception):
    """Base exception for all jamplate-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class ArgumentError(JamplateCliError):
    """Raised when the command line cannot be turned into an invocation."""


class NoInputError(ArgumentError):
    """Raised when no input path was given."""

    def __init__(self) -> None:
        super().__init__(
            "No input specified!",
            hint="Pass the template file or project directory as the first argument.",
        )


class UnknownOptionError(ArgumentError):
    """Raised on an option token that is neither ``key=value`` nor ``-o``."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Unknown option: {option}")
        self.option: str = option
        """The offending token, verbatim."""


# --- Documents -------------------------------------------------------------

class DocumentResolutionError(JamplateCliError):
    """Raised when no document hierarchy can be built from the input path."""


class DocumentReadError(JamplateCliError):
    """Raised when a document's content cannot be read."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(JamplateCliError):
    """Raised when a required runtime dependency is not available."""


class EngineNotFoundError(EnvironmentError):
    """Raised when no template engine plugin is installed or loadable."""


# --- Pipeline --------------------------------------------------------------

class PipelineStateError(JamplateCliError):
    """Raised when a pipeline is driven out of its ``READY`` state twice."""
