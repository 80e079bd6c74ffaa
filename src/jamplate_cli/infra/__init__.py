"""Infrastructure layer: filesystem, default environment, engine plugins.

Every raw ``OSError`` or plugin import failure must be caught here and
re-raised as a :class:`~jamplate_cli.exceptions.JamplateCliError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from jamplate_cli.infra.engine_loader import ENGINE_GROUP, load_engine
from jamplate_cli.infra.environment import (
    DiagnosticLevel,
    DiagnosticMessage,
    RuntimeEnvironment,
    StreamDiagnostic,
)
from jamplate_cli.infra.file_document import FileDocument, resolve_file_hierarchy

__all__: list[str] = [
    "ENGINE_GROUP",
    "DiagnosticLevel",
    "DiagnosticMessage",
    "FileDocument",
    "RuntimeEnvironment",
    "StreamDiagnostic",
    "load_engine",
    "resolve_file_hierarchy",
]
