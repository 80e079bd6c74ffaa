"""Core layer: argument interpretation and pipeline orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O; documents and environments arrive through
  injected protocols.
* No imports from ``cli`` or ``infra``.
"""

from jamplate_cli.core.arguments import parse_arguments
from jamplate_cli.core.environment_builder import build_environment
from jamplate_cli.core.models import (
    DEFAULT_OUTPUT,
    Invocation,
    Meta,
    PipelineState,
    PreparedRun,
)
from jamplate_cli.core.pipeline import TEMPLATE_SUFFIX, Pipeline, select_template_compilations
from jamplate_cli.core.protocols import (
    Compilation,
    DiagnosticSink,
    Document,
    DocumentResolver,
    Engine,
    Environment,
    EnvironmentFactory,
)

__all__: list[str] = [
    "DEFAULT_OUTPUT",
    "TEMPLATE_SUFFIX",
    "Compilation",
    "DiagnosticSink",
    "Document",
    "DocumentResolver",
    "Engine",
    "Environment",
    "EnvironmentFactory",
    "Invocation",
    "Meta",
    "Pipeline",
    "PipelineState",
    "PreparedRun",
    "build_environment",
    "parse_arguments",
    "select_template_compilations",
]
