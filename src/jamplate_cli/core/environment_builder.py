"""Environment construction from a parsed invocation.

Resolves the input and output locations, discovers the document
hierarchy, and seeds a fresh environment with the three metadata
entries the engine reads (:class:`~jamplate_cli.core.models.Meta`).

The resolver and the environment factory are injected so that the core
stays free of filesystem access.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jamplate_cli.core.models import Invocation, Meta, PreparedRun
from jamplate_cli.core.protocols import DocumentResolver, EnvironmentFactory
from jamplate_cli.exceptions import DocumentResolutionError

logger = logging.getLogger(__name__)


def build_environment(
    invocation: Invocation,
    *,
    resolver: DocumentResolver,
    environment_factory: EnvironmentFactory,
) -> PreparedRun:
    """Prepare an environment for *invocation*.

    The memory mapping is copied into a plain ``dict`` so the engine may
    extend it without touching the invocation.

    Raises
    ------
    DocumentResolutionError
        If the resolver finds no documents below the input path.
    """
    project = Path(invocation.input)
    output = Path(invocation.output)

    documents = tuple(resolver(project))
    if not documents:
        raise DocumentResolutionError(f"No documents found at: {project}")
    logger.debug("Resolved %d document(s) from %s", len(documents), project)

    environment = environment_factory()
    environment.meta[Meta.MEMORY] = dict(invocation.default_memory)
    environment.meta[Meta.PROJECT] = project
    environment.meta[Meta.OUTPUT] = output

    return PreparedRun(environment=environment, documents=documents)
