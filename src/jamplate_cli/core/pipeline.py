"""Core pipeline: drives the engine through compile, then execute.

Compilation is global: every discovered document is compiled together
so cross-document references resolve.  Execution is scoped to the
top-level template units only (documents ending in
:data:`TEMPLATE_SUFFIX`); included documents are compiled as
dependencies but never executed on their own.

State machine
-------------
``READY → COMPILED → EXECUTED``, with terminal failure states
``COMPILE_FAILED`` and ``EXECUTE_FAILED``.  Engine failures never raise
out of :meth:`Pipeline.run`; the caller inspects the returned state.

Guarantees
----------
* Pure orchestration: no ``print()``; user messages go through the
  injected ``on_error`` callback.
* The diagnostic sink is flushed exactly once per run.
* ``execute`` is never invoked after a failed ``compile``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from jamplate_cli.core.models import PipelineState, PreparedRun
from jamplate_cli.core.protocols import Compilation, Engine
from jamplate_cli.exceptions import PipelineStateError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX: str = ".jamplate"

COMPILATION_ERROR_MESSAGE: str = "Compilation Error"
RUNTIME_ERROR_MESSAGE: str = "Runtime Error"


def select_template_compilations(
    compilations: Iterable[Compilation],
    suffix: str = TEMPLATE_SUFFIX,
) -> list[Compilation]:
    """Return, in order, the compilations whose root document is a template.

    The match is an exact, case-sensitive suffix test on the root
    document's display name.
    """
    return [
        compilation
        for compilation in compilations
        if compilation.root_document.display_name.endswith(suffix)
    ]


class Pipeline:
    """Single-use compile → execute run over a prepared environment.

    Parameters
    ----------
    engine:
        Any object satisfying the :class:`Engine` protocol.
    prepared:
        The environment and documents produced by the environment builder.
    on_error:
        Optional callable receiving the user-facing failure headline
        (``"Compilation Error"`` or ``"Runtime Error"``) before the
        diagnostics are flushed.
    """

    def __init__(
        self,
        engine: Engine,
        prepared: PreparedRun,
        *,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self._engine: Engine = engine
        self._prepared: PreparedRun = prepared
        self._on_error: Callable[[str], None] | None = on_error
        self._state: PipelineState = PipelineState.READY

    @property
    def state(self) -> PipelineState:
        return self._state

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> PipelineState:
        """Compile every document, then execute the template units.

        Returns
        -------
        PipelineState
            One of the terminal states.

        Raises
        ------
        PipelineStateError
            If this pipeline has already run.
        """
        if self._state is not PipelineState.READY:
            raise PipelineStateError(
                f"Pipeline already ran (state: {self._state.value}).",
            )

        environment = self._prepared.environment

        if not self._engine.compile(environment, self._prepared.documents):
            return self._fail(PipelineState.COMPILE_FAILED, COMPILATION_ERROR_MESSAGE)
        self._transition(PipelineState.COMPILED)

        templates = select_template_compilations(environment.compilations)
        if not templates:
            logger.warning("No %s units to execute.", TEMPLATE_SUFFIX)

        if not self._engine.execute(environment, templates):
            return self._fail(PipelineState.EXECUTE_FAILED, RUNTIME_ERROR_MESSAGE)
        self._transition(PipelineState.EXECUTED)

        environment.diagnostic.flush()
        return self._state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _transition(self, state: PipelineState) -> None:
        logger.debug("Pipeline %s -> %s", self._state.value, state.value)
        self._state = state

    def _fail(self, state: PipelineState, message: str) -> PipelineState:
        self._transition(state)
        if self._on_error is not None:
            self._on_error(message)
        self._prepared.environment.diagnostic.flush()
        return self._state
