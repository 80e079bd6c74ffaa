"""Infrastructure: template engine discovery.

The compiler and executor ship separately from this CLI.  An engine
package advertises itself under the ``jamplate.engines`` entry-point
group::

    [project.entry-points."jamplate.engines"]
    default = "my_engine:Engine"

This module is the **only** place that touches
:mod:`importlib.metadata`.  Import failures inside a plugin are caught
here and re-raised as :class:`~jamplate_cli.exceptions.EngineNotFoundError`.
"""

from __future__ import annotations

import logging
from importlib.metadata import EntryPoint, entry_points
from typing import Any

from jamplate_cli.core.protocols import Engine
from jamplate_cli.exceptions import EngineNotFoundError

logger = logging.getLogger(__name__)

ENGINE_GROUP: str = "jamplate.engines"

_INSTALL_HINT: str = (
    "Install a Jamplate engine package that registers a "
    f"'{ENGINE_GROUP}' entry point."
)


def _engine_entry_points() -> list[EntryPoint]:
    """Return the registered engine entry points, sorted by name."""
    return sorted(entry_points(group=ENGINE_GROUP), key=lambda ep: ep.name)


def load_engine() -> Engine:
    """Load and instantiate the first registered engine.

    A class is instantiated with no arguments; any other object is
    returned as-is.

    Raises
    ------
    EngineNotFoundError
        When no engine is registered, or the registered one cannot be
        imported.
    """
    candidates = _engine_entry_points()
    if not candidates:
        raise EngineNotFoundError("No Jamplate engine is installed.", hint=_INSTALL_HINT)

    entry_point = candidates[0]
    if len(candidates) > 1:
        logger.debug(
            "Several engines registered (%s); using %r",
            ", ".join(ep.name for ep in candidates),
            entry_point.name,
        )

    try:
        loaded: Any = entry_point.load()
    except Exception as exc:
        raise EngineNotFoundError(
            f"Cannot load engine {entry_point.name!r} ({entry_point.value}): {exc}",
            hint=_INSTALL_HINT,
        ) from exc

    engine = loaded() if isinstance(loaded, type) else loaded
    logger.debug("Loaded engine %r from %s", entry_point.name, entry_point.value)
    return engine
