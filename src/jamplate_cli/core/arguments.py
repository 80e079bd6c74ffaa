"""Pure command-line interpretation.

Turns the raw token sequence into an :class:`~jamplate_cli.core.models.Invocation`.
The grammar is positional and deliberately tiny::

    <input> [<key>=<value> ...] [-o <output>]

Rules
-----
* ``None`` and ``""`` are placeholder tokens and are skipped everywhere.
* The first real token is the input path, whatever it looks like.
* ``key=value`` splits at the first ``=``; the value may be empty and
  later keys overwrite earlier ones.
* ``-o`` takes the next real token as the output path.  A trailing
  ``-o`` leaves the output untouched.
* Anything else is an unknown option.

Every function in this module is a **pure** transformation: no I/O,
no side effects, fully deterministic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from types import MappingProxyType

from jamplate_cli.core.models import DEFAULT_OUTPUT, Invocation
from jamplate_cli.exceptions import NoInputError, UnknownOptionError

logger = logging.getLogger(__name__)

OUTPUT_OPTION: str = "-o"
MEMORY_DELIMITER: str = "="


def _real_tokens(tokens: Iterable[str | None]) -> Iterator[str]:
    """Yield the tokens that are not placeholders."""
    for token in tokens:
        if token:
            yield token


def split_memory_option(option: str) -> tuple[str, str] | None:
    """Split ``key=value`` at the first delimiter.

    Returns ``None`` when *option* holds no delimiter.

    >>> split_memory_option("a=b=c")
    ('a', 'b=c')
    """
    key, delimiter, value = option.partition(MEMORY_DELIMITER)
    if not delimiter:
        return None
    return key, value


def parse_arguments(tokens: Sequence[str | None]) -> Invocation:
    """Interpret *tokens* (typically ``sys.argv[1:]``).

    Raises
    ------
    NoInputError
        If *tokens* holds no real token.
    UnknownOptionError
        On the first option that is neither ``key=value`` nor ``-o``.
    """
    stream = _real_tokens(tokens)

    input_path = next(stream, None)
    if input_path is None:
        raise NoInputError()

    output = DEFAULT_OUTPUT
    memory: dict[str, str] = {}

    for option in stream:
        pair = split_memory_option(option)
        if pair is not None:
            key, value = pair
            memory[key] = value
            continue

        if option == OUTPUT_OPTION:
            output = next(stream, output)
            continue

        raise UnknownOptionError(option)

    invocation = Invocation(
        input=input_path,
        output=output,
        default_memory=MappingProxyType(memory),
    )
    logger.debug("Parsed invocation: %r", invocation)
    return invocation
