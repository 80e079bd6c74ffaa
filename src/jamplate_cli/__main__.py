"""Allow ``python -m jamplate_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m jamplate_cli`` behaves identically to the ``jamplate``
console script.
"""

from __future__ import annotations

from jamplate_cli.cli.app import cli

if __name__ == "__main__":
    cli()
