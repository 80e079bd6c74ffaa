"""jamplate-cli: command-line driver for the Jamplate template engine.

Parses the invocation, prepares the runtime environment and runs the
compile → execute pipeline of the installed engine.
"""

from jamplate_cli.version import __version__

__all__: list[str] = ["__version__"]
