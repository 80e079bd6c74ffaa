"""Infrastructure: filesystem-backed documents and hierarchy discovery.

A single file resolves to itself; a directory resolves to every regular
file below it.  The order is sorted by path so that repeated runs over
the same tree compile documents in the same order.

Rules
-----
* Read-only: nothing here creates, moves or deletes files.
* ``OSError`` never escapes; it is re-raised as a typed
  :class:`~jamplate_cli.exceptions.JamplateCliError` subclass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jamplate_cli.exceptions import DocumentReadError, DocumentResolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileDocument:
    """A document whose content lives in a file on disk."""

    path: Path

    @property
    def display_name(self) -> str:
        """POSIX form of the path, so suffix checks are platform-neutral."""
        return self.path.as_posix()

    def read_text(self, encoding: str = "utf-8") -> str:
        """Return the file content.

        Raises
        ------
        DocumentReadError
            If the file cannot be read or decoded.
        """
        try:
            return self.path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(
                f"Cannot read document: {self.display_name}",
                hint=str(exc),
            ) from exc

    def __str__(self) -> str:
        return self.display_name


def resolve_file_hierarchy(root: Path) -> tuple[FileDocument, ...]:
    """Discover the documents rooted at *root*.

    Raises
    ------
    DocumentResolutionError
        If *root* does not exist, or is a directory with no files.
    """
    if root.is_file():
        return (FileDocument(root),)

    if not root.is_dir():
        raise DocumentResolutionError(
            f"Input not found: {root}",
            hint="Pass an existing template file or project directory.",
        )

    try:
        files = sorted(path for path in root.rglob("*") if path.is_file())
    except OSError as exc:
        raise DocumentResolutionError(f"Cannot scan directory: {root}") from exc

    if not files:
        raise DocumentResolutionError(f"No documents found in: {root}")

    logger.debug("Discovered %d file(s) below %s", len(files), root)
    return tuple(FileDocument(path) for path in files)
