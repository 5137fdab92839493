"""Filesystem scanning for the directory browser.

Only immediate subdirectories are reported; files are skipped. Symlinks
that point at directories count as directories.
"""

from __future__ import annotations

import os
from pathlib import Path


class DirectoryListError(OSError):
    """Raised when a directory cannot be scanned."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(cause.errno, cause.strerror or str(cause), str(path))
        self.path = path
        self.cause = cause


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def canonical_path(path: Path | str) -> Path:
    """Return ``path`` expanded and resolved to an absolute, normalized form."""
    return Path(path).expanduser().resolve()


def list_subdirectories(directory: Path, show_hidden: bool) -> list[str]:
    """Return subdirectory names of ``directory`` sorted case-insensitively.

    Dot-prefixed names are omitted unless ``show_hidden``. Raises
    ``DirectoryListError`` when the directory itself cannot be read; entries
    whose type cannot be determined are skipped.
    """
    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and is_hidden_name(name):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=True)
                except OSError:
                    is_dir = False
                if is_dir:
                    names.append(name)
    except OSError as exc:
        raise DirectoryListError(directory, exc) from exc

    names.sort(key=lambda name: (name.lower(), name))
    return names


__all__ = [
    "DirectoryListError",
    "canonical_path",
    "is_hidden_name",
    "list_subdirectories",
]
