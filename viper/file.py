"""Small filesystem helpers."""

from __future__ import annotations

import os
from typing import List


def get_current_directory() -> str:
    """Return the working directory, or an empty string if it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        return ""


def set_current_directory(path: str) -> None:
    """Change the working directory; raises OSError on failure."""
    os.chdir(path)


def get_extension(path: str) -> str:
    """Return the extension including its dot, or an empty string."""
    name = os.path.basename(path)
    if name in ("", ".", ".."):
        return ""
    index = name.rfind(".")
    if index <= 0:
        return ""
    return name[index:]


def get_filename(path: str) -> str:
    return os.path.basename(path)


def exists(path: str) -> bool:
    return os.path.exists(path)


def _entries(path: str, want_dirs: bool) -> List[str]:
    try:
        with os.scandir(path) as it:
            found = []
            for entry in it:
                try:
                    if entry.is_dir() if want_dirs else entry.is_file():
                        found.append(entry.path)
                except OSError:
                    continue
    except OSError:
        return []
    return sorted(found)


def get_files_in_directory(path: str) -> List[str]:
    """Regular files directly inside ``path``; empty if it cannot be read."""
    return _entries(path, want_dirs=False)


def get_directories_in(path: str) -> List[str]:
    """Directories directly inside ``path``; empty if it cannot be read."""
    return _entries(path, want_dirs=True)


def read_text_file(path: str) -> str:
    """Return the whole content of a text file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text_file(path: str, content: str, append: bool = False) -> None:
    """Write ``content`` to ``path``, replacing it unless ``append`` is set."""
    with open(path, "a" if append else "w", encoding="utf-8", newline="") as handle:
        handle.write(content)