"""Small helpers for preparing result folders and writing result vectors."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from pathlib import Path


def get_files(folder_path: str | os.PathLike[str], ext: str) -> list[str]:
    """Names of the regular files in folder_path whose suffix equals ext (e.g. ".txt")."""
    with os.scandir(folder_path) as entries:
        return sorted(
            entry.name
            for entry in entries
            if entry.is_file() and Path(entry.name).suffix == ext
        )


def check_for_directories(
    folder_path: str | os.PathLike[str], directories: Iterable[str]
) -> list[str]:
    """Create each folder_path + name that does not exist yet.

    The names are appended to folder_path as plain text, so they usually
    start with a path separator. Returns the paths that were created.
    """
    created = []
    base = os.fspath(folder_path)
    for name in directories:
        path = base + name
        if not os.path.exists(path):
            os.mkdir(path)
            print(f"Directory {name} has been created in {path}")
            created.append(path)
    return created


def check_for_file(path: str | os.PathLike[str]) -> bool:
    """Create an empty file at path unless something exists there already.

    Returns True when the file was created.
    """
    if os.path.exists(path):
        return False
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError:
        print(f"Failed to create file in {os.fspath(path)}", file=sys.stderr)
        raise
    print(f"File has been created in {os.fspath(path)}")
    return True


def _format_value(value: object) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def write_vector_file(filename: str | os.PathLike[str], data: Iterable[object]) -> None:
    """Write the number of values, a blank line, then one value per line."""
    values = list(data)
    with open(filename, "w", encoding="utf-8") as out:
        out.write(f"{len(values)}\n\n")
        for value in values:
            out.write(f"{_format_value(value)}\n")
    print(f"File has been written: {os.fspath(filename)}")