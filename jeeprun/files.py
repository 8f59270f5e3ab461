"""Helpers for reading resource files."""

from __future__ import annotations

import os


def load_text_file(filename: str | os.PathLike[str]) -> str:
    """Read a text file, returning its lines each terminated by a newline."""
    try:
        handle = open(filename, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Error opening file {os.fspath(filename)}") from exc
    with handle:
        return "".join(
            line if line.endswith("\n") else line + "\n" for line in handle
        )