"""Plain-text readers.

:func:`read_text` loads a file verbatim: newlines are preserved and a UTF-8
byte-order mark is consumed by the default ``"utf-8-sig"`` codec.
:func:`read_names_txt` reads a name list with one name per line, skipping
blank lines and ``#`` comments.  ``FileNotFoundError`` and other I/O errors
propagate to the caller.
"""

from __future__ import annotations

import os

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text file without newline translation."""

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


def read_names_txt(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> list[str]:
    """Return the names listed in ``path``, one per line."""

    names: list[str] = []
    for line in read_text(path, encoding=encoding).splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            names.append(line)
    return names


__all__ = ["read_names_txt", "read_text"]
