"""Extension based registry for file I/O.

Two registries are kept: name-list readers (``.txt`` and ``.json``) used to
build a banned-word set offline, and game writers (``.txt`` and ``.json``)
used to export generated rounds.  Dispatch is on the lower-cased file
extension.

``UnsupportedFormatError`` is raised when a path's extension has no
registered handler.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Callable

from ..game.entity import Entity
from ..utils.errors import UnsupportedFormatError
from .readers.json_reader import read_names_json
from .readers.txt_reader import read_names_txt, read_text
from .writers.json_writer import write_game_json
from .writers.txt_writer import format_game, write_game_txt, write_text

NamesReader = Callable[..., list[str]]
GameWriter = Callable[..., None]

_NAME_READERS: dict[str, NamesReader] = {}
_GAME_WRITERS: dict[str, GameWriter] = {}


def register_names_reader(ext: str, func: NamesReader) -> None:
    """Register a name-list reader for files ending with ``ext`` (e.g. ``".txt"``)."""

    _NAME_READERS[ext.lower()] = func


def register_game_writer(ext: str, func: GameWriter) -> None:
    """Register a game writer for files ending with ``ext``."""

    _GAME_WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def read_names(path: str | os.PathLike[str], **kwargs: Any) -> list[str]:
    """Read a name list using the reader registered for the extension of ``path``.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _NAME_READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def write_game(
    path: str | os.PathLike[str], rounds: Sequence[Sequence[Entity]], **kwargs: Any
) -> None:
    """Export ``rounds`` using the writer registered for the extension of ``path``.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _GAME_WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, rounds, **kwargs)


register_names_reader(".txt", read_names_txt)
register_names_reader(".json", read_names_json)
register_game_writer(".txt", write_game_txt)
register_game_writer(".json", write_game_json)

__all__ = [
    "GameWriter",
    "NamesReader",
    "format_game",
    "get_extension",
    "read_names",
    "read_text",
    "register_game_writer",
    "register_names_reader",
    "write_game",
    "write_text",
]
