"""Plain-text writers.

:func:`write_text` persists a string verbatim, creating parent directories as
needed.  :func:`format_game` lays a game out as numbered rounds; hidden
creatures show ``???`` in place of their name.  :func:`write_game_txt` writes
that layout to disk.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from whosthat.game.entity import Entity

PathLikeStr = os.PathLike[str]

HIDDEN_NAME = "???"


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` exactly as provided."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


def display_name(name: str) -> str:
    return name.replace("-", " ").title()


def format_entity(entity: Entity, *, reveal: bool = False) -> list[str]:
    shown = entity.revealed or reveal
    title = display_name(entity.name) if shown else HIDDEN_NAME
    lines = [f"  [{entity.id}] {title}", f"      {entity.flavor_text or '(no description)'}"]
    if shown and entity.sprite_url:
        lines.append(f"      {entity.sprite_url}")
    return lines


def format_game(rounds: Sequence[Sequence[Entity]], *, reveal: bool = False) -> str:
    lines: list[str] = []
    for number, group in enumerate(rounds, 1):
        if lines:
            lines.append("")
        lines.append(f"Round {number}")
        for entity in group:
            lines.extend(format_entity(entity, reveal=reveal))
    return "\n".join(lines) + "\n" if lines else ""


def write_game_txt(
    path: str | PathLikeStr, rounds: Sequence[Sequence[Entity]], *, reveal: bool = False
) -> None:
    write_text(path, format_game(rounds, reveal=reveal))


__all__ = ["display_name", "format_entity", "format_game", "write_game_txt", "write_text"]
