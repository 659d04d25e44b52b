"""JSON game export.

The document is ``{"rounds": [[entity, ...], ...]}`` where each entity holds
``id``, ``flavor_text``, ``sprite_url``, ``revealed`` and, only when revealed
(or when ``reveal=True``), ``name``.  Hidden names are omitted rather than
blanked so an exported quiz does not leak answers.
"""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from dataclasses import asdict
from typing import Any

from whosthat.game.entity import Entity

from .txt_writer import write_text

PathLikeStr = os.PathLike[str]


def entity_to_dict(entity: Entity, *, reveal: bool = False) -> dict[str, Any]:
    data = asdict(entity)
    if not (entity.revealed or reveal):
        del data["name"]
    return data


def game_to_dict(rounds: Sequence[Sequence[Entity]], *, reveal: bool = False) -> dict[str, Any]:
    return {"rounds": [[entity_to_dict(e, reveal=reveal) for e in group] for group in rounds]}


def write_game_json(
    path: str | PathLikeStr, rounds: Sequence[Sequence[Entity]], *, reveal: bool = False
) -> None:
    text = json.dumps(game_to_dict(rounds, reveal=reveal), indent=2, ensure_ascii=False)
    write_text(path, text + "\n")


__all__ = ["entity_to_dict", "game_to_dict", "write_game_json"]
