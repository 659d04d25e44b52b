"""JSON name-list reader.

Accepts either a plain array of strings or a saved PokéAPI listing payload
(``{"results": [{"name": ...}, ...]}``) so that a response captured with
``curl`` can be reused offline.
"""

from __future__ import annotations

import json
import os
from typing import Any

from whosthat.api.records import parse_resource_list
from whosthat.utils.errors import IOFormatError, MalformedRecordError

PathLikeStr = os.PathLike[str]


def read_names_json(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> list[str]:
    with open(path, "r", encoding=encoding) as f:
        try:
            data: Any = json.load(f)
        except json.JSONDecodeError as exc:
            raise IOFormatError(f"{path}: invalid JSON ({exc.msg})") from exc

    if isinstance(data, list):
        if not all(isinstance(item, str) for item in data):
            raise IOFormatError(f"{path}: name array must only hold strings")
        return list(data)
    try:
        listing = parse_resource_list(data)
    except MalformedRecordError as exc:
        raise IOFormatError(f"{path}: {exc}") from exc
    return [item.name for item in listing.results]


__all__ = ["read_names_json"]
