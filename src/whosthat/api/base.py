"""Read-only contract of the upstream creature API.

The pipeline consumes three reads: the full name listing, a species record
and a pokemon record by numeric id.  Implementations return raw decoded JSON
so that validation stays in one place (:mod:`whosthat.api.records`).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PokeApi(Protocol):
    """Protocol for creature data sources."""

    async def list_pokemon(self) -> Any:
        """Return the listing payload holding every known creature name."""

        ...

    async def get_species(self, entity_id: int) -> Any:
        """Return the species payload for ``entity_id``."""

        ...

    async def get_pokemon(self, entity_id: int) -> Any:
        """Return the pokemon payload for ``entity_id``."""

        ...
