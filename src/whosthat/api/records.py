"""Validated shapes of the upstream records consumed by the game.

Only the fields the pipeline reads are modelled; everything else in the
PokéAPI payloads is ignored.  Parsing happens at the ingestion boundary and
fails fast with :class:`~whosthat.utils.errors.MalformedRecordError` instead
of letting missing fields travel further down the pipeline.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from whosthat.utils.errors import MalformedRecordError

__all__ = [
    "NamedResource",
    "FlavorTextEntry",
    "SpeciesRecord",
    "Sprites",
    "PokemonRecord",
    "ResourceList",
    "MergedRecord",
    "parse_species",
    "parse_pokemon",
    "parse_resource_list",
    "merge_records",
]


class NamedResource(BaseModel):
    name: str

    model_config = ConfigDict(extra="ignore")


class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: NamedResource

    model_config = ConfigDict(extra="ignore")


class SpeciesRecord(BaseModel):
    """``/pokemon-species/{id}`` payload."""

    id: int
    name: str
    flavor_text_entries: list[FlavorTextEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def flavor_text(self, language: str = "en") -> str:
        """Return the first entry written in ``language`` or ``""``."""

        for entry in self.flavor_text_entries:
            if entry.language.name == language:
                return entry.flavor_text
        return ""


class Sprites(BaseModel):
    front_default: str | None = None

    model_config = ConfigDict(extra="ignore")


class PokemonRecord(BaseModel):
    """``/pokemon/{id}`` payload."""

    id: int
    name: str
    sprites: Sprites

    model_config = ConfigDict(extra="ignore")


class ResourceList(BaseModel):
    """Paginated listing such as ``/pokemon?limit=...``."""

    results: list[NamedResource]

    model_config = ConfigDict(extra="ignore")


class MergedRecord(BaseModel):
    """Species and pokemon data for one id, pokemon fields taking precedence."""

    id: int
    name: str
    flavor_text: str
    sprite_url: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


def _parse(model: type[BaseModel], payload: Any, what: str) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise MalformedRecordError(f"malformed {what} record: {', '.join(fields)}") from exc


def parse_species(payload: Any) -> SpeciesRecord:
    return _parse(SpeciesRecord, payload, "species")


def parse_pokemon(payload: Any) -> PokemonRecord:
    return _parse(PokemonRecord, payload, "pokemon")


def parse_resource_list(payload: Any) -> ResourceList:
    return _parse(ResourceList, payload, "resource list")


def merge_records(
    species: SpeciesRecord, pokemon: PokemonRecord, *, language: str = "en"
) -> MergedRecord:
    """Merge the two records fetched for one id.

    The ids must agree; a mismatch means the upstream answered for a different
    creature and is reported as a malformed record.
    """

    if species.id != pokemon.id:
        raise MalformedRecordError(
            f"species id {species.id} does not match pokemon id {pokemon.id}"
        )
    return MergedRecord(
        id=pokemon.id,
        name=pokemon.name,
        flavor_text=species.flavor_text(language),
        sprite_url=pokemon.sprites.front_default,
    )
