"""Upstream creature API: protocol, aiohttp client and record validation."""

from .base import PokeApi
from .client import AiohttpPokeApi
from .records import MergedRecord, merge_records, parse_pokemon, parse_species

__all__ = [
    "AiohttpPokeApi",
    "MergedRecord",
    "PokeApi",
    "merge_records",
    "parse_pokemon",
    "parse_species",
]
