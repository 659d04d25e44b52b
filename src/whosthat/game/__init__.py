"""Game model: generations, settings, entities, state and the controller."""

from .controller import GameController, GameView
from .entity import Entity, chunk_rounds
from .generations import GENERATIONS, GenerationRange, eligible_ids, parse_generation
from .generator import RoundGenerator, sample_ids
from .loader import CorpusLoader
from .settings import Settings
from .state import GameState

__all__ = [
    "GENERATIONS",
    "CorpusLoader",
    "Entity",
    "GameController",
    "GameState",
    "GameView",
    "GenerationRange",
    "RoundGenerator",
    "Settings",
    "chunk_rounds",
    "eligible_ids",
    "parse_generation",
    "sample_ids",
]
