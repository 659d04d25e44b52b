"""Who's That Pokémon? trivia engine.

The package samples creatures from the selected game generations, fetches
their records from PokéAPI, masks spoiler words in the flavor text and groups
the results into rounds that can be revealed one creature at a time.
"""

__version__ = "0.1.0"
