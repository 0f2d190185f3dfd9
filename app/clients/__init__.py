"""Client modules for external API communication."""
from .pokeapi_client import (
    DecodeError,
    PokeAPIClient,
    PokemonNotFoundError,
    SpeciesLookupError,
    UpstreamError,
)
from .translation_client import TranslationClient

__all__ = [
    'PokeAPIClient',
    'TranslationClient',
    'SpeciesLookupError',
    'PokemonNotFoundError',
    'UpstreamError',
    'DecodeError',
]
