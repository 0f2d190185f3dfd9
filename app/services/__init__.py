"""Service layer orchestrating the external API clients."""
from .pokemon_service import PokemonService, select_translation_style

__all__ = [
    'PokemonService',
    'select_translation_style',
]
