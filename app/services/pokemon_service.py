from app.clients.pokeapi_client import PokeAPIClient
from app.clients.translation_client import TranslationClient
from app.models import PokemonInfo, TranslationStyle

CAVE_HABITAT = "cave"


def select_translation_style(habitat: str, is_legendary: bool) -> TranslationStyle:
    """Rule: Legendary OR habitat is 'cave' (any case) -> Yoda. Otherwise -> Shakespeare."""
    if is_legendary or habitat.lower() == CAVE_HABITAT:
        return TranslationStyle.MYSTIC
    return TranslationStyle.FORMAL


class PokemonService:
    # Service requires both clients via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient, translation_client: TranslationClient):
        self._poke_client = poke_client
        self._translation_client = translation_client

    async def get_info(self, name: str) -> PokemonInfo:
        """
        Endpoint 1: Fetches basic Pokemon data.
        Lookup errors (not found, upstream, decode) propagate to the caller.
        """
        return await self._poke_client.lookup(name)

    async def get_translated_info(self, name: str) -> PokemonInfo:
        """
        Endpoint 2: Fetches data and applies the translation rule.
        Translation is only attempted once the lookup succeeded.
        """
        info = await self._poke_client.lookup(name)

        style = select_translation_style(info.habitat, info.is_legendary)

        # The client returns the original text if the translation is unavailable
        translated_description = await self._translation_client.translate(style, info.description)

        return info.model_copy(update={"description": translated_description})
