import httpx
from fastapi import Depends, Request

from app.clients import PokeAPIClient
from app.clients import TranslationClient
from app.config import Settings, get_settings
from app.services import PokemonService


def get_http_client(request: Request) -> httpx.AsyncClient:
    # Created once in the application lifespan and shared by every request
    return request.app.state.http_client

def get_poke_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> PokeAPIClient:
    return PokeAPIClient(http_client, base_url=settings.pokeapi_base_url)

def get_translation_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> TranslationClient:
    return TranslationClient(http_client, base_url=settings.translation_base_url)

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    translation_client: TranslationClient = Depends(get_translation_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client, translation_client=translation_client)
