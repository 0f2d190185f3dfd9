import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Depends, status, HTTPException

from app.clients.pokeapi_client import PokemonNotFoundError, SpeciesLookupError
from app.config import get_settings
from app.dependencies import get_pokemon_service
from app.models import PokemonInfo
from app.services.pokemon_service import PokemonService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Owns the outbound HTTP client shared by both upstream clients."""
    settings = get_settings()
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds, follow_redirects=True)
    try:
        yield
    finally:
        await app.state.http_client.aclose()


app = FastAPI(
    title="Pokedex API",
    description="Returns Pokemon information, optionally with a fun translation of its description.",
    lifespan=lifespan,
)


def _to_http_error(name: str, error: SpeciesLookupError) -> HTTPException:
    """Maps a lookup failure to the public status code by its kind."""
    if isinstance(error, PokemonNotFoundError):
        logger.info(f"Pokemon not found: {name}")
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    logger.error(f"Lookup for '{name}' failed, returning 500: {error}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")


# Endpoint 1: Basic Pokemon Info
@app.get(
    "/pokemon/{name}",
    response_model=PokemonInfo,
    summary="Returns basic Pokemon information",
)
async def get_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Fetches basic information (name, description, habitat, legendary status) for a given Pokemon name."""
    try:
        return await service.get_info(name)
    except SpeciesLookupError as e:
        raise _to_http_error(name, e) from e


# Endpoint 2: Translated Pokemon Info
@app.get(
    "/pokemon/translated/{name}",
    response_model=PokemonInfo,
    summary="Returns Pokemon information with fun translation based on legendary/habitat status",
)
async def get_translated_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Applies the translation rule (Yoda for legendary/cave, Shakespeare otherwise).
    A failed translation keeps the original description, so only the lookup decides the status."""
    try:
        return await service.get_translated_info(name)
    except SpeciesLookupError as e:
        raise _to_http_error(name, e) from e
