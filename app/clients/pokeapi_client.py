import logging
from typing import Optional

import httpx

from app.config import DEFAULT_POKEAPI_BASE_URL
from app.models import PokemonInfo, SpeciesRecord

logger = logging.getLogger(__name__)

ENGLISH = "en"


# Closed set of lookup failures. The HTTP layer branches on the type, never on the message.
class SpeciesLookupError(Exception):
    pass

class PokemonNotFoundError(SpeciesLookupError):
    def __init__(self, name: str):
        super().__init__(f"Pokemon '{name}' not found.")
        self.name = name

class UpstreamError(SpeciesLookupError):
    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(f"PokeAPI error: {detail}")
        self.status_code = status_code

class DecodeError(SpeciesLookupError):
    def __init__(self, reason: str):
        super().__init__(f"PokeAPI response could not be decoded: {reason}")
        self.reason = reason


def normalize_flavor_text(text: str) -> str:
    """Collapses a multi-line flavor text into a single line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    # Splitting on \n leaves form feeds in place
    return " ".join(line.removesuffix("\r") for line in lines).replace("\f", " ")


class PokeAPIClient:
    def __init__(self, http_client: httpx.AsyncClient, base_url: str = DEFAULT_POKEAPI_BASE_URL):
        self.client = http_client
        self.base_url = base_url.rstrip("/")

    async def _fetch_species_record(self, name: str) -> SpeciesRecord:
        """Fetches the raw species record and classifies upstream failures."""
        logger.info(f"Looking up Pokemon: {name}")
        url = f"{self.base_url}/{name}"

        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            raise UpstreamError(f"network error: {e!r}") from e
        except httpx.InvalidURL as e:
            # e.g. a name containing control characters
            raise UpstreamError(f"invalid request URL: {e}") from e

        if response.status_code == 404:
            raise PokemonNotFoundError(name)
        if not response.is_success:
            raise UpstreamError(f"failed with status {response.status_code}", status_code=response.status_code)

        try:
            return SpeciesRecord.model_validate(response.json())
        except ValueError as e:
            # Covers both invalid JSON and a body that doesn't match the species shape
            raise DecodeError(str(e)) from e

    async def lookup(self, name: str) -> PokemonInfo:
        """Fetches the species and maps it to the public PokemonInfo model."""
        record = await self._fetch_species_record(name)

        # First English entry in the order PokeAPI returns them
        entry = next(
            (e for e in record.flavor_text_entries if e.language.name.lower() == ENGLISH),
            None,
        )
        if entry is None:
            raise DecodeError("no english description")

        return PokemonInfo(
            name=record.name,
            description=normalize_flavor_text(entry.flavor_text),
            habitat=record.habitat.name,
            is_legendary=record.is_legendary,
        )
