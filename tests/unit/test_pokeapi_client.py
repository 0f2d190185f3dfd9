import pytest
import pytest_asyncio
import httpx
from app.clients.pokeapi_client import (
    DecodeError,
    PokeAPIClient,
    PokemonNotFoundError,
    UpstreamError,
    normalize_flavor_text,
)
from app.models import PokemonInfo

BASE_URL = "https://pokeapi.co/api/v2/pokemon-species"

MOCK_POKEAPI_SUCCESS = {
    "name": "mewtwo",
    "is_legendary": True,
    "habitat": {"name": "rare"},
    "flavor_text_entries": [
        {"flavor_text": "Ceci est français.", "language": {"name": "fr"}},
        {"flavor_text": "It was created by\na scientist after\fyears of horrific gene splicing.", "language": {"name": "en"}}, # <-- We must extract this one
        {"flavor_text": "A second English entry.", "language": {"name": "en"}},
        {"flavor_text": "Esto es español.", "language": {"name": "es"}}
    ]
}

MOCK_POKEAPI_NO_ENGLISH = {
    "name": "mewtwo",
    "is_legendary": True,
    "habitat": {"name": "rare"},
    "flavor_text_entries": [
        {"flavor_text": "konnichiwa", "language": {"name": "ja"}}
    ]
}

@pytest_asyncio.fixture
async def http_client():
    async with httpx.AsyncClient(timeout=10.0) as client:
        yield client

@pytest.fixture
def poke_client(http_client):
    return PokeAPIClient(http_client, base_url=BASE_URL)


def test_normalize_flavor_text_collapses_line_breaks_and_form_feeds():
    assert normalize_flavor_text("line one\nline two\x0cline three") == "line one line two line three"

def test_normalize_flavor_text_handles_windows_line_endings():
    assert normalize_flavor_text("first\r\nsecond\n") == "first second"

def test_normalize_flavor_text_keeps_trailing_form_feed_as_space():
    assert normalize_flavor_text("abc\x0c") == "abc "

def test_normalize_flavor_text_only_breaks_on_newlines():
    assert normalize_flavor_text("a\x0bb") == "a\x0bb"


@pytest.mark.asyncio
async def test_successful_fetch_and_data_extraction(httpx_mock, poke_client):
    """Verifies the client extracts the first English description, normalized to one line."""
    # ARRANGE: Mock the external API call
    httpx_mock.add_response(
        url=f"{BASE_URL}/mewtwo",
        json=MOCK_POKEAPI_SUCCESS,
        status_code=200
    )

    # ACT
    result = await poke_client.lookup("mewtwo")

    # ASSERT
    assert isinstance(result, PokemonInfo)
    assert result.name == "mewtwo"
    assert result.description == "It was created by a scientist after years of horrific gene splicing."
    assert result.habitat == "rare"
    assert result.is_legendary is True

@pytest.mark.asyncio
async def test_language_match_is_case_insensitive(httpx_mock, poke_client):
    body = {
        **MOCK_POKEAPI_SUCCESS,
        "flavor_text_entries": [{"flavor_text": "Upper case language.", "language": {"name": "EN"}}],
    }
    httpx_mock.add_response(url=f"{BASE_URL}/mewtwo", json=body)

    result = await poke_client.lookup("mewtwo")

    assert result.description == "Upper case language."

@pytest.mark.asyncio
async def test_name_is_sent_as_given(httpx_mock, poke_client):
    """The name is not lowercased before being sent upstream."""
    httpx_mock.add_response(url=f"{BASE_URL}/Mewtwo", status_code=404)

    with pytest.raises(PokemonNotFoundError):
        await poke_client.lookup("Mewtwo")

    assert httpx_mock.get_request().url.path == "/api/v2/pokemon-species/Mewtwo"

@pytest.mark.asyncio
async def test_pokemon_not_found_raises_not_found(httpx_mock, poke_client):
    """Test that a 404 from PokeAPI is mapped to the dedicated not found error."""
    httpx_mock.add_response(
        url=f"{BASE_URL}/nonexistent",
        status_code=404
    )

    with pytest.raises(PokemonNotFoundError) as excinfo:
        await poke_client.lookup("nonexistent")

    assert excinfo.value.name == "nonexistent"

@pytest.mark.asyncio
async def test_pokeapi_internal_error_raises_upstream_error(httpx_mock, poke_client):
    """Test that a 500 from PokeAPI is mapped to an upstream error carrying the status."""
    httpx_mock.add_response(
        url=f"{BASE_URL}/internalerror",
        status_code=500
    )

    with pytest.raises(UpstreamError) as excinfo:
        await poke_client.lookup("internalerror")

    assert excinfo.value.status_code == 500

@pytest.mark.asyncio
async def test_pokeapi_network_error_raises_upstream_error(httpx_mock, poke_client):
    httpx_mock.add_exception(
        httpx.ConnectTimeout("Connection timed out."),
        url=f"{BASE_URL}/pikachu"
    )

    with pytest.raises(UpstreamError) as excinfo:
        await poke_client.lookup("pikachu")

    assert excinfo.value.status_code is None

@pytest.mark.asyncio
async def test_malformed_body_raises_decode_error(httpx_mock, poke_client):
    httpx_mock.add_response(url=f"{BASE_URL}/pikachu", text="<html>not json</html>")

    with pytest.raises(DecodeError):
        await poke_client.lookup("pikachu")

@pytest.mark.asyncio
async def test_missing_fields_raise_decode_error(httpx_mock, poke_client):
    httpx_mock.add_response(url=f"{BASE_URL}/pikachu", json={"name": "pikachu", "habitat": None})

    with pytest.raises(DecodeError):
        await poke_client.lookup("pikachu")

@pytest.mark.asyncio
async def test_no_english_description_is_not_a_not_found(httpx_mock, poke_client):
    """The Pokemon exists, only its English description is missing."""
    httpx_mock.add_response(
        url=f"{BASE_URL}/mewtwo",
        json=MOCK_POKEAPI_NO_ENGLISH,
    )

    with pytest.raises(DecodeError) as excinfo:
        await poke_client.lookup("mewtwo")

    assert not isinstance(excinfo.value, PokemonNotFoundError)
    assert excinfo.value.reason == "no english description"

@pytest.mark.asyncio
async def test_name_with_control_character_raises_upstream_error(httpx_mock, poke_client):
    """httpx refuses to build the URL, which is still a classified lookup failure."""
    with pytest.raises(UpstreamError) as excinfo:
        await poke_client.lookup("a\x00b")

    assert excinfo.value.status_code is None
    assert httpx_mock.get_requests() == []
