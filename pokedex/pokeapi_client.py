import asyncio
import logging
from typing import AsyncGenerator

import httpx

from pokedex.config import POKEAPI_BASE_URL, REQUEST_TIMEOUT, FIXED_TYPE, POKEMON_COUNT

logger = logging.getLogger(__name__)


class PokeAPIError(Exception):
    """
    Raised when any step of the PokeAPI pipeline fails.

    The message is meant to be shown to the end user as-is.
    """


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    FastAPI dependency that provides an httpx.AsyncClient to request
    handlers. The client is closed once the request is done.

    Usage in endpoints:
        async def some_endpoint(client: httpx.AsyncClient = Depends(get_http_client)):
            ...
    """
    async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as client:
        yield client


async def fetch_type_roster(client: httpx.AsyncClient, type_name: str) -> dict:
    """
    Fetch the roster of a Pokemon type from PokeAPI.

    Calls:
        GET https://pokeapi.co/api/v2/type/{type_name}

    Returns:
        Parsed JSON as a Python dict.
    """
    url = f"{POKEAPI_BASE_URL}/type/{type_name}"
    logger.info("Fetching type roster from %s", url)

    try:
        resp = await client.get(url)
    except httpx.HTTPError as e:
        raise PokeAPIError(f"Failed to fetch the type list. {e!s}") from e

    # redirects and other non-2xx answers carry no roster
    if not resp.is_success:
        raise PokeAPIError(
            f"Failed to fetch the type list. Status: {resp.status_code}"
        )

    try:
        return resp.json()
    except ValueError as e:
        raise PokeAPIError("Failed to read the type list. Invalid JSON") from e


def roster_detail_urls(type_data: dict, count: int) -> list[str]:
    """
    Return the detail URLs of the first `count` Pokemon in a type roster,
    in the order the API lists them.
    """
    try:
        entries = type_data.get("pokemon") or []
        return [entry["pokemon"]["url"] for entry in entries[:count]]
    except (AttributeError, KeyError, TypeError) as e:
        raise PokeAPIError("Failed to read the type list. Unexpected format") from e


async def fetch_pokemon_details(client: httpx.AsyncClient, url: str) -> dict:
    """
    Fetch detailed Pokemon info from a given PokeAPI URL.

    Unlike a best-effort batch, a failed request here is not skipped:
    it raises PokeAPIError so the whole load fails.
    """
    try:
        resp = await client.get(url)
    except httpx.HTTPError as e:
        raise PokeAPIError(f"Failed to fetch Pokémon details at {url}") from e

    if not resp.is_success:
        raise PokeAPIError(f"Failed to fetch Pokémon details at {url}")

    try:
        return resp.json()
    except ValueError as e:
        raise PokeAPIError(f"Failed to read Pokémon details at {url}. Invalid JSON") from e


async def fetch_fixed_type_details(
    client: httpx.AsyncClient,
    type_name: str = FIXED_TYPE,
    count: int = POKEMON_COUNT,
) -> list[dict]:
    """
    Fetch the detail records of the first `count` Pokemon of a type.

    Step 1: fetch the type roster and keep the first `count` URLs.
    Step 2: fetch every detail record concurrently and wait for all of them.

    Returns the detail records in roster order. If any single request
    fails, the requests still in flight are cancelled, the PokeAPIError
    propagates and nothing is returned.
    """
    type_data = await fetch_type_roster(client, type_name)
    urls = roster_detail_urls(type_data, count)

    tasks = [asyncio.ensure_future(fetch_pokemon_details(client, url)) for url in urls]
    try:
        details = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        # let the cancelled requests unwind before the client is closed
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    logger.info("Fetched %d detail records for type %s", len(details), type_name)
    return list(details)
