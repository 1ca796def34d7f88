import logging

import httpx

from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from pokedex.cards import build_cards, templates
from pokedex.config import LOG_LEVEL, FIXED_TYPE, POKEMON_COUNT
from pokedex.pokeapi_client import (
    PokeAPIError,
    fetch_fixed_type_details,
    fetch_type_roster,
    get_http_client,
    roster_detail_urls,
)
from pokedex.schemas import CardsResponse, ErrorResponse, TypeRosterResponse

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Fixed Type Pokedex")


@app.get("/health")
async def health_check():
    """
    Health endpoint. Does not call PokeAPI.
    """
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def pokemon_page(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Renders the page with one card per Pokemon of the fixed type.

    On any failure while talking to PokeAPI the container shows an
    error message instead of the cards, and the status is 502.
    """
    context = {"type_label": FIXED_TYPE.capitalize(), "cards": [], "error": None}

    try:
        details = await fetch_fixed_type_details(client, FIXED_TYPE, POKEMON_COUNT)
        context["cards"] = build_cards(details)
    except PokeAPIError as e:
        logger.exception("Critical error loading the API")
        context["error"] = str(e)
        return templates.TemplateResponse(request, "index.html", context, status_code=502)

    return templates.TemplateResponse(request, "index.html", context)


@app.get("/pokemon", response_model=CardsResponse, responses={502: {"model": ErrorResponse}})
async def pokemon_cards(
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Same pipeline as the page, returned as JSON.

    Failure:
      502, { "error": "<reason>" }
    """
    try:
        details = await fetch_fixed_type_details(client, FIXED_TYPE, POKEMON_COUNT)
        cards = build_cards(details)
    except PokeAPIError as e:
        logger.exception("Critical error loading the API")
        return JSONResponse(
            status_code=502,
            content={"error": str(e)},
        )

    return CardsResponse(type=FIXED_TYPE, count=len(cards), pokemon=cards)


@app.get("/debug/type", response_model=TypeRosterResponse)
async def debug_type_roster(
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Debug endpoint to verify we can talk to PokeAPI.

    - Calls PokeAPI's /type endpoint for the fixed type
    - Returns the detail URLs the page would fetch

    Does not fetch the detail records.
    """
    try:
        type_data = await fetch_type_roster(client, FIXED_TYPE)
    except PokeAPIError as e:
        # PokeAPI failed or network issue
        raise HTTPException(
            status_code=502,
            detail=f"Failed to fetch from PokeAPI: {e!s}",
        )

    return TypeRosterResponse(
        type=FIXED_TYPE,
        urls=roster_detail_urls(type_data, POKEMON_COUNT),
    )
