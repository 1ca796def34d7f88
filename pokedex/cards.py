from pathlib import Path

from fastapi.templating import Jinja2Templates

from pokedex.pokeapi_client import PokeAPIError
from pokedex.schemas import PokemonCard

# Only the first abilities are shown on a card
MAX_ABILITIES = 2

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def format_measure(value: float) -> str:
    """Render a weight or height without a trailing '.0' (6.0 -> '6')."""
    return f"{value:.1f}".rstrip("0").rstrip(".")


templates.env.filters["measure"] = format_measure


def _base_stat(detail: dict, stat_name: str) -> int | None:
    for entry in detail.get("stats") or []:
        if entry.get("stat", {}).get("name") == stat_name:
            # a zero base stat is shown as N/A, like a missing one
            return entry.get("base_stat") or None
    return None


def _image_url(detail: dict) -> str | None:
    sprites = detail.get("sprites") or {}
    artwork = (sprites.get("other") or {}).get("official-artwork") or {}
    return artwork.get("front_default") or sprites.get("front_default")


def build_card(detail: dict) -> PokemonCard:
    """
    Turn one PokeAPI detail record into a card.

    - weight is converted from hectograms to kg
    - height is converted from decimetres to metres
    - the official artwork is preferred over the default sprite

    Raises PokeAPIError when the record is missing a field a card needs.
    """
    try:
        return PokemonCard(
            name=detail["name"],
            image=_image_url(detail),
            weight=detail["weight"] / 10,
            height=detail["height"] / 10,
            abilities=[
                a["ability"]["name"]
                for a in (detail.get("abilities") or [])[:MAX_ABILITIES]
            ],
            attack=_base_stat(detail, "attack"),
            defense=_base_stat(detail, "defense"),
        )
    # ValidationError is a ValueError
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise PokeAPIError("Failed to read Pokémon details. Unexpected format") from e


def build_cards(details: list[dict]) -> list[PokemonCard]:
    return [build_card(detail) for detail in details]
