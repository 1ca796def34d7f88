import httpx
import pytest

from pokedex.config import POKEAPI_BASE_URL

TYPE_URL = f"{POKEAPI_BASE_URL}/type/fire"


def detail_url(n):
    return f"{POKEAPI_BASE_URL}/pokemon/{n}/"


def make_detail(name, weight=85, height=6, attack=52, defense=43):
    """Minimal detail record with the fields a card needs."""
    return {
        "name": name,
        "weight": weight,
        "height": height,
        "sprites": {
            "front_default": f"https://img.example/{name}.png",
            "other": {
                "official-artwork": {
                    "front_default": f"https://img.example/artwork/{name}.png",
                },
            },
        },
        "abilities": [
            {"ability": {"name": "blaze"}},
            {"ability": {"name": "solar-power"}},
            {"ability": {"name": "hidden-one"}},
        ],
        "stats": [
            {"stat": {"name": "hp"}, "base_stat": 39},
            {"stat": {"name": "attack"}, "base_stat": attack},
            {"stat": {"name": "defense"}, "base_stat": defense},
        ],
    }


def make_type_data(count):
    return {
        "name": "fire",
        "pokemon": [
            {"pokemon": {"name": f"mon-{n}", "url": detail_url(n)}, "slot": 1}
            for n in range(1, count + 1)
        ],
    }


@pytest.fixture
def pokeapi():
    """
    Fake PokeAPI. Tests tweak `routes` (url -> (status, json)) and build a
    client with `make_client()`. Every requested URL is recorded in `calls`.
    """

    class FakePokeAPI:
        def __init__(self):
            # url -> (status, body); a str body is sent as plain text
            self.routes = {TYPE_URL: (200, make_type_data(15))}
            for n in range(1, 16):
                self.routes[detail_url(n)] = (200, make_detail(f"mon-{n}"))
            self.calls = []

        def handler(self, request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            self.calls.append(url)
            status, body = self.routes.get(url, (404, {"detail": "Not found"}))
            if isinstance(body, str):
                return httpx.Response(status, text=body)
            return httpx.Response(status, json=body)

        def make_client(self):
            return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    return FakePokeAPI()
