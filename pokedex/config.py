import os

# Base URL of the public PokeAPI; override to point at a mirror
POKEAPI_BASE_URL = os.getenv(
    "POKEAPI_BASE_URL",
    "https://pokeapi.co/api/v2",
).rstrip("/")

# Per-request timeout (seconds) for outbound calls
REQUEST_TIMEOUT = float(os.getenv("POKEDEX_TIMEOUT", "10.0"))

LOG_LEVEL = os.getenv("POKEDEX_LOG_LEVEL", "INFO")

# The page always shows this type; the API expects the lowercase English name
FIXED_TYPE = "fire"

# Number of cards rendered on the page
POKEMON_COUNT = 12
