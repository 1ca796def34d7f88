# pokedex/schemas.py
from typing import List
from pydantic import BaseModel, Field


# ---- Shared error model (for docs / consistency) ----
class ErrorResponse(BaseModel):
    error: str


# ---- One rendered card ----
class PokemonCard(BaseModel):
    name: str
    image: str | None = None
    # kilograms
    weight: float
    # metres
    height: float
    abilities: List[str] = Field(default_factory=list)
    attack: int | None = None
    defense: int | None = None


# ---- /pokemon ----
class CardsResponse(BaseModel):
    type: str
    count: int
    pokemon: List[PokemonCard]


# ---- /debug/type ----
class TypeRosterResponse(BaseModel):
    type: str
    urls: List[str]
