from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PokemonCategory(str, Enum):
    """The fixed type taxonomy used by the catalog."""
    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"


# Pointer returned by the list endpoint (Internal Contract)
class ListReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str


# Envelope of the list endpoint; only `results` is consumed
class ListPage(BaseModel):
    count: int
    next: str | None = None
    previous: str | None = None
    results: list[ListReference]


# Lightweight record used by the cards. Frozen: a record is either fully
# populated or absent from the collection.
class DetailRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    url: str
    image_primary: str = ""
    image_fallback: str = ""
    categories: tuple[str, ...] = ()
    height: int = Field(description="Height in decimetres")
    weight: int = Field(description="Weight in hectograms")


class Ability(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    is_hidden: bool = False


class Stat(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    base: int


# Richer record, only held while the detail view is open
class FullDetailRecord(DetailRecord):
    base_experience: int = 0
    image_dream_world: str = ""
    abilities: tuple[Ability, ...] = ()
    stats: tuple[Stat, ...] = ()
    moves: tuple[str, ...] = ()
