import pytest

from pokedex_browser.clients.pokeapi_client import PokeAPIClient
from pokedex_browser.models import DetailRecord, FullDetailRecord

BASE_URL = "https://pokeapi.co/api/v2"
LIST_URL = f"{BASE_URL}/pokemon?limit=50"


def detail_url(pokemon_id: int) -> str:
    return f"{BASE_URL}/pokemon/{pokemon_id}/"


def pokemon_payload(pokemon_id: int, name: str, types=("normal",), moves=()) -> dict:
    """A trimmed-down PokeAPI /pokemon/{id} body."""
    return {
        "id": pokemon_id,
        "name": name,
        "height": 7,
        "weight": 69,
        "base_experience": 64,
        "sprites": {
            "front_default": f"https://sprites.example/{pokemon_id}.png",
            "back_default": None,
            "other": {
                "official-artwork": {"front_default": f"https://artwork.example/{pokemon_id}.png"},
                "dream_world": {"front_default": None},
            },
        },
        "types": [{"slot": i + 1, "type": {"name": t, "url": "..."}} for i, t in enumerate(types)],
        "abilities": [
            {"ability": {"name": "overgrow", "url": "..."}, "is_hidden": False, "slot": 1},
            {"ability": {"name": "chlorophyll", "url": "..."}, "is_hidden": True, "slot": 3},
        ],
        "stats": [
            {"base_stat": 45, "effort": 0, "stat": {"name": "hp", "url": "..."}},
            {"base_stat": 65, "effort": 1, "stat": {"name": "special-attack", "url": "..."}},
        ],
        "moves": [{"move": {"name": m, "url": "..."}} for m in moves],
    }


def list_payload(*names_and_ids) -> dict:
    return {
        "count": 1302,
        "next": f"{BASE_URL}/pokemon?offset=50&limit=50",
        "previous": None,
        "results": [{"name": name, "url": detail_url(pid)} for pid, name in names_and_ids],
    }


def make_record(pokemon_id: int, name: str, categories=("normal",)) -> DetailRecord:
    return DetailRecord(
        id=pokemon_id,
        name=name,
        url=detail_url(pokemon_id),
        image_primary=f"https://artwork.example/{pokemon_id}.png",
        image_fallback=f"https://sprites.example/{pokemon_id}.png",
        categories=tuple(categories),
        height=7,
        weight=69,
    )


def make_full_record(pokemon_id: int, name: str) -> FullDetailRecord:
    return FullDetailRecord(id=pokemon_id, name=name, url=detail_url(pokemon_id), height=7, weight=69)


@pytest.fixture
def poke_client():
    """Provides a PokeAPIClient pointed at the public base URL (mocked by httpx_mock)."""
    return PokeAPIClient(base_url=BASE_URL, timeout=5.0, list_limit=50)
