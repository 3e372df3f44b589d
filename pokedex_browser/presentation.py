from pydantic import BaseModel

from pokedex_browser.config import settings
from pokedex_browser.models import Ability, DetailRecord, FullDetailRecord, PokemonCategory, Stat

CATEGORY_COLORS: dict[PokemonCategory, str] = {
    PokemonCategory.NORMAL: "#A8A878",
    PokemonCategory.FIRE: "#F08030",
    PokemonCategory.WATER: "#6890F0",
    PokemonCategory.ELECTRIC: "#F8D030",
    PokemonCategory.GRASS: "#78C850",
    PokemonCategory.ICE: "#98D8D8",
    PokemonCategory.FIGHTING: "#C03028",
    PokemonCategory.POISON: "#A040A0",
    PokemonCategory.GROUND: "#E0C068",
    PokemonCategory.FLYING: "#A890F0",
    PokemonCategory.PSYCHIC: "#F85888",
    PokemonCategory.BUG: "#A8B820",
    PokemonCategory.ROCK: "#B8A038",
    PokemonCategory.GHOST: "#705898",
    PokemonCategory.DRAGON: "#7038F8",
    PokemonCategory.DARK: "#705848",
    PokemonCategory.STEEL: "#B8B8D0",
    PokemonCategory.FAIRY: "#EE99AC",
}
DEFAULT_CATEGORY_COLOR = "#68A090"


def format_name(name: str) -> str:
    """'mr-mime' -> 'Mr Mime'."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def display_id(record_id: int) -> str:
    return f"#{record_id:03d}"


def category_color(name: str) -> str:
    try:
        return CATEGORY_COLORS[PokemonCategory(name)]
    except ValueError:
        return DEFAULT_CATEGORY_COLOR


def metres(decimetres: int) -> str:
    return f"{decimetres / 10:.1f}m"


def kilograms(hectograms: int) -> str:
    return f"{hectograms / 10:.1f}kg"


class CategoryBadge(BaseModel):
    name: str
    label: str
    color: str


class CardView(BaseModel):
    """What a catalog card renders."""
    id: int
    url: str
    name: str
    display_id: str
    image_url: str
    categories: list[CategoryBadge]
    height: str
    weight: str


class MovePreview(BaseModel):
    total: int
    shown: list[str]
    more_label: str | None = None


class DetailView(BaseModel):
    """What the detail modal renders once a full record is loaded."""
    id: int
    name: str
    display_id: str
    image_url: str
    categories: list[CategoryBadge]
    height: str
    weight: str
    base_experience: int
    abilities: list[Ability]
    stats: list[Stat]
    moves: MovePreview


def _badges(record: DetailRecord) -> list[CategoryBadge]:
    return [CategoryBadge(name=c, label=format_name(c), color=category_color(c)) for c in record.categories]


def build_card(record: DetailRecord) -> CardView:
    return CardView(
        id=record.id,
        url=record.url,
        name=format_name(record.name),
        display_id=display_id(record.id),
        # Empty string means the card shows its id placeholder instead
        image_url=record.image_primary or record.image_fallback,
        categories=_badges(record),
        height=metres(record.height),
        weight=kilograms(record.weight),
    )


def preview_moves(
    moves: tuple[str, ...],
    limit: int = settings.move_preview_limit,
    threshold: int = settings.more_moves_threshold,
) -> MovePreview:
    # The label is gated on `threshold` while the count is taken against
    # `limit`: with 16-20 moves some are hidden without a label.
    more_label = None
    if len(moves) > threshold:
        more_label = f"+{len(moves) - limit} more moves"
    return MovePreview(
        total=len(moves),
        shown=[format_name(m) for m in moves[:limit]],
        more_label=more_label,
    )


def build_detail(record: FullDetailRecord) -> DetailView:
    return DetailView(
        id=record.id,
        name=format_name(record.name),
        display_id=display_id(record.id),
        image_url=record.image_primary or record.image_dream_world or record.image_fallback,
        categories=_badges(record),
        height=metres(record.height),
        weight=kilograms(record.weight),
        base_experience=record.base_experience,
        abilities=[Ability(name=format_name(a.name), is_hidden=a.is_hidden) for a in record.abilities],
        stats=[Stat(name=format_name(s.name), base=s.base) for s in record.stats],
        moves=preview_moves(record.moves),
    )
