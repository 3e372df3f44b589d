from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from POKEDEX_* environment variables or a .env file."""

    model_config = SettingsConfigDict(env_prefix="POKEDEX_", env_file=".env", env_file_encoding="utf-8")

    pokeapi_base_url: str = "https://pokeapi.co/api/v2"

    # Number of list references requested on activation
    list_limit: int = Field(50, gt=0)
    page_size: int = Field(20, gt=0)

    # Per-request timeout in seconds (connect + read)
    request_timeout: float = 5.0

    # Detail view move list: how many moves are shown, and above which total
    # the "+N more moves" label appears
    move_preview_limit: int = 15
    more_moves_threshold: int = 20

    log_level: str = "INFO"


settings = Settings()
