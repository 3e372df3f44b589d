import logging
from typing import Any

import httpx
from fastapi import HTTPException
from pydantic import ValidationError

from pokedex_browser.config import settings
from pokedex_browser.models import (
    Ability,
    DetailRecord,
    FullDetailRecord,
    ListPage,
    ListReference,
    Stat,
)

logger = logging.getLogger(__name__)


# Base error for every failed catalog call. `reason` is the short, loggable cause.
class CatalogClientError(HTTPException):
    def __init__(self, reason: str, status_code: int = 503):
        super().__init__(status_code=status_code, detail=f"External API Error: {reason}")
        self.reason = reason


class NetworkFailure(CatalogClientError):
    """The request could not complete (connection error, timeout)."""


class HttpFailure(CatalogClientError):
    """PokeAPI answered with a non-success status."""

    def __init__(self, upstream_status: int, url: str):
        # Map an upstream 404 to a 404, anything else to 503 Service Unavailable
        status_code = 404 if upstream_status == 404 else 503
        super().__init__(f"PokeAPI failed with status {upstream_status} for {url}", status_code=status_code)
        self.upstream_status = upstream_status


class ResponseFormatFailure(CatalogClientError):
    """PokeAPI answered 2xx but the body is not the documented shape."""


def _sprite_urls(sprites: dict[str, Any]) -> tuple[str, str, str]:
    other = sprites.get("other") or {}
    artwork = (other.get("official-artwork") or {}).get("front_default") or ""
    dream_world = (other.get("dream_world") or {}).get("front_default") or ""
    front = sprites.get("front_default") or ""
    return artwork, front, dream_world


def _detail_fields(data: dict[str, Any], url: str) -> dict[str, Any]:
    artwork, front, _ = _sprite_urls(data.get("sprites") or {})
    return {
        "id": data["id"],
        "name": data["name"],
        "url": url,
        "image_primary": artwork,
        "image_fallback": front,
        "categories": tuple(slot["type"]["name"] for slot in data.get("types", [])),
        "height": data["height"],
        "weight": data["weight"],
    }


class PokeAPIClient:
    """Read-only access to the PokeAPI list and detail endpoints.

    Every call is a fresh network round trip: there is no retry and no caching
    here, callers decide the retry policy.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None, list_limit: int | None = None):
        self.base_url = base_url or settings.pokeapi_base_url
        self.list_limit = list_limit or settings.list_limit
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or settings.request_timeout,
            follow_redirects=True,
        )

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Internal method issuing a GET and mapping transport/status errors to client failures."""
        logger.debug(f"Fetching {url}")
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            data = response.json()

        except httpx.HTTPStatusError as e:
            logger.warning(f"PokeAPI returned {e.response.status_code} for {e.request.url}")
            raise HttpFailure(e.response.status_code, str(e.request.url))
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.warning(f"PokeAPI network error for {url}: {e!r}")
            raise NetworkFailure(f"PokeAPI network error: {str(e) or type(e).__name__}")
        except ValueError:
            raise ResponseFormatFailure(f"PokeAPI returned a non-JSON body for {url}")

        # Both endpoints answer with a JSON object
        if not isinstance(data, dict):
            raise ResponseFormatFailure(f"PokeAPI returned a {type(data).__name__} instead of an object for {url}")
        return data

    async def fetch_list(self) -> list[ListReference]:
        """Fetches the first `list_limit` references from the list endpoint."""
        data = await self._get_json("/pokemon", params={"limit": self.list_limit})
        try:
            page = ListPage.model_validate(data)
        except ValidationError as e:
            raise ResponseFormatFailure(f"Unexpected list response format: {e.error_count()} errors")
        logger.info(f"Fetched {len(page.results)} references (catalog count {page.count})")
        return page.results

    async def fetch_detail(self, url: str) -> DetailRecord:
        """Fetches the lightweight card record behind a list reference URL."""
        data = await self._get_json(url)
        try:
            return DetailRecord(**_detail_fields(data, url))
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            raise ResponseFormatFailure(f"Unexpected detail response format for {url}: {type(e).__name__}")

    async def fetch_full_detail(self, url: str) -> FullDetailRecord:
        """Fetches the same endpoint as fetch_detail, keeping abilities, stats and moves."""
        data = await self._get_json(url)
        try:
            _, _, dream_world = _sprite_urls(data.get("sprites") or {})
            return FullDetailRecord(
                **_detail_fields(data, url),
                # base_experience is null for some forms
                base_experience=data.get("base_experience") or 0,
                image_dream_world=dream_world,
                abilities=tuple(
                    Ability(name=entry["ability"]["name"], is_hidden=entry.get("is_hidden", False))
                    for entry in data.get("abilities", [])
                ),
                stats=tuple(
                    Stat(name=entry["stat"]["name"], base=entry["base_stat"])
                    for entry in data.get("stats", [])
                ),
                moves=tuple(entry["move"]["name"] for entry in data.get("moves", [])),
            )
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            raise ResponseFormatFailure(f"Unexpected detail response format for {url}: {type(e).__name__}")

    async def close(self):
        """Close the HTTP client (call on app shutdown)."""
        await self.client.aclose()
