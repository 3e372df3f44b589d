import logging

from fastapi import Depends

from pokedex_browser.clients import PokeAPIClient
from pokedex_browser.services import CatalogBrowser

logger = logging.getLogger(__name__)

_poke_client = None
_browser = None


def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client


def get_browser(poke_client: PokeAPIClient = Depends(get_poke_client)) -> CatalogBrowser:
    # One browser per process: it is the view state of a single client
    global _browser
    if _browser is None:
        _browser = CatalogBrowser(poke_client=poke_client)
    return _browser


async def close_clients():
    """Closes the shared HTTP client, if one was created."""
    global _poke_client, _browser
    if _poke_client is not None:
        await _poke_client.close()
        logger.info("PokeAPI client closed.")
    _poke_client = None
    _browser = None
