import logging
from enum import Enum

from pokedex_browser.clients.pokeapi_client import CatalogClientError, PokeAPIClient
from pokedex_browser.models import FullDetailRecord

logger = logging.getLogger(__name__)

DETAIL_ERROR_MESSAGE = "Unable to load Pokemon details. Please check your connection and try again."


class DetailState(str, Enum):
    CLOSED = "closed"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class DetailLoader:
    """Fetch lifecycle of the single record shown in the detail view.

    closed -> loading -> loaded | failed; close() returns to closed from
    anywhere. Each request carries the generation that was current when it
    was issued, and its response is dropped if the generation moved on
    (another selection, a retry, or a close).
    """

    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client
        self._generation = 0
        self.state = DetailState.CLOSED
        self.url: str | None = None
        self.record: FullDetailRecord | None = None
        self.error: str | None = None

    async def select(self, url: str) -> None:
        """Opens the detail view for `url`. Always fetches, even for the same url."""
        self.url = url
        await self._load()

    async def retry(self) -> None:
        """Re-issues the fetch for the current selection after a failure."""
        if self.state is not DetailState.FAILED:
            logger.debug(f"Detail retry ignored in state {self.state.value}")
            return
        await self._load()

    def close(self) -> None:
        if self.state is DetailState.CLOSED:
            return
        self._generation += 1
        self.state = DetailState.CLOSED
        self.url = None
        self.record = None
        self.error = None

    async def _load(self) -> None:
        self._generation += 1
        generation = self._generation
        url = self.url
        self.state = DetailState.LOADING
        self.record = None
        self.error = None

        try:
            record = await self._poke_client.fetch_full_detail(url)
        except CatalogClientError as e:
            if generation != self._generation:
                logger.warning(f"Discarding stale detail failure for {url}")
                return
            logger.warning(f"Detail fetch failed for {url}: {e.reason}")
            self.state = DetailState.FAILED
            self.error = DETAIL_ERROR_MESSAGE
            return

        if generation != self._generation:
            logger.warning(f"Discarding stale detail response for {url}")
            return
        self.state = DetailState.LOADED
        self.record = record
