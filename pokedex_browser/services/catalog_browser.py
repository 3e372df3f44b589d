import logging
from enum import Enum

from pydantic import BaseModel

from pokedex_browser.clients.pokeapi_client import CatalogClientError, PokeAPIClient
from pokedex_browser.config import settings
from pokedex_browser.models import DetailRecord
from pokedex_browser.presentation import CardView, DetailView, build_card, build_detail
from pokedex_browser.services.collection_state import CollectionState
from pokedex_browser.services.detail_aggregator import DetailAggregator
from pokedex_browser.services.detail_loader import DetailLoader, DetailState
from pokedex_browser.services.search import clamp_page, derive_page, filter_records, total_pages

logger = logging.getLogger(__name__)

LIST_ERROR_MESSAGE = "Unable to load Pokemon. Please check your connection and try again."


class CatalogStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADING_DETAILS = "loading_details"
    READY = "ready"
    NO_RESULTS = "no_results"
    FAILED = "failed"


class CatalogView(BaseModel):
    status: CatalogStatus
    message: str | None = None
    error: str | None = None
    query: str
    page: int
    total_pages: int
    total_count: int
    filtered_count: int
    items: list[CardView]
    pagination_label: str | None = None
    has_previous: bool = False
    has_next: bool = False


class DetailPanel(BaseModel):
    state: DetailState
    url: str | None = None
    error: str | None = None
    record: DetailView | None = None


class CatalogBrowser:
    """Owns the catalog fetch cycle, the search query and the current page.

    Every user intent of the UI lands here. Derived views are recomputed on
    each call to view(); nothing derived is stored.
    """

    def __init__(self, poke_client: PokeAPIClient, page_size: int = settings.page_size):
        self._poke_client = poke_client
        self._aggregator = DetailAggregator(poke_client)
        self.collection = CollectionState()
        self.detail = DetailLoader(poke_client)
        self.page_size = page_size
        self.status = CatalogStatus.IDLE
        self.error: str | None = None
        self.query = ""
        self._page = 1
        self._generation = 0

    # --- fetch cycle ---

    async def load(self) -> None:
        """Runs a full fetch cycle: list, then every detail, then a wholesale replace."""
        self._generation += 1
        generation = self._generation
        self.status = CatalogStatus.LOADING
        self.error = None
        logger.info(f"Catalog fetch cycle {generation} started")

        try:
            references = await self._poke_client.fetch_list()
        except CatalogClientError as e:
            if generation != self._generation:
                return
            logger.error(f"Catalog list fetch failed: {e.reason}")
            self.status = CatalogStatus.FAILED
            self.error = LIST_ERROR_MESSAGE
            return

        if generation != self._generation:
            logger.warning(f"Discarding list of superseded cycle {generation}")
            return
        self.status = CatalogStatus.LOADING_DETAILS
        try:
            records = await self._aggregator.resolve(references)
        except Exception:
            # Never leave the view mid-load: a failed cycle can be retried
            if generation == self._generation:
                logger.error(f"Catalog fetch cycle {generation} aborted", exc_info=True)
                self.status = CatalogStatus.FAILED
                self.error = LIST_ERROR_MESSAGE
            raise

        if generation != self._generation:
            logger.warning(f"Discarding details of superseded cycle {generation}")
            return
        self.collection.replace(records)
        self.status = CatalogStatus.READY
        logger.info(f"Catalog fetch cycle {generation} finished with {len(self.collection)} records")

    async def ensure_loaded(self) -> None:
        if self.status is CatalogStatus.IDLE:
            await self.load()

    async def retry_list(self) -> None:
        await self.load()

    # --- search & pagination ---

    def search(self, query: str) -> None:
        if query != self.query:
            self.query = query
            self._page = 1

    def select_page(self, page: int) -> None:
        filtered = filter_records(self.collection.get_all(), self.query)
        self._page = clamp_page(page, total_pages(len(filtered), self.page_size))

    @property
    def page(self) -> int:
        filtered = filter_records(self.collection.get_all(), self.query)
        return clamp_page(self._page, total_pages(len(filtered), self.page_size))

    # --- detail view ---

    async def select_item(self, url: str) -> None:
        await self.detail.select(url)

    async def retry_detail(self) -> None:
        await self.detail.retry()

    def close_detail(self) -> None:
        self.detail.close()

    async def resolve_card(self, url: str) -> DetailRecord:
        """Card record for `url`; reuses the collection when it already holds it."""
        record = self.collection.find(url)
        if record is not None:
            return record
        return await self._poke_client.fetch_detail(url)

    # --- views ---

    def view(self) -> CatalogView:
        records = self.collection.get_all()
        derived = derive_page(records, self.query, self._page, self.page_size)
        status = self.status
        message = None
        items: list[CardView] = []

        if status is CatalogStatus.LOADING:
            message = "Loading Pokemon..."
        elif status is CatalogStatus.LOADING_DETAILS and not records:
            message = "Loading Pokemon details..."
        elif status in (CatalogStatus.READY, CatalogStatus.LOADING_DETAILS):
            items = [build_card(record) for record in derived.visible]
            if status is CatalogStatus.READY and not derived.filtered:
                status = CatalogStatus.NO_RESULTS
                message = f'No Pokemon found matching "{self.query}"'

        pagination_label = None
        if items and derived.total_pages > 1:
            noun = "found" if self.query else "total"
            pagination_label = f"Page {derived.page} of {derived.total_pages} ({len(derived.filtered)} {noun})"

        return CatalogView(
            status=status,
            message=message,
            error=self.error,
            query=self.query,
            page=derived.page,
            total_pages=derived.total_pages,
            total_count=len(records),
            filtered_count=len(derived.filtered),
            items=items,
            pagination_label=pagination_label,
            has_previous=derived.page > 1,
            has_next=derived.page < derived.total_pages,
        )

    def detail_view(self) -> DetailPanel:
        loader = self.detail
        return DetailPanel(
            state=loader.state,
            url=loader.url,
            error=loader.error,
            record=build_detail(loader.record) if loader.record is not None else None,
        )
