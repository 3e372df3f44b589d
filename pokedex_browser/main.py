import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Path, Query
from pydantic import BaseModel

from pokedex_browser.config import settings
from pokedex_browser.dependencies import close_clients, get_browser
from pokedex_browser.models import PokemonCategory
from pokedex_browser.presentation import CardView, CategoryBadge, build_card, category_color, format_name
from pokedex_browser.services import CatalogBrowser, CatalogView, DetailPanel

logger = logging.getLogger(__name__)
logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup...")
    yield
    logger.info("Application shutdown...")
    await close_clients()


app = FastAPI(
    title="Pokedex Browser",
    description="Aggregates, filters and paginates PokeAPI records for a catalog view with an on-demand detail panel.",
    lifespan=lifespan,
)


class SearchRequest(BaseModel):
    query: str = ""


class SelectRequest(BaseModel):
    url: str


# --- Catalog view ---

@app.get("/catalog", response_model=CatalogView, summary="Current catalog view; the first call activates the fetch")
async def get_catalog(browser: CatalogBrowser = Depends(get_browser)):
    await browser.ensure_loaded()
    return browser.view()


@app.post("/catalog/search", response_model=CatalogView, summary="Sets the search query and resets to page 1")
async def search_catalog(body: SearchRequest, browser: CatalogBrowser = Depends(get_browser)):
    browser.search(body.query)
    return browser.view()


@app.post("/catalog/page/{page}", response_model=CatalogView, summary="Selects a page, clamped to the valid range")
async def select_page(page: int = Path(...), browser: CatalogBrowser = Depends(get_browser)):
    browser.select_page(page)
    return browser.view()


@app.post("/catalog/retry", response_model=CatalogView, summary="Re-runs the whole fetch cycle")
async def retry_catalog(browser: CatalogBrowser = Depends(get_browser)):
    await browser.retry_list()
    return browser.view()


@app.get("/catalog/card", response_model=CardView, summary="Card data for one record")
async def get_card(url: str = Query(...), browser: CatalogBrowser = Depends(get_browser)):
    # Client errors are HTTPExceptions and propagate with their own status
    record = await browser.resolve_card(url)
    return build_card(record)


# --- Detail view ---

@app.get("/detail", response_model=DetailPanel, summary="State of the detail view")
async def get_detail(browser: CatalogBrowser = Depends(get_browser)):
    return browser.detail_view()


@app.post("/detail/select", response_model=DetailPanel, summary="Opens the detail view for a record URL")
async def select_detail(body: SelectRequest, browser: CatalogBrowser = Depends(get_browser)):
    await browser.select_item(body.url)
    return browser.detail_view()


@app.post("/detail/close", response_model=DetailPanel, summary="Closes the detail view")
async def close_detail(browser: CatalogBrowser = Depends(get_browser)):
    browser.close_detail()
    return browser.detail_view()


@app.post("/detail/retry", response_model=DetailPanel, summary="Retries a failed detail fetch")
async def retry_detail(browser: CatalogBrowser = Depends(get_browser)):
    await browser.retry_detail()
    return browser.detail_view()


@app.get("/categories", response_model=list[CategoryBadge], summary="The category taxonomy with display colours")
async def list_categories():
    return [
        CategoryBadge(name=c.value, label=format_name(c.value), color=category_color(c.value))
        for c in PokemonCategory
    ]
