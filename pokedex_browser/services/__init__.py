"""Client-side orchestration of the catalog: aggregation, collection, search and detail loading."""
from .catalog_browser import CatalogBrowser, CatalogStatus, CatalogView, DetailPanel
from .collection_state import CollectionState
from .detail_aggregator import DetailAggregator
from .detail_loader import DetailLoader, DetailState

__all__ = [
    'CatalogBrowser',
    'CatalogStatus',
    'CatalogView',
    'DetailPanel',
    'CollectionState',
    'DetailAggregator',
    'DetailLoader',
    'DetailState',
]
