"""Client modules for external API communication."""
from .pokeapi_client import (
    CatalogClientError,
    HttpFailure,
    NetworkFailure,
    PokeAPIClient,
    ResponseFormatFailure,
)

__all__ = [
    'PokeAPIClient',
    'CatalogClientError',
    'NetworkFailure',
    'HttpFailure',
    'ResponseFormatFailure',
]
