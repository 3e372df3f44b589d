"""Pokédex catalog browser: aggregates, filters and paginates PokeAPI records."""

__version__ = "0.1.0"
