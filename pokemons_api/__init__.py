"""Pokemons API: CRUD over the ``pokemons`` table with OpenAPI docs."""

__version__ = "1.0.0"
