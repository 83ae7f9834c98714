"""Static description of the API surface and the OpenAPI document built from it.

Routes pick their annotations out of ``ROUTE_DOCS`` when they are declared;
``install_openapi`` assembles the document once, on first request for it.
Nothing here runs while a pokemons request is being handled.
"""
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from .schemas import Pokemon

TITLE = "Pokemons API"
VERSION = "1.0.0"
DESCRIPTION = "API to manage Pokemons"
SERVERS = [{"url": "http://localhost:3000", "description": "Local server"}]

DOCS_URL = "/api-docs"
OPENAPI_URL = "/api-docs/openapi.json"

POKEMON_REF = {"$ref": "#/components/schemas/Pokemon"}

_JSON = "application/json"
_SERVER_ERROR = {500: {"description": "Internal server error"}}
_WRITE_ERROR = {500: {"description": "Internal server error, or a body naming a column that cannot be written"}}

ROUTE_DOCS: Dict[str, Dict[str, Any]] = {
    "list_pokemons": {
        "summary": "Get all pokemons",
        "responses": {
            200: {
                "description": "A list of pokemons",
                "content": {_JSON: {"schema": {"type": "array", "items": POKEMON_REF}}},
            },
            **_SERVER_ERROR,
        },
    },
    "get_pokemon": {
        "summary": "Get a pokemon by its ID",
        "responses": {
            200: {
                "description": "The pokemon object",
                "content": {_JSON: {"schema": {"type": "array", "items": POKEMON_REF}}},
            },
            404: {"description": "Pokemon not found"},
            **_SERVER_ERROR,
        },
    },
    "create_pokemon": {
        "summary": "Create a new pokemon",
        "responses": {200: {"description": "The created pokemon"}, **_WRITE_ERROR},
    },
    "update_pokemon": {
        "summary": "Update a pokemon by its ID",
        "responses": {200: {"description": "The updated pokemon"}, **_WRITE_ERROR},
    },
    "delete_pokemon": {
        "summary": "Delete a pokemon by its ID",
        "responses": {200: {"description": "Pokemon deleted successfully"}, **_SERVER_ERROR},
    },
}

APP_OPTIONS: Dict[str, Any] = {
    "title": TITLE,
    "version": VERSION,
    "description": DESCRIPTION,
    "servers": SERVERS,
    "docs_url": DOCS_URL,
    "openapi_url": OPENAPI_URL,
    "redoc_url": None,
}


def install_openapi(app: FastAPI) -> None:
    def openapi() -> Dict[str, Any]:
        if app.openapi_schema is None:
            schema = get_openapi(
                title=TITLE,
                version=VERSION,
                description=DESCRIPTION,
                servers=SERVERS,
                routes=app.routes,
            )
            schemas = schema.setdefault("components", {}).setdefault("schemas", {})
            schemas.setdefault("Pokemon", Pokemon.model_json_schema())
            app.openapi_schema = schema
        return app.openapi_schema

    app.openapi = openapi
