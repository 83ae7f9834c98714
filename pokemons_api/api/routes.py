from fastapi import APIRouter, Depends, Path, Request

from ..db.store import PokemonStore
from ..errors import PokemonNotFound
from .docs import ROUTE_DOCS
from .schemas import Pokemon

router = APIRouter()


def get_store(request: Request) -> PokemonStore:
    return request.app.state.store


@router.get("/pokemons", **ROUTE_DOCS["list_pokemons"])
async def list_pokemons(store: PokemonStore = Depends(get_store)):
    return await store.list_all()


@router.get("/pokemons/{id}", **ROUTE_DOCS["get_pokemon"])
async def get_pokemon(
    id: int = Path(..., description="ID of the pokemon to get"),
    store: PokemonStore = Depends(get_store),
):
    rows = await store.get_by_id(id)
    if not rows:
        raise PokemonNotFound()
    return rows


@router.post("/pokemons", **ROUTE_DOCS["create_pokemon"])
async def create_pokemon(pokemon: Pokemon, store: PokemonStore = Depends(get_store)):
    # echoes the request body, not the stored row
    result = await store.create(pokemon.model_dump())
    return {"message": "Create pokemon success", "result": result}


@router.put("/pokemons/{id}", **ROUTE_DOCS["update_pokemon"])
async def update_pokemon(
    pokemon: Pokemon,
    id: int = Path(..., description="ID of the pokemon to update"),
    store: PokemonStore = Depends(get_store),
):
    result = await store.update(id, pokemon.model_dump())
    return {"message": "Update Pokemon success", "result": result}


@router.delete("/pokemons/{id}", **ROUTE_DOCS["delete_pokemon"])
async def delete_pokemon(
    id: int = Path(..., description="ID of the pokemon to delete"),
    store: PokemonStore = Depends(get_store),
):
    await store.delete(id)
    return {"message": "Pokemon Deleted"}
