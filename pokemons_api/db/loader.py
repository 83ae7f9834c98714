"""Seed the pokemons table from a JSON dump (one object per pokemon)."""
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from sqlalchemy import insert

from .db import Base, create_engine
from .models import Pokemon

logger = logging.getLogger(__name__)


def normalize_record(p: Dict[str, Any]) -> Dict[str, Any]:
    types = p.get("types")
    if isinstance(types, list):
        types = ", ".join(types)
    else:
        types = p.get("type", types) or ""

    return {
        "name": p.get("name", "Unknown"),
        "type": types,
        "color": p.get("color", "unknown"),
        "habitat": p.get("habitat", "unknown"),
        "height": int(p.get("height", 0)),
        "weight": int(p.get("weight", 0)),
        "description": p.get("description", "No description available."),
    }


def normalize_records(records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    rows = []
    for p in records:
        try:
            rows.append(normalize_record(p))
        except (AttributeError, TypeError, ValueError) as e:
            name = p.get("name", "unknown") if isinstance(p, dict) else p
            logger.warning("Skipping %r: %s", name, e)
    return rows


async def load_pokemons(records: Iterable[Dict[str, Any]], database_url) -> int:
    rows = normalize_records(records)
    engine = create_engine(database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            if rows:
                await conn.execute(insert(Pokemon.__table__), rows)
    finally:
        await engine.dispose()
    return len(rows)


def load_json_to_db(path: Union[str, Path], database_url: Optional[Any] = None) -> int:
    if database_url is None:
        from ..config import Settings

        database_url = Settings.from_env().sqlalchemy_url

    with open(path, "r", encoding="utf-8") as f:
        pokemons = json.load(f)

    logger.info("Loading %d pokemons into the database...", len(pokemons))
    count = asyncio.run(load_pokemons(pokemons, database_url))
    logger.info("Saved %d pokemons", count)
    return count
