"""
Pytest configuration and fixtures
"""
import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine

from pokemons_api.api.main import create_app
from pokemons_api.config import Settings
from pokemons_api.db.db import Base
from pokemons_api.db import models  # noqa: F401


async def _create_schema(url):
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


@pytest.fixture
def database_url(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'pokemons.db'}"
    asyncio.run(_create_schema(url))
    return url


@pytest.fixture
def settings(database_url):
    return Settings(database_url=database_url)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def pikachu():
    return {
        "name": "pikachu",
        "type": "electric",
        "color": "yellow",
        "habitat": "forest",
        "height": 4,
        "weight": 60,
        "description": "Stores electricity in its cheeks.",
    }
