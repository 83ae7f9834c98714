import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings
from ..db.db import create_engine
from ..db.store import PokemonStore
from ..errors import register_exception_handlers
from .docs import APP_OPTIONS, install_openapi
from .routes import router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # one pooled engine for the life of the process
        engine = create_engine(settings.sqlalchemy_url)
        app.state.store = PokemonStore(engine)
        yield
        logger.info("Disposing database engine")
        await engine.dispose()

    app = FastAPI(lifespan=lifespan, **APP_OPTIONS)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    register_exception_handlers(app)
    install_openapi(app)
    return app


app = create_app()
