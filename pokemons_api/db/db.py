"""Engine factory and declarative base shared by the store and the loader."""
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_engine(url) -> AsyncEngine:
    """Create the process-wide pooled engine.

    Connections are opened lazily by the pool and checked out per store
    call; nothing here pings or reconnects.
    """
    engine = create_async_engine(url)
    logger.info("Database engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine
