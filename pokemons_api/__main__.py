import uvicorn

from .config import Settings
from .logging_config import configure_logging


def main():
    settings = Settings.from_env()
    logger = configure_logging(settings.log_level)
    logger.info("Starting run on port %s", settings.port)
    uvicorn.run(
        "pokemons_api.api.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
