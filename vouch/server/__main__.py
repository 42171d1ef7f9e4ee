import uvicorn

from .app import create_app
from .config import get_settings
from .logging import get_logger

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    log.info("server_config", host=settings.HOST, port=settings.PORT)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,  # Logging is configured by create_app()
    )


if __name__ == "__main__":
    main()
