from __future__ import annotations
import logging
import uvicorn
from repo_entropy.infrastructure.config import get_settings

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def main() -> None:
    """Start the uvicorn ASGI server."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "repo_entropy.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
