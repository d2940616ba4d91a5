"""Eventhub CLI entry point: serve the API with uvicorn."""

import uvicorn

from eventhub.config import settings


def main() -> None:
    uvicorn.run(
        "eventhub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
