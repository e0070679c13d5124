"""Run the service with uvicorn: ``python -m kanowins`` or the ``kanowins`` script."""

import uvicorn

from kanowins.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "kanowins.app:app",
        host="0.0.0.0",
        port=settings.port,
        log_config=None,  # logging is configured in the app lifespan
    )


if __name__ == "__main__":
    main()
