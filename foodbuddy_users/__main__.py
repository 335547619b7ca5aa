"""Serve the user service with uvicorn on the configured host and port."""

import uvicorn

from .core.app_factory import create_application
from .core.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(create_application(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
