# run_server.py
"""
Serve the Hello API with uvicorn, using HELLO_HOST / HELLO_PORT.
"""

import logging

import uvicorn

from app.config import Settings
from app.main import create_app


def main():
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
