"""Run the API server with uvicorn: ``python -m ucsb_api.server``."""

import uvicorn

from ucsb_api.server.core.config import settings


def main() -> None:
    uvicorn.run(
        "ucsb_api.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
