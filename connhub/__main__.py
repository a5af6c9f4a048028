"""Run the API server with ``python -m connhub``."""

import uvicorn

from connhub.core.config import settings


def main() -> None:
    uvicorn.run(
        "connhub.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    main()
