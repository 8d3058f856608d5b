"""Run the address lookup service under uvicorn."""

import uvicorn

from app.core.config import settings


def main() -> None:
    """Start the HTTP server on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
