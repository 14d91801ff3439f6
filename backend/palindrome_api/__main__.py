"""
Palindrome API — Server Entry Point
====================================

Usage:
    python -m palindrome_api

Binds uvicorn to BACKEND_HOST:BACKEND_PORT (default 0.0.0.0:8080).
"""

import uvicorn

from palindrome_api.config import settings


def main() -> None:
    uvicorn.run(
        "palindrome_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
