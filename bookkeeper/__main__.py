"""
Run the web server.

    python -m bookkeeper
"""

import uvicorn

from bookkeeper.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bookkeeper.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
