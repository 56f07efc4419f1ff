"""
Run the API server: ``python -m guests`` or the ``guests`` console script.
"""

import uvicorn

from guests.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "guests.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development() and settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
