"""Run the service: ``python -m tradebook``."""

import uvicorn

from tradebook.config import settings


def main() -> None:
    uvicorn.run(
        "tradebook.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
