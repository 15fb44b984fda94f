"""Run the job board API: ``python -m board_service``."""

import uvicorn

from jobboard.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "board_service.app:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
