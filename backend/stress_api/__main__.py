"""Run the server: python -m stress_api (binds HOST:PORT from the environment)."""

import uvicorn

from stress_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "stress_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
