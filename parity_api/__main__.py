"""Run the service with uvicorn: `python -m parity_api`."""

import uvicorn

from parity_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "parity_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
