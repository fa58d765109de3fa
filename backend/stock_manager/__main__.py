"""
Run the API with uvicorn: `python -m stock_manager` or `stock-manager`.

HOST and PORT come from the environment (see config.py); PORT defaults to 3000.
"""

import uvicorn

from stock_manager.config import settings


def main() -> None:
    uvicorn.run(
        "stock_manager.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
