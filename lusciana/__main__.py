"""Run the backend with uvicorn: ``python -m lusciana``."""
import uvicorn

from lusciana.app import create_app
from lusciana.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
