"""Run the Artistes API with uvicorn: ``python -m api``."""
import uvicorn

from api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("api.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
