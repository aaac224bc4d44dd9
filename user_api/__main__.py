"""Run the API with uvicorn: python -m user_api"""

# External package imports
import uvicorn
from dotenv import load_dotenv

# Local application imports
from .core.config import get_settings


def main() -> None:
    load_dotenv()
    settings = get_settings()
    uvicorn.run(
        "user_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
