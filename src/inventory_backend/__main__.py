# inventory_backend/__main__.py
import uvicorn

from inventory_backend.config.settings import get_settings
from inventory_backend.web.api import create_app


def main():
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
