"""Entrypoint that reads PORT from the environment or .env and starts the server."""
import uvicorn

from status_service.config import settings

HOST = "0.0.0.0"


def main():
    uvicorn.run("status_service.main:app", host=HOST, port=settings.port)


if __name__ == "__main__":
    main()
