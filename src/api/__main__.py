"""
Contactbook web server.
Run: python -m api (from repo root, with .env or env vars set).
"""

import uvicorn

from api.main import app


def main() -> None:
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
