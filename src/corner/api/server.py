"""
ASGI Entry Point for the Corner API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads environment variables from `.env` first so that settings read at
import time (data directory, timezone, quote source) see them.

Usage
-----
Run via the CLI:
    $ corner serve --port 8000

Or via uvicorn directly:
    $ uvicorn corner.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# Load .env BEFORE the settings module is imported through the app factory.
load_dotenv(dotenv_path=Path(".env"))

from corner.api.app import create_app  # noqa: E402
from corner.core.settings import load_settings  # noqa: E402

app = create_app()


def main(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server locally."""
    cfg = load_settings()
    print(f"{'[ Corner ]':=^60}")
    print(f"{'timezone':<12} : {cfg.timezone} ({cfg.tz_label})")
    print(f"{'data dir':<12} : {cfg.data_dir.resolve()}")
    print(f"{'quote url':<12} : {cfg.quote_url}")
    print(f"{'='*60}\n")

    uvicorn.run(
        "corner.api.server:app",
        host=host,
        port=port,
        reload=reload,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
