"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
or: python -m api.main
"""
import logging
from pathlib import Path
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import books, health
from api.static import AssetFiles
from settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Build the application.

    API routers are registered before the static mount; the router matches
    in registration order, so API paths shadow same-named assets.
    """
    config = config or default_settings

    app = FastAPI(
        title="Bookshelf",
        description="Static frontend plus a small books API",
        version="0.1.0",
        # Everything not claimed by the API belongs to the asset root.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(books.router, prefix="/books", tags=["books"])

    logger.info("Serving static assets from %s", Path(config.ASSET_ROOT).resolve())
    app.mount("/", AssetFiles(directory=config.ASSET_ROOT), name="static")

    return app


app = create_app()


def serve() -> None:
    """Run the server until the process is terminated."""
    uvicorn.run(
        "api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL,
        reload=default_settings.RELOAD,
    )


if __name__ == "__main__":
    serve()
