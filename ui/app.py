"""
HTTP surface for the daily Letter Boxed game data. GET /api/nyt returns today's
payload (cached per New York calendar day); GET /api/debug-content shows where the
game data marker sits in the live page, for diagnosing upstream page changes.
"""

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

import requests
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

from gamedata.errors import GameDataError
from gamedata.service import GameDataService

logger = logging.getLogger(__name__)

# Ensure refresh logs are visible (cache hits, fetch failures, extraction errors)
for _log in ("gamedata.cache", "gamedata.service", "gamedata.nyt", "ui.app"):
    logging.getLogger(_log).setLevel(logging.INFO)

DEFAULT_ALLOWED_ORIGINS = "http://localhost:5173,https://tommylam.github.io"


def _allowed_origins() -> list[str]:
    """ALLOWED_ORIGINS comma-separated, or the default front-end origins."""
    raw = os.environ.get("ALLOWED_ORIGINS") or DEFAULT_ALLOWED_ORIGINS
    return [o.strip() for o in raw.split(",") if o.strip()]


def _timestamp() -> str:
    """UTC ISO-8601 with milliseconds and a Z suffix, e.g. 2024-03-11T14:05:09.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DebugContentResponse(BaseModel):
    found: bool
    startIndex: int
    contentPreview: str
    timestamp: str


def create_app(
    service: GameDataService | None = None,
    allowed_origins: list[str] | None = None,
) -> FastAPI:
    """Build the app around a GameDataService (one daily cache per app)."""
    app = FastAPI(title="Letter Boxed Game Data")
    app.state.game_data_service = service if service is not None else GameDataService()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins if allowed_origins is not None else _allowed_origins(),
        allow_methods=["GET"],
    )

    @app.get("/api/nyt")
    def get_nyt(request: Request):
        """
        Today's game data. Served from the cache while the New York calendar day
        is unchanged; otherwise fetched, extracted and validated first.
        On failure returns 500 with error details (stale data is not served).
        """
        svc: GameDataService = request.app.state.game_data_service
        try:
            return svc.get_game_data()
        except (GameDataError, requests.RequestException) as e:
            logger.error("API error: %s", e)
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Failed to fetch NYT data",
                    "details": str(e),
                    "timestamp": _timestamp(),
                },
            )

    @app.get("/api/debug-content", response_model=DebugContentResponse)
    def debug_content(request: Request):
        """Fetch the live page and report whether and where the marker occurs."""
        svc: GameDataService = request.app.state.game_data_service
        try:
            preview = svc.debug_content()
        except requests.RequestException as e:
            logger.error("Debug error: %s", e)
            return JSONResponse(
                status_code=500,
                content={"error": "Debug error", "details": str(e)},
            )
        return DebugContentResponse(
            found=preview.found,
            startIndex=preview.start_index,
            contentPreview=preview.content_preview,
            timestamp=_timestamp(),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    port = int(os.environ.get("PORT", "3000"))
    logger.info("Server running on port %s", port)
    uvicorn.run(app, host="0.0.0.0", port=port)
