"""
Refresh orchestration: serve today's payload from the daily cache, or fetch the
puzzle page, extract and validate the embedded game data, and store it.
A failed refresh leaves the existing entry untouched and propagates the error;
stale data is never served as a fallback.
"""

import logging
import os
from datetime import datetime
from typing import Callable

from gamedata.cache import DailyCache
from gamedata.errors import GameDataError
from gamedata.extractor import GAME_DATA_MARKER, MarkerPreview, load_game_data, locate_marker
from gamedata.nyt import NYT_PUZZLE_URL, default_headers, fetch_page
from gamedata.validator import ValidationProfile, get_profile

logger = logging.getLogger(__name__)

GAMEDATA_PROFILE = os.environ.get("GAMEDATA_PROFILE", "full")

# (url, headers) -> page text
Fetcher = Callable[[str, dict[str, str]], str]


class GameDataService:
    """Serves the daily game payload through a DailyCache."""

    def __init__(
        self,
        cache: DailyCache | None = None,
        fetcher: Fetcher = fetch_page,
        url: str = NYT_PUZZLE_URL,
        headers: dict[str, str] | None = None,
        marker: str = GAME_DATA_MARKER,
        profile: str | ValidationProfile = GAMEDATA_PROFILE,
    ):
        self.cache = cache if cache is not None else DailyCache()
        self.fetcher = fetcher
        self.url = url
        self.headers = headers or default_headers()
        self.marker = marker
        # Resolved here so an unknown profile name fails at startup, not per request
        self.profile = get_profile(profile) if isinstance(profile, str) else profile

    def _refresh(self) -> dict:
        html = self.fetcher(self.url, self.headers)
        try:
            return load_game_data(html, self.marker, self.profile)
        except GameDataError as e:
            logger.error(
                "Game data refresh failed kind=%s offset=%s url=%s: %s",
                e.kind.value,
                e.offset,
                self.url,
                e,
            )
            logger.error("Content preview: %r", e.snippet)
            raise

    def get_game_data(self, now: datetime | None = None) -> dict:
        """Return today's payload, refreshing the cache on a miss."""
        return self.cache.get_or_fetch(self._refresh, now)

    def debug_content(self) -> MarkerPreview:
        """Fetch the page (bypassing the cache) and report where the marker is."""
        html = self.fetcher(self.url, self.headers)
        preview = locate_marker(html, self.marker)
        logger.info("Debug content found=%s start_index=%s", preview.found, preview.start_index)
        return preview
