"""NYT Letter Boxed page client."""

from gamedata.nyt.client import (
    NYT_PUZZLE_URL,
    default_headers,
    fetch_page,
)

__all__ = [
    "NYT_PUZZLE_URL",
    "default_headers",
    "fetch_page",
]
