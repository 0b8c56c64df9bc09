"""
NYT Letter Boxed page client.
Fetches the puzzle page HTML with a browser-like User-Agent.
Loads NYT_PUZZLE_URL / NYT_USER_AGENT / FETCH_TIMEOUT from .env in the project root.
"""

import logging
import os
from pathlib import Path

import requests
from dotenv import load_dotenv

# Load .env from project root (gamedata/nyt/client.py -> parent.parent.parent = project root)
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

logger = logging.getLogger(__name__)

NYT_PUZZLE_URL = os.environ.get("NYT_PUZZLE_URL", "https://www.nytimes.com/puzzles/letter-boxed")
NYT_USER_AGENT = os.environ.get(
    "NYT_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36",
)
FETCH_TIMEOUT = int(os.environ.get("FETCH_TIMEOUT", "30"))


def default_headers() -> dict[str, str]:
    """Request headers the puzzle page expects from a browser."""
    return {"User-Agent": NYT_USER_AGENT}


def fetch_page(
    url: str = NYT_PUZZLE_URL,
    headers: dict[str, str] | None = None,
    *,
    timeout: int = FETCH_TIMEOUT,
) -> str:
    """
    Fetch the puzzle page and return its body as text.

    Args:
        url: Page URL.
        headers: Request headers; defaults to default_headers().
        timeout: Request timeout in seconds.

    Returns:
        Response body decoded as UTF-8.
    """
    try:
        resp = requests.get(url, headers=headers or default_headers(), timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("NYT page fetch failed url=%s: %s", url, e)
        raise

    html = resp.content.decode("utf-8", errors="replace")
    logger.info("NYT page 200 url=%s n_chars=%s", url, len(html))
    return html
