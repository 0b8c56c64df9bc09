"""Shared fixtures: a realistic puzzle page and its embedded payload."""
import json

import pytest

from gamedata.cache import DailyCache

GAME_DATA = {
    "id": 1234,
    "printDate": "2024-03-11",
    "sides": ["XOE", "LRN", "TIP", "AUS"],
    "ourSolution": ["EXPLOITS", "SNARL"],
    "par": 5,
    "dictionary": ["EXPLOITS", "SNARL", "TOXIN", "NATURALS"],
    "editor": "Sam Ezersky",
}


def make_page(game_data: dict | str, marker: str = "window.gameData = ") -> str:
    literal = game_data if isinstance(game_data, str) else json.dumps(game_data)
    return (
        "<!DOCTYPE html><html><head><title>Letter Boxed</title>"
        '<script>window.env = {"stage": "prod"};</script>'
        f"<script>{marker}{literal};</script>"
        '</head><body><div id="pz-game-root"></div>'
        "<script>function init() { if (window.gameData) { start(); } }</script>"
        "</body></html>"
    )


@pytest.fixture
def game_data():
    return json.loads(json.dumps(GAME_DATA))


@pytest.fixture
def page(game_data):
    return make_page(game_data)


@pytest.fixture
def cache():
    return DailyCache()
