"""
Extract the daily Letter Boxed game data embedded in the NYT puzzle page and
serve it through a cache that refreshes once per New York calendar day.
"""

from gamedata.cache import DailyCache
from gamedata.errors import (
    ErrorKind,
    GameDataError,
    InvalidDictionary,
    InvalidSides,
    InvalidSolution,
    JsonSyntaxError,
    MarkerNotFound,
    UnterminatedLiteral,
)
from gamedata.extractor import GAME_DATA_MARKER, extract, load_game_data, locate_marker
from gamedata.service import GameDataService
from gamedata.validator import validate

__all__ = [
    "DailyCache",
    "ErrorKind",
    "GAME_DATA_MARKER",
    "GameDataError",
    "GameDataService",
    "InvalidDictionary",
    "InvalidSides",
    "InvalidSolution",
    "JsonSyntaxError",
    "MarkerNotFound",
    "UnterminatedLiteral",
    "extract",
    "load_game_data",
    "locate_marker",
    "validate",
]
