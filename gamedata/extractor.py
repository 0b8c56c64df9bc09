"""
Extract the game data object embedded in the puzzle page as
`window.gameData = {...};`. No HTML or JavaScript parser: a single left-to-right
scan counts braces outside JSON strings, honoring backslash escapes, so string
values containing braces, quotes or semicolons do not end the literal early.
"""

import json
import logging
from dataclasses import dataclass

from gamedata.errors import (
    JsonSyntaxError,
    MarkerNotFound,
    UnterminatedLiteral,
    text_window,
)
from gamedata.validator import ValidationProfile, validate

logger = logging.getLogger(__name__)

GAME_DATA_MARKER = "window.gameData = "

# Whitespace JSON allows before a value
_JSON_WHITESPACE = " \t\n\r"


@dataclass(frozen=True)
class MarkerPreview:
    """Where the marker sits in a document, for debugging upstream page changes."""

    found: bool
    start_index: int
    content_preview: str


def extract(document: str, marker: str = GAME_DATA_MARKER) -> str:
    """
    Return the balanced JSON object literal that starts right after marker.

    Leading whitespace between the marker and the opening brace is kept in the
    returned literal. Any other leading character is treated as an unterminated
    literal.

    Args:
        document: Full page text.
        marker: Literal text that precedes the object.

    Returns:
        Substring from the first character after the marker through the brace
        that closes the outermost object.

    Raises:
        MarkerNotFound: marker does not occur in document.
        UnterminatedLiteral: braces never balance before the document ends.
    """
    marker_index = document.find(marker)
    if marker_index == -1:
        raise MarkerNotFound(
            f"Could not find data start marker {marker!r}",
            snippet=document[:80],
        )

    start = marker_index + len(marker)
    i = start
    n = len(document)
    while i < n and document[i] in _JSON_WHITESPACE:
        i += 1
    if i >= n or document[i] != "{":
        raise UnterminatedLiteral(
            "No JSON object follows the data start marker",
            offset=i,
            snippet=text_window(document, i),
        )

    depth = 0
    in_string = False
    escape_next = False
    for i in range(i, n):
        char = document[i]
        if escape_next:
            escape_next = False
            continue
        if char == "\\" and in_string:
            escape_next = True
            continue
        if char == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return document[start : i + 1]

    raise UnterminatedLiteral(
        f"Document ended with {depth} unclosed brace(s)",
        offset=start,
        snippet=text_window(document, n, radius=80),
    )


def parse_literal(literal: str, offset: int = 0) -> object:
    """
    Parse an extracted literal with json.loads.

    offset is the literal's position in the source document; it is added to the
    decoder's position so the error points into the page, not the literal.
    """
    try:
        return json.loads(literal)
    except json.JSONDecodeError as e:
        raise JsonSyntaxError(
            f"JSON parse error: {e.msg}",
            offset=offset + e.pos,
            snippet=text_window(literal, e.pos),
        ) from e
    except RecursionError as e:
        raise JsonSyntaxError(
            "JSON parse error: nesting too deep",
            offset=offset,
            snippet=literal[:80],
        ) from e


def load_game_data(
    document: str,
    marker: str = GAME_DATA_MARKER,
    profile: str | ValidationProfile = "full",
) -> dict:
    """Extract, parse and validate the game payload embedded in document."""
    literal = extract(document, marker)
    offset = document.find(marker) + len(marker)
    value = parse_literal(literal, offset)
    payload = validate(value, profile)
    logger.info(
        "Extracted game data offset=%s literal_chars=%s sides=%s solution_words=%s",
        offset,
        len(literal),
        len(payload["sides"]),
        len(payload["ourSolution"]),
    )
    return payload


def locate_marker(
    document: str,
    marker: str = GAME_DATA_MARKER,
    preview_chars: int = 200,
) -> MarkerPreview:
    """
    Report whether marker occurs in document and show the text that follows it.
    Without the marker the preview is the start of the page.
    """
    index = document.find(marker)
    if index == -1:
        return MarkerPreview(found=False, start_index=-1, content_preview=document[:preview_chars])
    return MarkerPreview(
        found=True,
        start_index=index,
        content_preview=document[index : index + preview_chars],
    )
