"""
Shape checks for the parsed game payload.
Rules run in a fixed order and the first failure decides the error. Profiles
decide whether the word dictionary is required.
"""

from dataclasses import dataclass

from gamedata.errors import InvalidDictionary, InvalidSides, InvalidSolution

SIDE_COUNT = 4


@dataclass(frozen=True)
class ValidationProfile:
    """Named set of payload requirements."""

    name: str
    require_dictionary: bool


# Registry: profile name -> profile
_registry: dict[str, ValidationProfile] = {}


def register_profile(profile: ValidationProfile) -> None:
    """Register a profile under its name. Re-registering overwrites."""
    _registry[profile.name] = profile


def get_profile(name: str) -> ValidationProfile:
    """Return profile for name; raise if unknown."""
    profile = _registry.get(name)
    if profile is None:
        raise ValueError(f"Unknown validation profile: {name}. Registered: {list(_registry)}")
    return profile


register_profile(ValidationProfile(name="full", require_dictionary=True))
register_profile(ValidationProfile(name="minimal", require_dictionary=False))


def validate(value: object, profile: str | ValidationProfile = "full") -> dict:
    """
    Check that value has the game payload shape and return it unchanged.

    Args:
        value: Parsed JSON (anything json.loads can return).
        profile: Profile name or instance; "full" requires "dictionary".

    Returns:
        value, typed as the payload dict.

    Raises:
        InvalidSides: "sides" missing or not a list of exactly 4 elements.
        InvalidSolution: "ourSolution" missing or not a list.
        InvalidDictionary: profile requires "dictionary" and it is missing or not a list.
    """
    if isinstance(profile, str):
        profile = get_profile(profile)

    if not isinstance(value, dict):
        raise InvalidSides(f"Invalid sides data: payload is {type(value).__name__}, not an object")

    sides = value.get("sides")
    if not isinstance(sides, list) or len(sides) != SIDE_COUNT:
        raise InvalidSides(f"Invalid sides data: expected a list of {SIDE_COUNT}, got {sides!r:.80}")

    if not isinstance(value.get("ourSolution"), list):
        raise InvalidSolution("Invalid solution data: ourSolution must be a list")

    if profile.require_dictionary and not isinstance(value.get("dictionary"), list):
        raise InvalidDictionary("Invalid dictionary data: dictionary must be a list")

    return value
