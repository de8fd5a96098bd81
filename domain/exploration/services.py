"""Exploration Bounded Context - Domain Services.

Pure domain logic for robot motion and threat lookup.
NO I/O operations - threat lists are loaded by infrastructure adapters
under `src/infrastructure/threats/` via domain ports.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from domain.exploration.constants import EAST_POS, NORTH_POS, SOUTH_POS, WEST_POS
from domain.exploration.errors import InvalidInitialPositionError
from domain.exploration.value_objects import FieldBounds, Position, ThreatLocation

# ---------------------------------------------------------------------------
# Rotation tables (90 degrees per step, period 4)
# ---------------------------------------------------------------------------
_LEFT_OF = {
    NORTH_POS: WEST_POS,
    WEST_POS: SOUTH_POS,
    SOUTH_POS: EAST_POS,
    EAST_POS: NORTH_POS,
}
_RIGHT_OF = {
    NORTH_POS: EAST_POS,
    EAST_POS: SOUTH_POS,
    SOUTH_POS: WEST_POS,
    WEST_POS: NORTH_POS,
}


def rotate_left(facing: str) -> str:
    """Rotate 90 degrees counter-clockwise. Unknown facings are returned as-is."""
    return _LEFT_OF.get(facing, facing)


def rotate_right(facing: str) -> str:
    """Rotate 90 degrees clockwise. Unknown facings are returned as-is."""
    return _RIGHT_OF.get(facing, facing)


# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------
def move_forward(position: Position, bounds: FieldBounds) -> Position:
    """Advance one cell in the facing direction.

    Only the boundary in the direction of travel is enforced: moving north
    stops at max_y, south at 0, east at max_x, west at 0. Coordinates are
    clamped, never wrapped. A facing outside N/S/E/W has no delta and yields
    an equal (new) position.

    Args:
        position: Current position
        bounds: Field limits

    Returns:
        New Position with the same facing
    """
    x, y = position.x, position.y
    if position.facing == NORTH_POS:
        y = min(y + 1, bounds.max_y)
    elif position.facing == SOUTH_POS:
        y = max(y - 1, 0)
    elif position.facing == EAST_POS:
        x = min(x + 1, bounds.max_x)
    elif position.facing == WEST_POS:
        x = max(x - 1, 0)
    return position.with_coordinates(x, y)


# ---------------------------------------------------------------------------
# Initial Position Parsing
# ---------------------------------------------------------------------------
def parse_initial_position(text: str) -> Position:
    """Parse ``"<x> <y> <facing>"`` into a Position.

    Tokens are whitespace separated; the facing is the first character of the
    third token. No range check is applied to x or y.

    Raises:
        InvalidInitialPositionError: wrong token count or non-integer x/y
    """
    tokens = text.split()
    if len(tokens) != 3:
        raise InvalidInitialPositionError(
            text, f"expected 3 tokens, got {len(tokens)}"
        )
    try:
        x = int(tokens[0])
        y = int(tokens[1])
    except ValueError as exc:
        raise InvalidInitialPositionError(text, "coordinates must be integers") from exc
    return Position(x=x, y=y, facing=tokens[2][0])


# ---------------------------------------------------------------------------
# Threat Lookup
# ---------------------------------------------------------------------------
def find_threat(
    threats: Iterable[ThreatLocation], x: int, y: int
) -> ThreatLocation | None:
    """Return the first threat at exactly (x, y), in list order, or None."""
    for threat in threats:
        if threat.is_at(x, y):
            return threat
    return None


def index_threats(
    threats: Iterable[ThreatLocation],
) -> Mapping[tuple[int, int], ThreatLocation]:
    """Index threats by coordinate, keeping the first entry per cell.

    Lookups against the index agree with find_threat on the same list.
    """
    index: dict[tuple[int, int], ThreatLocation] = {}
    for threat in threats:
        index.setdefault((threat.x, threat.y), threat)
    return index
