"""Exploration Bounded Context - Value Objects.

Immutable data structures describing where a robot is and what it may find.
Every rotation or move produces a new Position; logged positions never change.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from domain.exploration.constants import (
    BLANK_POS,
    ROBOT_COMMAND_MOVE_FORWARD,
    ROBOT_COMMAND_MOVE_LEFT,
    ROBOT_COMMAND_MOVE_RIGHT,
    THREAT_BOMB,
)


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------
class Position(BaseModel):
    """Robot location and facing on the grid (Value Object).

    No validation is performed at construction: bounds are enforced only when
    a move is applied, and any facing character is accepted. An unknown facing
    simply has no movement delta.

    Note on __eq__ and __hash__: Pydantic frozen models compare by value, so
    Position(x=1, y=2, facing="N") == Position(x=1, y=2, facing="N").
    """

    x: int = 0
    y: int = 0
    facing: str = BLANK_POS

    model_config = ConfigDict(frozen=True)

    def reset(self) -> "Position":
        """Return the cleared position (0, 0, blank facing)."""
        return Position()

    def with_facing(self, facing: str) -> "Position":
        return Position(x=self.x, y=self.y, facing=facing)

    def with_coordinates(self, x: int, y: int) -> "Position":
        return Position(x=x, y=y, facing=self.facing)

    def describe(self) -> str:
        """Render as ``(x,y,F)`` for trace entries."""
        return f"({self.x},{self.y},{self.facing})"

    def as_result(self) -> str:
        """Render as ``x y F`` for result entries."""
        return f"{self.x} {self.y} {self.facing}"


# ---------------------------------------------------------------------------
# ThreatLocation
# ---------------------------------------------------------------------------
class ThreatLocation(BaseModel):
    """A labelled point on the grid (Value Object).

    Only threats whose kind is ``"bomb"`` trigger a detection.
    """

    x: int
    y: int
    kind: str

    model_config = ConfigDict(frozen=True)

    def is_bomb(self) -> bool:
        return self.kind == THREAT_BOMB

    def is_at(self, x: int, y: int) -> bool:
        return self.x == x and self.y == y


# ---------------------------------------------------------------------------
# CommandSet
# ---------------------------------------------------------------------------
class CommandSet(BaseModel):
    """Single-character symbols understood by the simulator.

    Invariants:
        - every symbol is exactly one character
        - the three symbols are distinct
    """

    rotate_left: str = ROBOT_COMMAND_MOVE_LEFT
    rotate_right: str = ROBOT_COMMAND_MOVE_RIGHT
    move_forward: str = ROBOT_COMMAND_MOVE_FORWARD

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_symbols(self) -> "CommandSet":
        symbols = (self.rotate_left, self.rotate_right, self.move_forward)
        for symbol in symbols:
            if len(symbol) != 1:
                raise ValueError(f"Command symbol must be one character: {symbol!r}")
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"Command symbols must be distinct: {symbols}")
        return self


DEFAULT_COMMAND_SET = CommandSet()


# ---------------------------------------------------------------------------
# FieldBounds
# ---------------------------------------------------------------------------
class FieldBounds(BaseModel):
    """Inclusive upper limits of the exploration field; lower limits are 0.

    Bounds are not validated. Moves clamp against them as they happen.
    """

    max_x: int
    max_y: int

    model_config = ConfigDict(frozen=True)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y
