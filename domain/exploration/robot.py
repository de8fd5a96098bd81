"""Exploration Bounded Context - Robot Entity.

Executes a fixed command string over a bounded field, recording a trace log,
every position visited and every bomb detection.

Control flow per command:
1) Check the current cell for a threat (before the command is applied)
2) Rotate, move or ignore depending on the command symbol
3) Log the executed command and the resulting position

The starting cell is only checked as part of the first command's step, so a
robot with an empty command string never checks its start cell.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from domain.exploration.constants import THREAT_DETECTED
from domain.exploration.services import (
    index_threats,
    move_forward,
    parse_initial_position,
    rotate_left,
    rotate_right,
)
from domain.exploration.value_objects import (
    DEFAULT_COMMAND_SET,
    CommandSet,
    FieldBounds,
    Position,
    ThreatLocation,
)

logger = logging.getLogger(__name__)


class Robot:
    """Command-string simulator for a single robot.

    Parameters
    ----------
    threats: Sequence[ThreatLocation] | None
        Threat locations on the field, read-only. None means no threats.
    name: str
        Robot designation.
    initial_position: str
        Raw ``"<x> <y> <facing>"`` text, parsed when explore() runs.
    commands: str
        One symbol per step; unknown symbols are no-ops.
    max_x, max_y: int
        Inclusive field limits.
    command_set: CommandSet
        Symbols for rotate-left, rotate-right and move-forward.

    explore() is meant to run once per instance; a second call appends to the
    same logs.
    """

    def __init__(
        self,
        threats: Sequence[ThreatLocation] | None,
        name: str,
        initial_position: str,
        commands: str,
        max_x: int,
        max_y: int,
        command_set: CommandSet = DEFAULT_COMMAND_SET,
    ) -> None:
        self._threats: tuple[ThreatLocation, ...] = tuple(threats or ())
        self._name = name
        self._initial_position = initial_position
        self._commands = commands
        self._bounds = FieldBounds(max_x=max_x, max_y=max_y)
        self._command_set = command_set

        self._trace: list[str] = []
        self._positions: list[Position] = []
        self._results: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def commands(self) -> str:
        return self._commands

    @property
    def bounds(self) -> FieldBounds:
        return self._bounds

    def explore(self) -> None:
        """Run the command string and populate trace, positions and results.

        Raises:
            InvalidInitialPositionError: if the initial position is malformed
        """
        position = parse_initial_position(self._initial_position)
        logger.info(
            "Robot %s exploring from %s with %d command(s)",
            self._name,
            position.describe(),
            len(self._commands),
        )
        if not self._bounds.contains(position.x, position.y):
            logger.warning(
                "Robot %s starts at %s outside field [0..%d, 0..%d]",
                self._name,
                position.describe(),
                self._bounds.max_x,
                self._bounds.max_y,
            )

        self._positions.append(position)
        self._trace.append(f"Robot name: {self._name}")
        self._trace.append("Exploring grid for bomb presence")
        self._trace.append(f"Robot initial position {position.describe()}")
        self._trace.append(f"Robot Commands=[{self._commands}]")

        threat_index = index_threats(self._threats)
        for command in self._commands:
            self._locate_bomb_at(position, threat_index)
            position = self._apply(command, position)
            logger.debug(
                "Robot %s executed %r -> %s", self._name, command, position.describe()
            )
            self._trace.append(f"Executing command [{command}]")
            self._trace.append(f"Affected Robot position {position.describe()}")
            self._positions.append(position)

        self._trace.append("Finished exploration")
        logger.info(
            "Robot %s finished at %s with %d detection(s)",
            self._name,
            position.describe(),
            len(self._results) // 2,
        )

    def _apply(self, command: str, position: Position) -> Position:
        symbols = self._command_set
        if command == symbols.rotate_left:
            return position.with_facing(rotate_left(position.facing))
        if command == symbols.rotate_right:
            return position.with_facing(rotate_right(position.facing))
        if command == symbols.move_forward:
            return move_forward(position, self._bounds)
        return position

    def _locate_bomb_at(
        self,
        position: Position,
        threat_index: Mapping[tuple[int, int], ThreatLocation],
    ) -> None:
        self._trace.append(
            f"Locating bomb using coordinates ({position.x},{position.y})"
        )
        threat = threat_index.get((position.x, position.y))
        if threat is None or not threat.is_bomb():
            return
        logger.debug("Robot %s detected bomb at %s", self._name, position.describe())
        self._results.append(position.as_result())
        self._results.append(THREAT_DETECTED)
        self._trace.append(f"Threat detected at ({position.x},{position.y})")

    # -----------------------------------------------------------------------
    # Read-only views of the logs
    # -----------------------------------------------------------------------
    def retrieve_trace(self) -> tuple[str, ...]:
        return tuple(self._trace)

    def retrieve_positions(self) -> tuple[Position, ...]:
        return tuple(self._positions)

    def retrieve_results(self) -> tuple[str, ...]:
        return tuple(self._results)
