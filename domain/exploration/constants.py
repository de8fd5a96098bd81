"""Symbols shared across the exploration context.

Command and cardinal symbols match the single-character wire format used by
robot mission files.
"""

from __future__ import annotations

from typing import Final

# Default command symbols (overridable per robot via CommandSet)
ROBOT_COMMAND_MOVE_LEFT: Final = "L"
ROBOT_COMMAND_MOVE_RIGHT: Final = "R"
ROBOT_COMMAND_MOVE_FORWARD: Final = "F"

# Cardinal symbols
NORTH_POS: Final = "N"
SOUTH_POS: Final = "S"
EAST_POS: Final = "E"
WEST_POS: Final = "W"

# Facing of a cleared position
BLANK_POS: Final = " "

# Only this threat kind produces detection results
THREAT_BOMB: Final = "bomb"

THREAT_DETECTED: Final = "Threat detected"
