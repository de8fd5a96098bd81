"""Exploration Bounded Context.

Responsible for driving a robot across a bounded grid and detecting threats:
- Value Objects: Position, ThreatLocation, CommandSet, FieldBounds
- Entities: Robot (command-string simulator)
- Services: rotate_left, rotate_right, move_forward, find_threat
"""
