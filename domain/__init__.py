"""Robot Explorer Domain Layer.

This package contains the core business logic organized by bounded contexts:
- exploration: Robot positions, command execution, threat detection
"""

from domain import exploration

__all__ = ["exploration"]
