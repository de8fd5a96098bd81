"""Domain Port(s) for Threat Input.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from typing import Protocol

from .value_objects import ThreatLocation


class ThreatSource(Protocol):
    """Port for obtaining the threat list before a robot explores.

    Implementations live in infrastructure (e.g., text file adapter).
    """

    def load_threats(self) -> tuple[ThreatLocation, ...]:
        """Return threats in source order."""
        ...
