"""Infrastructure adapters for the exploration bounded context.

This module provides the infrastructure layer implementations for loading
threat lists, including plain-text threat files.
"""

from .text_adapter import TextThreatSource, parse_threat_line

__all__ = ["TextThreatSource", "parse_threat_line"]
