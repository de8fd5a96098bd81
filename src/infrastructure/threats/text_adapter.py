"""Plain-text adapter for ThreatSource.

Reads threat locations from a text file, one ``<x> <y> <kind>`` record per
line. Blank lines and lines starting with ``#`` are skipped. Records are
returned in file order, which is the order threat lookups honour.
"""

from __future__ import annotations

import logging
from pathlib import Path

from domain.exploration.errors import InvalidThreatRecordError
from domain.exploration.value_objects import ThreatLocation

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

_COMMENT_PREFIX = "#"


def parse_threat_line(line: str, line_number: int | None = None) -> ThreatLocation:
    """Parse a single ``<x> <y> <kind>`` record.

    Raises:
        InvalidThreatRecordError: wrong token count or non-integer x/y
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise InvalidThreatRecordError(
            f"expected '<x> <y> <kind>', got {line.strip()!r}", line_number
        )
    try:
        x = int(tokens[0])
        y = int(tokens[1])
    except ValueError as e:
        raise InvalidThreatRecordError(
            f"coordinates must be integers: {line.strip()!r}", line_number
        ) from e
    return ThreatLocation(x=x, y=y, kind=tokens[2])


class TextThreatSource:
    """Infrastructure adapter for loading threats from a text file.

    Parameters
    ----------
    file_path: Path | str
        Threat file location. Read lazily by load_threats().
    encoding: str
        Text encoding of the file.
    """

    def __init__(self, file_path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(file_path)
        self.encoding = encoding

    def load_threats(self) -> tuple[ThreatLocation, ...]:
        if not self.path.exists():
            raise FileNotFoundError(str(self.path))

        try:
            text = self.path.read_text(encoding=self.encoding)
        except OSError as e:
            logger.error(
                "Failed to read %s (errno=%s, strerror=%s)",
                self.path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise

        threats: list[ThreatLocation] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith(_COMMENT_PREFIX):
                continue
            threats.append(parse_threat_line(stripped, line_number))

        logger.info("Loaded %d threat(s) from %s", len(threats), self.path.name)
        return tuple(threats)
