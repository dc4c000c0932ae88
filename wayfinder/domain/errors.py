"""Typed domain errors for the college wayfinder.

Every recoverable condition the routing core can report has its own
error type, so callers never have to interpret an empty path or an
infinite distance.

All errors inherit from WayfinderError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple


@dataclass
class WayfinderError(Exception):
    """Base error for the wayfinder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    kind: ClassVar[str] = "WayfinderError"

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidInputError(WayfinderError):
    """A required identifier is missing or empty.

    Attributes:
        missing: Names of the parameters that were absent
    """

    kind: ClassVar[str] = "InvalidInput"

    missing: Tuple[str, ...] = ()


@dataclass
class UnknownNodeError(WayfinderError):
    """Node identifier does not exist in the current graph.

    Attributes:
        node_ids: The identifiers that were not found
    """

    kind: ClassVar[str] = "UnknownNode"

    node_ids: Tuple[str, ...] = ()


@dataclass
class NoPathFoundError(WayfinderError):
    """Both nodes exist but no route connects them.

    Attributes:
        source: Start node id
        target: End node id
    """

    kind: ClassVar[str] = "NoPathFound"

    source: str = ""
    target: str = ""


@dataclass
class GraphError(WayfinderError):
    """Graph data integrity error."""

    kind: ClassVar[str] = "GraphError"


@dataclass
class GraphLoadError(GraphError):
    """Static graph or room data could not be loaded.

    Attributes:
        file_path: Path to the data file if relevant
    """

    kind: ClassVar[str] = "GraphLoadError"

    file_path: Optional[str] = None


@dataclass
class RoomNotFoundError(WayfinderError):
    """Room identifier not found in the directory.

    Attributes:
        room_id: The room id that was looked up
    """

    kind: ClassVar[str] = "RoomNotFound"

    room_id: str = ""


@dataclass
class ConfigurationError(WayfinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    kind: ClassVar[str] = "ConfigurationError"

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(WayfinderError):
    """Floor-plan rendering failed.

    Attributes:
        floor: Floor that was being rendered
        renderer_type: Type of renderer that failed
    """

    kind: ClassVar[str] = "RenderingError"

    floor: Optional[int] = None
    renderer_type: str = ""


@dataclass
class UnknownFloorError(RenderingError):
    """Requested floor is not part of the building."""

    kind: ClassVar[str] = "UnknownFloor"
