"""Value types shared by the directions formatter and the overlay renderer."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from src.campus_paths.compass import CompassCode


@dataclass(frozen=True)
class Coordinate:
    """A point in map pixel space (x grows right, y grows down)."""

    x: float
    y: float


@dataclass(frozen=True)
class BuildingRecord:
    """A campus building from the routing service's directory."""

    short_name: str
    long_name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class PathSegment:
    """One directed edge of a path, walked from start to end."""

    start: Coordinate
    end: Coordinate
    cost: float  # feet
    direction: CompassCode


Path = tuple[PathSegment, ...]


@dataclass(frozen=True)
class RenderSnapshot:
    """
    Immutable input for one render cycle.

    total_distance is derived from the segment costs when the snapshot is
    built and cannot be passed in. An unselected endpoint has a None
    coordinate and an empty name.
    """

    start_coord: Optional[Coordinate] = None
    end_coord: Optional[Coordinate] = None
    start_name: str = ""
    end_name: str = ""
    path: Path = ()
    total_distance: float = field(init=False)

    def __post_init__(self) -> None:
        # Accept any iterable of segments but always store a tuple
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "total_distance", sum(s.cost for s in self.path))

    @classmethod
    def between(
        cls,
        start: Optional[BuildingRecord],
        end: Optional[BuildingRecord],
        path: Iterable[PathSegment] = (),
    ) -> "RenderSnapshot":
        """Build a snapshot from the selected buildings and a resolved path."""
        return cls(
            start_coord=start.coordinate if start else None,
            end_coord=end.coordinate if end else None,
            start_name=start.long_name if start else "",
            end_name=end.long_name if end else "",
            path=tuple(path),
        )

    @property
    def has_path(self) -> bool:
        """True when there are directions to show."""
        return self.total_distance > 0


EMPTY_SNAPSHOT = RenderSnapshot()
