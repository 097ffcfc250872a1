"""Platform footprint models: the open railing edges."""

from __future__ import annotations
import math
from enum import Enum
from pydantic import BaseModel

from .geometry import Point2D, Rotation, Vector2D


class EdgeId(str, Enum):
    FRONT = "front"
    LEFT = "left"
    RIGHT = "right"


class OpenEdge(BaseModel):
    """
    A platform edge exposed to fall risk.

    Side edges run from the back (building side) to the front, the
    front edge runs left to right. Railing elements are placed by
    their distance from `start`.
    """
    id: EdgeId
    start: Point2D
    end: Point2D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def midpoint(self) -> Point2D:
        return self.start.lerp(self.end, 0.5)

    @property
    def inward(self) -> Vector2D:
        """Unit normal pointing towards the footprint centre."""
        mid = self.midpoint
        return Vector2D(x=-mid.x, z=-mid.z).normalized()

    @property
    def runs_along_x(self) -> bool:
        return abs(self.end.x - self.start.x) > abs(self.end.z - self.start.z)

    @property
    def rail_rotation(self) -> Rotation:
        """Lay a Y-axis cylinder down along this edge."""
        if self.runs_along_x:
            return Rotation(z=math.pi / 2)
        return Rotation(x=math.pi / 2)

    def point_at(self, distance: float) -> Point2D:
        """Point `distance` meters from the start of the edge."""
        return self.start.lerp(self.end, distance / self.length)


def open_edges(width: float, depth: float) -> list[OpenEdge]:
    """Front, left and right edges of a width x depth footprint."""
    hw, hd = width / 2, depth / 2
    return [
        OpenEdge(id=EdgeId.FRONT, start=Point2D(x=-hw, z=hd), end=Point2D(x=hw, z=hd)),
        OpenEdge(id=EdgeId.LEFT, start=Point2D(x=-hw, z=-hd), end=Point2D(x=-hw, z=hd)),
        OpenEdge(id=EdgeId.RIGHT, start=Point2D(x=hw, z=-hd), end=Point2D(x=hw, z=hd)),
    ]
