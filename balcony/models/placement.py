"""Layout output models."""

from __future__ import annotations
from enum import Enum
from typing import Union
from pydantic import BaseModel

from .geometry import Point3D, Rotation


class ShapeKind(str, Enum):
    BOX = "box"
    CYLINDER = "cylinder"


class ElementRole(str, Enum):
    PLATFORM = "platform"
    SUPPORT = "support"
    POST = "post"
    HANDRAIL = "handrail"
    RAIL = "rail"
    BAR = "bar"
    PANEL = "panel"


class BoxExtents(BaseModel):
    """Axis-aligned box size before rotation (meters)."""
    width: float    # X
    height: float   # Y
    depth: float    # Z


class CylinderExtents(BaseModel):
    """Cylinder along its local Y axis before rotation."""
    radius: float
    length: float
    segments: int = 8


class Placement(BaseModel):
    """A single structural element positioned in 3D space."""
    shape: ShapeKind
    position: Point3D   # Centre of the element
    rotation: Rotation = Rotation()
    extents: Union[BoxExtents, CylinderExtents]
    role: ElementRole
    edge: str = ""                 # Open edge id for railing elements
    tags: dict[str, str] = {}      # Extensible metadata (rule that created it, etc.)

    @classmethod
    def box(
        cls,
        role: ElementRole,
        position: Point3D,
        width: float, height: float, depth: float,
        **kwargs: object,
    ) -> Placement:
        return cls(
            shape=ShapeKind.BOX,
            position=position,
            extents=BoxExtents(width=width, height=height, depth=depth),
            role=role,
            **kwargs,
        )

    @classmethod
    def cylinder(
        cls,
        role: ElementRole,
        position: Point3D,
        radius: float, length: float,
        segments: int = 8,
        **kwargs: object,
    ) -> Placement:
        return cls(
            shape=ShapeKind.CYLINDER,
            position=position,
            extents=CylinderExtents(radius=radius, length=length, segments=segments),
            role=role,
            **kwargs,
        )


class LayoutStats(BaseModel):
    """Summary statistics for a generated layout."""
    total_elements: int = 0
    supports: int = 0
    posts: int = 0
    handrails: int = 0
    rails: int = 0
    bars: int = 0
    panels: int = 0

    @classmethod
    def from_placements(cls, placements: list[Placement]) -> LayoutStats:
        def count(role: ElementRole) -> int:
            return sum(1 for p in placements if p.role == role)

        return cls(
            total_elements=len(placements),
            supports=count(ElementRole.SUPPORT),
            posts=count(ElementRole.POST),
            handrails=count(ElementRole.HANDRAIL),
            rails=count(ElementRole.RAIL),
            bars=count(ElementRole.BAR),
            panels=count(ElementRole.PANEL),
        )


class BalconyLayout(BaseModel):
    """The complete ordered placement list handed to the renderer."""
    placements: list[Placement]
    stats: LayoutStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = LayoutStats.from_placements(self.placements)

    def by_role(self, role: ElementRole) -> list[Placement]:
        return [p for p in self.placements if p.role == role]
