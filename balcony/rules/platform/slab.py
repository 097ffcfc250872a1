"""Platform slab: one box spanning the whole footprint."""

from __future__ import annotations

from balcony.rules.base import LayoutRule
from balcony.models import ElementRole, LayoutContext, Placement, Point3D


class PlatformSlabRule(LayoutRule):
    priority = 10
    required = True

    def get_id(self) -> str:
        return "platform.slab"

    def get_name(self) -> str:
        return "Platform Slab"

    def generate(self, context: LayoutContext) -> list[Placement]:
        params = context.params
        thickness = context.layout.platform_thickness
        # Top face flush with the platform height
        return [Placement.box(
            ElementRole.PLATFORM,
            Point3D(x=0.0, y=params.platform_height - thickness / 2, z=0.0),
            width=params.width, height=thickness, depth=params.depth,
        )]
