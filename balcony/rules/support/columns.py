"""Support columns beneath the platform.

Beams stand in one front row (2 or 3 supports) or in a front and a
back row (4 or 6 supports). Outer faces are flush with the platform
edges.
"""

from __future__ import annotations

from balcony.core.errors import InvalidSupportCount
from balcony.rules.base import LayoutRule
from balcony.models import (
    ElementRole, LayoutContext, Placement, Point2D, Point3D, SUPPORT_COUNTS,
)


def support_positions(
    width: float, depth: float, support_count: int, beam_size: float,
) -> list[Point2D]:
    """
    Ground positions of the support beams.

    Ordered front row left to right, then back row left to right.
    """
    if isinstance(support_count, bool) or support_count not in SUPPORT_COUNTS:
        raise InvalidSupportCount(support_count)

    edge_x = width / 2 - beam_size / 2
    front_z = depth / 2 - beam_size / 2
    back_z = -depth / 2 + beam_size / 2

    if support_count in (3, 6):
        row = [-edge_x, 0.0, edge_x]
    else:
        row = [-edge_x, edge_x]

    positions = [Point2D(x=x, z=front_z) for x in row]
    if support_count in (4, 6):
        positions.extend(Point2D(x=x, z=back_z) for x in row)
    return positions


class SupportColumnRule(LayoutRule):
    """Full-height square columns from the ground to the platform."""

    priority = 20
    required = True

    def get_id(self) -> str:
        return "support.columns"

    def get_name(self) -> str:
        return "Support Columns"

    def generate(self, context: LayoutContext) -> list[Placement]:
        params = context.params
        s = context.layout.support_size
        h = params.platform_height
        positions = support_positions(params.width, params.depth, params.support_count, s)
        front_z = params.depth / 2 - s / 2

        return [
            Placement.box(
                ElementRole.SUPPORT,
                Point3D.at_height(p, h / 2),
                width=s, height=h, depth=s,
                tags={"row": "front" if p.z == front_z else "back"},
            )
            for p in positions
        ]
