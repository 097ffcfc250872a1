"""Railing posts along the three open edges.

The front edge gets evenly spaced posts including both corners. The
side edges only get their interior posts; the front corners are
already taken by the front edge and the back ends meet the building.
"""

from __future__ import annotations

from balcony.rules.base import LayoutRule, ceil_div
from balcony.models import EdgeId, ElementRole, LayoutContext, Placement, Point2D, Point3D


def post_count(edge_length: float, spacing: float) -> int:
    """Posts on one edge, corners included, never more than `spacing` apart."""
    return max(2, ceil_div(edge_length, spacing) + 1)


def post_positions(width: float, depth: float, spacing: float = 0.8) -> list[tuple[EdgeId, Point2D]]:
    """Front posts left to right, then left interior, then right interior (back to front)."""
    posts: list[tuple[EdgeId, Point2D]] = []

    front = post_count(width, spacing)
    for i in range(front):
        x = -width / 2 + (i * width) / (front - 1)
        posts.append((EdgeId.FRONT, Point2D(x=x, z=depth / 2)))

    side = post_count(depth, spacing)
    side_z = [-depth / 2 + (i * depth) / (side - 1) for i in range(1, side - 1)]
    posts.extend((EdgeId.LEFT, Point2D(x=-width / 2, z=z)) for z in side_z)
    posts.extend((EdgeId.RIGHT, Point2D(x=width / 2, z=z)) for z in side_z)

    return posts


class RailingPostRule(LayoutRule):
    """Vertical cylinders from the platform top to the handrail."""

    priority = 30
    required = True

    def get_id(self) -> str:
        return "railing.posts"

    def get_name(self) -> str:
        return "Railing Posts"

    def generate(self, context: LayoutContext) -> list[Placement]:
        params = context.params
        layout = context.layout
        rh = params.railing_height
        center_y = context.railing_base + rh / 2

        return [
            Placement.cylinder(
                ElementRole.POST,
                Point3D.at_height(point, center_y),
                radius=layout.post_radius, length=rh,
                segments=layout.radial_segments,
                edge=edge.value,
            )
            for edge, point in post_positions(params.width, params.depth, layout.post_spacing)
        ]
