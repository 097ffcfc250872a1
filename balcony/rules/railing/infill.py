"""Railing infill, dispatched once per layout on the railing style.

Every style gets a top handrail on each open edge. The style strategy
then adds its own elements: glass panels, an extra mid rail, or
vertical bars with a bottom rail.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from balcony.core.errors import InvalidRailingStyle
from balcony.rules.base import LayoutRule, floor_div
from balcony.models import (
    ElementRole, LayoutContext, OpenEdge, Placement, Point3D, RailingStyle,
)


def rail(
    context: LayoutContext, edge: OpenEdge, role: ElementRole,
    y: float, radius: float, level: str,
) -> Placement:
    """Horizontal cylinder running the full length of an edge."""
    return Placement.cylinder(
        role,
        Point3D.at_height(edge.midpoint, y),
        radius=radius, length=edge.length,
        segments=context.layout.radial_segments,
        rotation=edge.rail_rotation,
        edge=edge.id.value,
        tags={"level": level},
    )


def bar_offsets(edge_length: float, pitch: float) -> list[float]:
    """Distances from the edge start; both ends are left to the posts."""
    count = floor_div(edge_length, pitch)
    return [i * pitch for i in range(1, count)]


class InfillStrategy(ABC):
    """Style-specific elements placed after the top handrails."""

    style: RailingStyle

    @abstractmethod
    def place(self, context: LayoutContext) -> list[Placement]:
        ...


class GlassInfill(InfillStrategy):
    """One glass panel per edge, just inside the post line."""

    style = RailingStyle.GLASS

    def place(self, context: LayoutContext) -> list[Placement]:
        return [self._panel(context, edge) for edge in context.edges]

    def _panel(self, context: LayoutContext, edge: OpenEdge) -> Placement:
        layout = context.layout
        rh = context.params.railing_height
        span = edge.length - layout.panel_margin
        center = edge.midpoint.offset(edge.inward, layout.panel_inset)

        if edge.runs_along_x:
            width, depth = span, layout.panel_thickness
        else:
            width, depth = layout.panel_thickness, span

        return Placement.box(
            ElementRole.PANEL,
            Point3D.at_height(center, context.railing_base + layout.infill_center_ratio * rh),
            width=width, height=layout.infill_height_ratio * rh, depth=depth,
            edge=edge.id.value,
        )


class DoubleGlassInfill(GlassInfill):
    """Glass panels plus a second, thinner rail at 70% railing height."""

    style = RailingStyle.GLASS_DOUBLE

    def place(self, context: LayoutContext) -> list[Placement]:
        layout = context.layout
        y = context.railing_base + layout.mid_rail_ratio * context.params.railing_height
        placements = super().place(context)
        placements.extend(
            rail(context, edge, ElementRole.HANDRAIL, y, layout.mid_rail_radius, "mid")
            for edge in context.edges
        )
        return placements


class BarInfill(InfillStrategy):
    """Vertical round bars at a fixed pitch plus a bottom rail."""

    style = RailingStyle.BARS

    def place(self, context: LayoutContext) -> list[Placement]:
        layout = context.layout
        rh = context.params.railing_height
        center_y = context.railing_base + layout.infill_center_ratio * rh
        height = layout.infill_height_ratio * rh

        placements: list[Placement] = []
        for edge in context.edges:
            for offset in bar_offsets(edge.length, layout.bar_pitch):
                placements.append(Placement.cylinder(
                    ElementRole.BAR,
                    Point3D.at_height(edge.point_at(offset), center_y),
                    radius=layout.bar_radius, length=height,
                    segments=layout.radial_segments,
                    edge=edge.id.value,
                ))

        bottom_y = context.railing_base + layout.bottom_rail_offset
        placements.extend(
            rail(context, edge, ElementRole.RAIL, bottom_y, layout.bottom_rail_radius, "bottom")
            for edge in context.edges
        )
        return placements


INFILL_STRATEGIES: dict[RailingStyle, InfillStrategy] = {
    s.style: s for s in (GlassInfill(), DoubleGlassInfill(), BarInfill())
}


def infill_strategy(style: str) -> InfillStrategy:
    try:
        return INFILL_STRATEGIES[RailingStyle(style)]
    except ValueError:
        raise InvalidRailingStyle(style) from None


class RailingInfillRule(LayoutRule):
    """Top handrails on every open edge, then the style's infill."""

    priority = 40
    required = True
    dependencies = ["railing.posts"]

    def get_id(self) -> str:
        return "railing.infill"

    def get_name(self) -> str:
        return "Railing Infill"

    def generate(self, context: LayoutContext) -> list[Placement]:
        # Resolve first: an unknown style must not yield a bare handrail
        strategy = infill_strategy(context.params.railing_style)
        layout = context.layout

        placements = [
            rail(context, edge, ElementRole.HANDRAIL, context.railing_top,
                 layout.handrail_radius, "top")
            for edge in context.edges
        ]
        placements.extend(strategy.place(context))
        return placements
