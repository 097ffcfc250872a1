"""Platform analysis: dimension checks and open-edge detection."""

from __future__ import annotations
import math

from balcony.models import LayoutContext, open_edges
from balcony.core.errors import DegenerateDimension


class PlatformAnalyzer:
    """Validates the footprint and derives the railing edges."""

    def analyze(self, context: LayoutContext) -> None:
        """Run all analysis passes and populate the context."""
        self._check_dimensions(context)
        params = context.params
        context.edges = open_edges(params.width, params.depth)

    def _check_dimensions(self, context: LayoutContext) -> None:
        params = context.params
        for name in ("width", "depth", "platform_height", "railing_height"):
            value = getattr(params, name)
            # NaN fails the comparison as well
            if not (math.isfinite(value) and value > 0):
                raise DegenerateDimension(name, value)

        # Narrower footprints would overlap the supports and invert the panels
        layout = context.layout
        min_span = max(layout.support_size, layout.panel_margin)
        for name in ("width", "depth"):
            value = getattr(params, name)
            if value <= min_span:
                raise DegenerateDimension(name, value, min_span)
