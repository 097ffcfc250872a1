"""Layout context: accumulates state during one layout pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .parameters import BalconyParams, GenerationConfig, LayoutConfig
from .placement import Placement
from .platform import OpenEdge


class LayoutContext(BaseModel):
    """
    Holds all state during a single layout pass.

    The analyzer adds the open edges.
    Rules add generated placements.
    The generator orchestrates the flow.
    """
    # Input
    params: BalconyParams
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results (populated by the analyzer)
    edges: list[OpenEdge] = []

    # Output (populated by rules)
    placements: list[Placement] = []

    def add_placements(self, placements: list[Placement]) -> None:
        self.placements.extend(placements)

    @property
    def railing_base(self) -> float:
        """Height of the platform top face, where the railing starts."""
        return self.params.platform_height

    @property
    def railing_top(self) -> float:
        return self.params.platform_height + self.params.railing_height
