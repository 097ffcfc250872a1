"""Balcony parameters and layout configuration."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict


class RailingStyle(str, Enum):
    GLASS = "glass"
    GLASS_DOUBLE = "glass-double"
    BARS = "bars"


class PlatformMaterial(str, Enum):
    DOUGLASIE = "douglasie"
    WPC = "wpc"
    ALU = "alu"


class FrameMaterial(str, Enum):
    PU_LACKIERT = "pu-lackiert"
    FEUERVERZINKT = "feuerverzinkt"


SUPPORT_COUNTS: tuple[int, ...] = (2, 3, 4, 6)


class BalconyParams(BaseModel):
    """
    User-adjustable balcony parameters (meters).

    Immutable: a new record is built whenever a value changes.
    `support_count` and `railing_style` stay loosely typed so the
    layout rules, not the parser, reject illegal values.
    """
    model_config = ConfigDict(frozen=True)

    width: float = 3.0
    depth: float = 1.5
    platform_height: float = 2.5
    railing_height: float = 1.1
    support_count: int = 2
    platform_material: PlatformMaterial = PlatformMaterial.DOUGLASIE
    frame_material: FrameMaterial = FrameMaterial.PU_LACKIERT
    railing_style: str = RailingStyle.GLASS.value


class LayoutConfig(BaseModel):
    """Fixed cross-sections, spacings and ratios of the structure."""
    support_size: float = 0.1           # Square support beam (100mm)
    platform_thickness: float = 0.15    # Slab, top face at platform height
    post_spacing: float = 0.8           # Nominal post spacing target
    post_radius: float = 0.03
    handrail_radius: float = 0.0225     # Top handrail
    mid_rail_radius: float = 0.015      # glass-double second rail
    mid_rail_ratio: float = 0.7         # Of railing height
    infill_height_ratio: float = 0.85   # Panel / bar height, of railing height
    infill_center_ratio: float = 0.45   # Panel / bar centre, of railing height
    panel_thickness: float = 0.01
    panel_inset: float = 0.01           # Inward from the post line
    panel_margin: float = 0.1           # Subtracted from the edge length
    bar_pitch: float = 0.12
    bar_radius: float = 0.01
    bottom_rail_radius: float = 0.015
    bottom_rail_offset: float = 0.05    # Above the platform
    radial_segments: int = 8


class GenerationConfig(BaseModel):
    """Controls which rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
