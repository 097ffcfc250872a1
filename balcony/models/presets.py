"""Manufacturer presets: the constraint sets applied before layout."""

from __future__ import annotations
from pydantic import BaseModel, model_validator

from .parameters import FrameMaterial, PlatformMaterial, RailingStyle


class AxisLimits(BaseModel):
    """Slider range for one numeric parameter (meters)."""
    min: float
    max: float
    default: float

    @model_validator(mode="after")
    def check_range(self) -> AxisLimits:
        if self.min > self.max:
            raise ValueError(f"min {self.min} exceeds max {self.max}")
        if not self.contains(self.default):
            raise ValueError(f"default {self.default} is outside [{self.min}, {self.max}]")
        return self

    def clamp(self, value: float) -> float:
        return max(self.min, min(self.max, value))

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class PresetLimits(BaseModel):
    width: AxisLimits
    depth: AxisLimits
    platform_height: AxisLimits
    railing_height: AxisLimits


class PresetDefaults(BaseModel):
    support_count: int
    platform_material: PlatformMaterial
    railing_style: RailingStyle
    frame_material: FrameMaterial


class Preset(BaseModel):
    """A product line: which options are offered and within which ranges."""
    id: str
    manufacturer_id: str
    name: str
    description: str = ""

    # Only these options are offered to the user
    allowed_support_counts: list[int]
    allowed_platform_materials: list[PlatformMaterial]
    allowed_railing_styles: list[RailingStyle]
    allowed_frame_materials: list[FrameMaterial]

    defaults: PresetDefaults
    limits: PresetLimits

    @model_validator(mode="after")
    def check_defaults_allowed(self) -> Preset:
        d = self.defaults
        for field, allowed in (
            ("support_count", self.allowed_support_counts),
            ("platform_material", self.allowed_platform_materials),
            ("railing_style", self.allowed_railing_styles),
            ("frame_material", self.allowed_frame_materials),
        ):
            value = getattr(d, field)
            if value not in allowed:
                raise ValueError(f"default {field} {getattr(value, 'value', value)} is not in its allow-list")
        return self


class Manufacturer(BaseModel):
    id: str
    slug: str
    name: str
    logo: str | None = None
    presets: list[str] = []  # Preset IDs


class Catalogue(BaseModel):
    manufacturers: dict[str, Manufacturer]
    presets: dict[str, Preset]
