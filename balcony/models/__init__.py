from .geometry import Point2D, Point3D, Rotation, Vector2D
from .parameters import (
    BalconyParams, LayoutConfig, GenerationConfig,
    RailingStyle, PlatformMaterial, FrameMaterial, SUPPORT_COUNTS,
)
from .placement import (
    Placement, BalconyLayout, LayoutStats, ElementRole, ShapeKind,
    BoxExtents, CylinderExtents,
)
from .platform import OpenEdge, EdgeId, open_edges
from .context import LayoutContext
from .presets import AxisLimits, PresetLimits, PresetDefaults, Preset, Manufacturer, Catalogue

__all__ = [
    "Point2D", "Point3D", "Rotation", "Vector2D",
    "BalconyParams", "LayoutConfig", "GenerationConfig",
    "RailingStyle", "PlatformMaterial", "FrameMaterial", "SUPPORT_COUNTS",
    "Placement", "BalconyLayout", "LayoutStats", "ElementRole", "ShapeKind",
    "BoxExtents", "CylinderExtents",
    "OpenEdge", "EdgeId", "open_edges",
    "LayoutContext",
    "AxisLimits", "PresetLimits", "PresetDefaults", "Preset", "Manufacturer", "Catalogue",
]
