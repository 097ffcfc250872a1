"""Built-in manufacturer catalogue.

Plain data, parsed into pydantic models once at import time. A stored
catalogue can replace it through `Catalogue.model_validate`.
"""

from __future__ import annotations

from balcony.models import AxisLimits, Catalogue, Manufacturer, Preset, PresetLimits

# Ranges offered when no preset narrows them
DEFAULT_LIMITS = PresetLimits(
    width=AxisLimits(min=1.0, max=6.0, default=3.0),
    depth=AxisLimits(min=0.8, max=3.0, default=1.5),
    platform_height=AxisLimits(min=0.5, max=4.0, default=2.5),
    railing_height=AxisLimits(min=0.8, max=1.5, default=1.1),
)

_CATALOGUE_DATA = {
    "manufacturers": {
        "balkonpro": {
            "id": "balkonpro",
            "slug": "balkonpro",
            "name": "BalkonPro GmbH",
            "presets": ["balkonpro-standard", "balkonpro-premium"],
        },
        "terrassenbau": {
            "id": "terrassenbau",
            "slug": "terrassenbau",
            "name": "Terrassenbau Müller",
            "presets": ["terrassenbau-eco", "terrassenbau-glas"],
        },
    },
    "presets": {
        "balkonpro-standard": {
            "id": "balkonpro-standard",
            "manufacturer_id": "balkonpro",
            "name": "Standard-Linie",
            "description": "Klassischer Balkon mit Holzboden",
            "allowed_support_counts": [2, 3, 4],
            "allowed_platform_materials": ["douglasie", "wpc"],
            "allowed_railing_styles": ["bars", "glass"],
            "allowed_frame_materials": ["feuerverzinkt"],
            "defaults": {
                "support_count": 2,
                "platform_material": "douglasie",
                "railing_style": "bars",
                "frame_material": "feuerverzinkt",
            },
            "limits": {
                "width": {"min": 2, "max": 5, "default": 3},
                "depth": {"min": 1, "max": 2, "default": 1.5},
                "platform_height": {"min": 1, "max": 3, "default": 2.5},
                "railing_height": {"min": 0.9, "max": 1.2, "default": 1.1},
            },
        },
        "balkonpro-premium": {
            "id": "balkonpro-premium",
            "manufacturer_id": "balkonpro",
            "name": "Premium-Linie",
            "description": "Hochwertig mit Glasgeländer",
            "allowed_support_counts": [4, 6],
            "allowed_platform_materials": ["wpc", "alu"],
            "allowed_railing_styles": ["glass", "glass-double"],
            "allowed_frame_materials": ["pu-lackiert", "feuerverzinkt"],
            "defaults": {
                "support_count": 4,
                "platform_material": "wpc",
                "railing_style": "glass",
                "frame_material": "pu-lackiert",
            },
            "limits": {
                "width": {"min": 2, "max": 6, "default": 4},
                "depth": {"min": 1.2, "max": 3, "default": 2},
                "platform_height": {"min": 1, "max": 4, "default": 2.5},
                "railing_height": {"min": 1, "max": 1.3, "default": 1.1},
            },
        },
        "terrassenbau-eco": {
            "id": "terrassenbau-eco",
            "manufacturer_id": "terrassenbau",
            "name": "Eco-Linie",
            "description": "Preiswert und funktional",
            "allowed_support_counts": [2, 4],
            "allowed_platform_materials": ["douglasie"],
            "allowed_railing_styles": ["bars"],
            "allowed_frame_materials": ["feuerverzinkt"],
            "defaults": {
                "support_count": 2,
                "platform_material": "douglasie",
                "railing_style": "bars",
                "frame_material": "feuerverzinkt",
            },
            "limits": {
                "width": {"min": 1.5, "max": 4, "default": 2.5},
                "depth": {"min": 0.8, "max": 1.5, "default": 1.2},
                "platform_height": {"min": 0.5, "max": 2.5, "default": 2},
                "railing_height": {"min": 0.9, "max": 1.1, "default": 1},
            },
        },
        "terrassenbau-glas": {
            "id": "terrassenbau-glas",
            "manufacturer_id": "terrassenbau",
            "name": "Glas-Linie",
            "description": "Modern mit Glasgeländer",
            "allowed_support_counts": [2, 3, 4, 6],
            "allowed_platform_materials": ["wpc", "alu"],
            "allowed_railing_styles": ["glass", "glass-double"],
            "allowed_frame_materials": ["pu-lackiert"],
            "defaults": {
                "support_count": 3,
                "platform_material": "alu",
                "railing_style": "glass-double",
                "frame_material": "pu-lackiert",
            },
            "limits": {
                "width": {"min": 2, "max": 6, "default": 3.5},
                "depth": {"min": 1, "max": 2.5, "default": 1.8},
                "platform_height": {"min": 1, "max": 4, "default": 3},
                "railing_height": {"min": 1, "max": 1.4, "default": 1.2},
            },
        },
    },
}

CATALOGUE = Catalogue.model_validate(_CATALOGUE_DATA)


def get_manufacturer(slug: str) -> Manufacturer | None:
    return CATALOGUE.manufacturers.get(slug)


def get_preset(preset_id: str) -> Preset | None:
    return CATALOGUE.presets.get(preset_id)


def presets_for_manufacturer(slug: str) -> list[Preset]:
    manufacturer = get_manufacturer(slug)
    if manufacturer is None:
        return []
    return [p for p in (get_preset(pid) for pid in manufacturer.presets) if p is not None]


def all_manufacturers() -> list[Manufacturer]:
    return list(CATALOGUE.manufacturers.values())


def all_presets() -> list[Preset]:
    return list(CATALOGUE.presets.values())
