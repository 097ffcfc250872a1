"""Preset constraint checks, run before the layout engine.

The engine assumes legal input. This stage reports what a preset does
not allow and clamps parameters into its ranges.
"""

from __future__ import annotations
import logging
import math

from balcony.data.catalogue import DEFAULT_LIMITS
from balcony.models import BalconyParams, Preset, PresetLimits, RailingStyle, SUPPORT_COUNTS

logger = logging.getLogger(__name__)

_AXES = ("width", "depth", "platform_height", "railing_height")
_RAILING_STYLES = {s.value for s in RailingStyle}


def _limits(preset: Preset | None) -> PresetLimits:
    return preset.limits if preset is not None else DEFAULT_LIMITS


def _option_fields(preset: Preset) -> list[tuple[str, list, object]]:
    """(field, allowed values, preset default) for every option field."""
    defaults = preset.defaults
    return [
        ("support_count", preset.allowed_support_counts, defaults.support_count),
        ("platform_material", preset.allowed_platform_materials, defaults.platform_material),
        ("railing_style", preset.allowed_railing_styles, defaults.railing_style.value),
        ("frame_material", preset.allowed_frame_materials, defaults.frame_material),
    ]


def check_params(params: BalconyParams, preset: Preset | None = None) -> list[str]:
    """
    List every way `params` falls outside the preset.

    Without a preset the default slider ranges and the full option
    sets apply. An empty list means the params are legal.
    """
    issues = []
    limits = _limits(preset)

    for axis in _AXES:
        value = getattr(params, axis)
        rng = getattr(limits, axis)
        if not rng.contains(value):
            issues.append(f"{axis} {value:.2f}m is outside [{rng.min:.2f}, {rng.max:.2f}]")

    if preset is None:
        if params.support_count not in SUPPORT_COUNTS:
            issues.append(f"support_count {params.support_count} is not offered")
        if params.railing_style not in _RAILING_STYLES:
            issues.append(f"railing_style {params.railing_style} is not offered")
        return issues

    for field, allowed, _ in _option_fields(preset):
        value = getattr(params, field)
        if value not in allowed:
            issues.append(f"{field} {_display(value)} is not offered by preset {preset.id}")

    return issues


def sanitize_params(params: BalconyParams, preset: Preset | None = None) -> BalconyParams:
    """
    Return params the preset allows.

    Numbers are clamped into range, disallowed options fall back to
    the preset default. Returns `params` itself when nothing changes.
    Non-positive or non-finite sizes are left for the engine to reject.
    """
    limits = _limits(preset)
    updates: dict[str, object] = {}

    for axis in _AXES:
        value = getattr(params, axis)
        if not (math.isfinite(value) and value > 0):
            continue
        clamped = getattr(limits, axis).clamp(value)
        if clamped != value:
            updates[axis] = clamped

    if preset is not None:
        for field, allowed, default in _option_fields(preset):
            if getattr(params, field) not in allowed:
                updates[field] = default

    if not updates:
        return params

    for field, value in updates.items():
        logger.warning(
            "Adjusted %s from %s to %s",
            field, _display(getattr(params, field)), _display(value),
        )
    return params.model_copy(update=updates)


def params_from_preset(preset: Preset) -> BalconyParams:
    """The parameters a configurator opens with for this preset."""
    limits = preset.limits
    defaults = preset.defaults
    return BalconyParams(
        width=limits.width.default,
        depth=limits.depth.default,
        platform_height=limits.platform_height.default,
        railing_height=limits.railing_height.default,
        support_count=defaults.support_count,
        platform_material=defaults.platform_material,
        frame_material=defaults.frame_material,
        railing_style=defaults.railing_style.value,
    )


def _display(value: object) -> str:
    return str(getattr(value, "value", value))
