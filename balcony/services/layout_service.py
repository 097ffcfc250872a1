"""High-level layout service: facade for the API layer."""

from __future__ import annotations
import logging

from balcony.models import (
    BalconyParams, BalconyLayout, GenerationConfig, LayoutConfig,
)
from balcony.core.constraints import sanitize_params
from balcony.core.errors import PresetNotFound
from balcony.core.generator import LayoutGenerator
from balcony.core.registry import RuleRegistry, create_default_registry
from balcony.data.catalogue import get_preset

logger = logging.getLogger(__name__)


class LayoutService:
    """Sanitises input against a preset, then delegates to the generator."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        layout: LayoutConfig | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.layout = layout or LayoutConfig()
        self.generator = LayoutGenerator(self.registry)

    def resolve_params(
        self, params: BalconyParams, preset_id: str | None = None,
    ) -> BalconyParams:
        """The params the engine will actually see.

        Without a preset, values are clamped to the default ranges.
        """
        preset = None
        if preset_id is not None:
            preset = get_preset(preset_id)
            if preset is None:
                raise PresetNotFound("Preset", preset_id)
        return sanitize_params(params, preset)

    def generate(
        self,
        params: BalconyParams | None = None,
        preset_id: str | None = None,
        config: GenerationConfig | None = None,
    ) -> BalconyLayout:
        if params is None:
            params = BalconyParams()
        params = self.resolve_params(params, preset_id)
        return self.generator.generate(params, self.layout, config)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
