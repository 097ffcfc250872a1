"""Layout assembler: orchestrates analysis and rule execution."""

from __future__ import annotations
import logging

from balcony.models import (
    BalconyParams, BalconyLayout, GenerationConfig, LayoutConfig, LayoutContext,
)
from balcony.core.registry import RuleRegistry
from balcony.core.analyzer import PlatformAnalyzer

logger = logging.getLogger(__name__)


class LayoutGenerator:
    """
    Stateless layout generator.

    Takes params, runs analysis, executes applicable rules in order,
    and returns the complete placement list. Every call recomputes
    from scratch; nothing is carried over between calls.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.analyzer = PlatformAnalyzer()

    def generate(
        self,
        params: BalconyParams,
        layout: LayoutConfig | None = None,
        config: GenerationConfig | None = None,
    ) -> BalconyLayout:
        context = LayoutContext(
            params=params,
            layout=layout or LayoutConfig(),
            config=config or GenerationConfig(),
        )

        # Analysis phase: reject degenerate input, find open edges
        self.analyzer.analyze(context)

        # Generation phase: run applicable rules
        for rule in self.registry.get_applicable_rules(context):
            placements = rule.generate(context)
            logger.debug("%s placed %d elements", rule.get_id(), len(placements))
            context.add_placements(placements)

        result = BalconyLayout(placements=context.placements)
        logger.info(
            "Layout %.2fx%.2fm, %d supports, %s railing: %d elements",
            params.width, params.depth, params.support_count,
            params.railing_style, result.stats.total_elements,
        )
        return result
