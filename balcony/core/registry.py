"""Rule registry: stores and resolves layout rules."""

from __future__ import annotations
import logging

from balcony.core.errors import RequiredRuleDisabled
from balcony.models import LayoutContext
from balcony.rules.base import LayoutRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for all layout rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, LayoutRule] = {}

    def register(self, rule: LayoutRule) -> None:
        """Register a layout rule, replacing any rule with the same id."""
        if rule.get_id() in self._rules:
            logger.debug("Replacing rule %s", rule.get_id())
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> LayoutRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[LayoutRule]:
        """Return all registered rules in execution order."""
        return self._resolve_order(sorted(self._rules.values(), key=lambda r: r.priority))

    def get_applicable_rules(self, context: LayoutContext) -> list[LayoutRule]:
        """
        Return rules that apply to the given context, sorted by priority.

        Respects GenerationConfig.enabled_rules and disabled_rules.
        Raises RequiredRuleDisabled if they would drop a required rule.
        """
        config = context.config
        candidates = list(self._rules.values())

        # If enabled_rules is specified, only use those
        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        # Remove explicitly disabled rules
        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        kept = {r.get_id() for r in candidates}
        for rule in self._rules.values():
            if rule.required and rule.get_id() not in kept:
                raise RequiredRuleDisabled(rule.get_id())

        applicable = [r for r in candidates if r.applies(context)]

        # Sort by priority (lower first), then resolve dependencies.
        # sort() is stable, so equal priorities keep registration order.
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[LayoutRule]) -> list[LayoutRule]:
        """Topological sort respecting dependencies."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[LayoutRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with the standard balcony rules."""
    from balcony.rules.platform.slab import PlatformSlabRule
    from balcony.rules.support.columns import SupportColumnRule
    from balcony.rules.railing.posts import RailingPostRule
    from balcony.rules.railing.infill import RailingInfillRule

    registry = RuleRegistry()
    registry.register(PlatformSlabRule())
    registry.register(SupportColumnRule())
    registry.register(RailingPostRule())
    registry.register(RailingInfillRule())
    return registry
