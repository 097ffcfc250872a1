"""Layout error taxonomy.

All of these are data errors: they abort the current layout pass and
propagate to the caller. Nothing is retried.
"""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for errors raised while computing a layout."""
    code = "layout_error"


class InvalidSupportCount(LayoutError):
    code = "invalid_support_count"

    def __init__(self, count: object) -> None:
        self.count = count
        super().__init__(f"Support count must be one of 2, 3, 4, 6 (got {count!r})")


class InvalidRailingStyle(LayoutError):
    code = "invalid_railing_style"

    def __init__(self, style: object) -> None:
        self.style = style
        super().__init__(f"Unknown railing style {style!r}")


class DegenerateDimension(LayoutError):
    code = "degenerate_dimension"

    def __init__(self, name: str, value: float, minimum: float = 0.0) -> None:
        self.name = name
        self.value = value
        self.minimum = minimum
        super().__init__(f"{name} must be a number greater than {minimum} (got {value!r})")


class PresetNotFound(LookupError):
    """Raised by the service layer for an unknown preset or manufacturer."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} {key!r} not found")


class RequiredRuleDisabled(LayoutError):
    """A generation config tried to skip a rule the layout cannot omit."""
    code = "required_rule_disabled"

    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        super().__init__(f"Rule {rule_id!r} is required and cannot be disabled")
