"""Abstract base class for all layout rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each places one category of structural elements
- Composable: multiple rules run in sequence via the registry
- Pure: a rule reads the context and returns new placements
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod

from balcony.models import LayoutContext, Placement

# Ratios this close to an integer count as that integer
SPACING_TOLERANCE = 1e-9


def ceil_div(length: float, step: float) -> int:
    return math.ceil(length / step - SPACING_TOLERANCE)


def floor_div(length: float, step: float) -> int:
    return math.floor(length / step + SPACING_TOLERANCE)


class LayoutRule(ABC):
    """
    Base class for all layout rules.

    Subclasses implement `applies()` and `generate()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order. The order
    is part of the output contract (renderers key on it).
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    # Required rules cannot be dropped through GenerationConfig.
    required: bool = False

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'railing.posts')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Railing Posts')."""
        ...

    def applies(self, context: LayoutContext) -> bool:
        """Return True if this rule should run for the given context."""
        return True

    @abstractmethod
    def generate(self, context: LayoutContext) -> list[Placement]:
        """
        Generate placements for the given context.

        The context provides params, layout constants and the open
        edges found by the analyzer.
        """
        ...
