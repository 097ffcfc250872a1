"""Shared fixtures for the balcony layout test suite."""
import pytest

from balcony.core.generator import LayoutGenerator
from balcony.core.registry import create_default_registry
from balcony.models import BalconyParams, LayoutConfig, LayoutContext, open_edges


@pytest.fixture
def generator():
    return LayoutGenerator(create_default_registry())


@pytest.fixture
def scenario_params():
    """3 x 1.5m glass balcony on two supports."""
    return BalconyParams(
        width=3.0, depth=1.5, platform_height=2.5, railing_height=1.1,
        support_count=2, railing_style="glass",
    )


@pytest.fixture
def make_context():
    """Build an analysed context without running any rules."""
    def _make(**overrides):
        params = BalconyParams(**overrides)
        return LayoutContext(
            params=params,
            layout=LayoutConfig(),
            edges=open_edges(params.width, params.depth),
        )
    return _make
