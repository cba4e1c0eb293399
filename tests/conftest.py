import os

import pytest

from return_pricing.models import RouteInfo
from return_pricing.settings import PricingSettings

_ENV_PREFIXES = ("PRICING_", "LOG_", "RATES__")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep pricing env overrides from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.upper().startswith(_ENV_PREFIXES):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def default_settings() -> PricingSettings:
    return PricingSettings()


@pytest.fixture
def uncapped_settings() -> PricingSettings:
    """Settings with the $3.99 minimum-fare ceiling switched off."""
    return PricingSettings(total_cap_policy="none")


@pytest.fixture
def scenario_route() -> RouteInfo:
    """5 miles, 30 minutes."""
    return RouteInfo(distance=5.0, estimated_time=30.0)
