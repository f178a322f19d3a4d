"""Shared fixtures."""

import pytest

# Variant mean is lower than control's at confidence below 0.999
VARIANT = [42.1, 41.3, 42.4, 43.2, 41.8, 41.0, 41.8, 42.8, 42.3, 42.7]
CONTROL = [42.7, 43.8, 42.5, 43.1, 44.0, 43.6, 43.3, 43.5, 41.7, 44.1]


@pytest.fixture
def variant_values() -> list[float]:
    return list(VARIANT)


@pytest.fixture
def control_values() -> list[float]:
    return list(CONTROL)
