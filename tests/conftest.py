"""Pytest configuration and shared fixtures for omnibase_databus tests."""

from __future__ import annotations

import pytest

from omnibase_databus.channels import ChannelNamespaceRegistry
from omnibase_databus.models import ModelChannelNamespaceConfig, ModelDataCenter

# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture
def registry() -> ChannelNamespaceRegistry:
    """Registry bound to the default wire grammar."""
    return ChannelNamespaceRegistry()


@pytest.fixture
def test_bus_registry() -> ChannelNamespaceRegistry:
    """Registry bound to a grammar recomposed under '__test_bus:'."""
    return ChannelNamespaceRegistry(
        ModelChannelNamespaceConfig.with_system_prefix("__test_bus:")
    )


# =============================================================================
# Datacenter Fixtures
# =============================================================================


@pytest.fixture
def us_east() -> ModelDataCenter:
    """Datacenter named 'us-east-1'."""
    return ModelDataCenter(name="us-east-1")


@pytest.fixture
def eu_west() -> ModelDataCenter:
    """Datacenter named 'eu-west-1'."""
    return ModelDataCenter(name="eu-west-1")

