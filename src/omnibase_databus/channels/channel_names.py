# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Channel name constants and classification functions for the databus.

This module exposes the wire grammar as constants and binds every
``ChannelNamespaceRegistry`` operation to a single process-wide registry
built with the default grammar. The registry is created when this module is
imported, so every caller sees it fully initialized.

Channel Name Grammar:
    - **System prefix**: ``__system_bus:``
    - Master fanout: ``__system_bus:master``
    - Replication fanout: ``__system_bus:out:<datacenter>``
    - Master replay: ``__system_bus:replay``
    - Master canary: ``__system_bus:canary-<canonical cluster>``
    - Dedup-internal: ``__dedupq_`` (read side ``__dedupq_read:<queue>``)

Usage:
    >>> from omnibase_databus.channels import (
    ...     is_system_fanout_channel,
    ...     master_fanout_channel,
    ... )
    >>> is_system_fanout_channel(master_fanout_channel())
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from omnibase_databus.channels.channel_namespace_registry import (
    ChannelNamespaceRegistry,
)
from omnibase_databus.enums import EnumChannelDelivery, EnumSystemChannelKind
from omnibase_databus.models import (
    ModelChannelNamespaceConfig,
    ModelDedupChannelMapping,
    ModelSystemChannel,
)
from omnibase_databus.protocols import ProtocolDataCenter

_DEFAULT_REGISTRY: Final[ChannelNamespaceRegistry] = ChannelNamespaceRegistry(
    ModelChannelNamespaceConfig()
)

# ==============================================================================
# Wire Grammar Constants
# ==============================================================================

SYSTEM_PREFIX: Final[str] = _DEFAULT_REGISTRY.config.system_prefix
"""Reserved prefix of bus-internal channels: '__system_bus:'"""

MASTER_FANOUT: Final[str] = _DEFAULT_REGISTRY.config.master_fanout
"""Global fanout channel: '__system_bus:master'"""

REPLICATION_FANOUT_PREFIX: Final[str] = (
    _DEFAULT_REGISTRY.config.replication_fanout_prefix
)
"""Prefix of per-datacenter fanout channels: '__system_bus:out:'"""

MASTER_REPLAY: Final[str] = _DEFAULT_REGISTRY.config.master_replay
"""Replay channel: '__system_bus:replay'"""

MASTER_CANARY_PREFIX: Final[str] = _DEFAULT_REGISTRY.config.master_canary_prefix
"""Prefix of per-cluster canary subscriptions: '__system_bus:canary'"""

DEDUP_INTERNAL_PREFIX: Final[str] = _DEFAULT_REGISTRY.config.dedup_internal_prefix
"""Prefix reserved for the dedup queue's own channels: '__dedupq_'"""

DEDUP_READ_PREFIX: Final[str] = _DEFAULT_REGISTRY.config.dedup_read_prefix
"""Read-side prefix of dedup queue channels: '__dedupq_read:'"""


def default_registry() -> ChannelNamespaceRegistry:
    """Return the process-wide registry built with the wire grammar."""
    return _DEFAULT_REGISTRY


def is_system_channel(channel: str) -> bool:
    """Check if a channel name is a bus-internal system channel.

    Example:
        >>> is_system_channel("__system_bus:replay")
        True
        >>> is_system_channel("orders")
        False
    """
    return _DEFAULT_REGISTRY.is_system_channel(channel)


def is_system_fanout_channel(channel: str) -> bool:
    """Check if a channel must be mirrored across datacenters."""
    return _DEFAULT_REGISTRY.is_system_fanout_channel(channel)


def is_replication_fanout_channel(channel: str) -> bool:
    """Check if a channel is the outbound fanout channel of some datacenter."""
    return _DEFAULT_REGISTRY.is_replication_fanout_channel(channel)


def is_non_deduped(channel: str) -> bool:
    """Check if events on a channel bypass the dedup queue.

    Example:
        >>> is_non_deduped("__system_bus:master")
        True
        >>> is_non_deduped("__system_bus:canary-qa")
        False
        >>> is_non_deduped("__dedupq_read:orders")
        True
    """
    return _DEFAULT_REGISTRY.is_non_deduped(channel)


def delivery_mode(channel: str) -> EnumChannelDelivery:
    """Return RAW or DEDUPED delivery for a channel."""
    return _DEFAULT_REGISTRY.delivery_mode(channel)


def parse_system_channel(channel: str) -> ModelSystemChannel | None:
    """Parse a system channel name into its kind and parameter, or None."""
    return _DEFAULT_REGISTRY.parse_system_channel(channel)


def system_channel_kind(channel: str) -> EnumSystemChannelKind | None:
    """Return the system channel kind of a channel name, or None."""
    return _DEFAULT_REGISTRY.system_channel_kind(channel)


def master_fanout_channel() -> str:
    """Return the global fanout channel name."""
    return _DEFAULT_REGISTRY.master_fanout_channel()


def replication_fanout_channel(datacenter: ProtocolDataCenter) -> str:
    """Return the outbound fanout channel for a datacenter.

    Example:
        >>> replication_fanout_channel(ModelDataCenter(name="us-east-1"))
        '__system_bus:out:us-east-1'
    """
    return _DEFAULT_REGISTRY.replication_fanout_channel(datacenter)


def replication_fanout_channels(
    datacenters: Iterable[ProtocolDataCenter],
) -> tuple[str, ...]:
    """Return the outbound fanout channel for each datacenter, in order."""
    return _DEFAULT_REGISTRY.replication_fanout_channels(datacenters)


def master_replay_channel() -> str:
    """Return the replay channel name."""
    return _DEFAULT_REGISTRY.master_replay_channel()


def master_canary_subscription(cluster: str) -> str:
    """Return the canary subscription name for a cluster.

    Example:
        >>> master_canary_subscription("East Coast")
        '__system_bus:canary-east-coast'
    """
    return _DEFAULT_REGISTRY.master_canary_subscription(cluster)


def dedup_channels() -> ModelDedupChannelMapping:
    """Return the shared dedup channel mapping (same instance on every call)."""
    return _DEFAULT_REGISTRY.dedup_channels()


__all__ = [
    # Constants
    "DEDUP_INTERNAL_PREFIX",
    "DEDUP_READ_PREFIX",
    "MASTER_CANARY_PREFIX",
    "MASTER_FANOUT",
    "MASTER_REPLAY",
    "REPLICATION_FANOUT_PREFIX",
    "SYSTEM_PREFIX",
    # Functions
    "dedup_channels",
    "default_registry",
    "delivery_mode",
    "is_non_deduped",
    "is_replication_fanout_channel",
    "is_system_channel",
    "is_system_fanout_channel",
    "master_canary_subscription",
    "master_fanout_channel",
    "master_replay_channel",
    "parse_system_channel",
    "replication_fanout_channel",
    "replication_fanout_channels",
    "system_channel_kind",
]
