# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Databus Channel Namespace.

This package owns the channel name grammar of the databus and the pure
functions mapping channel names to routing decisions: system vs user
channel, cross-datacenter fanout, dedup vs raw delivery, and the naming of
per-cluster canary subscriptions. Other components MUST NOT duplicate the
prefix literals; they call into this package instead.

Exports:
    Grammar constants (SYSTEM_PREFIX, MASTER_FANOUT, ...)
    ChannelNamespaceRegistry: Registry bound to one grammar
    Module-level operations bound to the default registry
    canonicalize_cluster: Cluster label canonicalization
"""

from omnibase_databus.channels.channel_names import (
    DEDUP_INTERNAL_PREFIX,
    DEDUP_READ_PREFIX,
    MASTER_CANARY_PREFIX,
    MASTER_FANOUT,
    MASTER_REPLAY,
    REPLICATION_FANOUT_PREFIX,
    SYSTEM_PREFIX,
    dedup_channels,
    default_registry,
    delivery_mode,
    is_non_deduped,
    is_replication_fanout_channel,
    is_system_channel,
    is_system_fanout_channel,
    master_canary_subscription,
    master_fanout_channel,
    master_replay_channel,
    parse_system_channel,
    replication_fanout_channel,
    replication_fanout_channels,
    system_channel_kind,
)
from omnibase_databus.channels.channel_namespace_registry import (
    ChannelNamespaceRegistry,
)
from omnibase_databus.channels.util_cluster_canonical import canonicalize_cluster

__all__: list[str] = [
    # Grammar constants
    "DEDUP_INTERNAL_PREFIX",
    "DEDUP_READ_PREFIX",
    "MASTER_CANARY_PREFIX",
    "MASTER_FANOUT",
    "MASTER_REPLAY",
    "REPLICATION_FANOUT_PREFIX",
    "SYSTEM_PREFIX",
    # Registry
    "ChannelNamespaceRegistry",
    "default_registry",
    # Operations
    "canonicalize_cluster",
    "dedup_channels",
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
