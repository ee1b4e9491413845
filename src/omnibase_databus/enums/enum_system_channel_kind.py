# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
System Channel Kind Enumeration.

Defines the closed set of bus-internal channel kinds living under the
system prefix:
- MASTER_FANOUT: The single global fanout channel
- REPLICATION_FANOUT: One outbound fanout channel per remote datacenter
- MASTER_REPLAY: The channel used to replay previously delivered events
- MASTER_CANARY: One monitoring subscription per cluster

Thread Safety:
    All enums in this module are immutable and thread-safe.
    Enum values can be safely shared across threads without synchronization.
"""

from enum import Enum, unique


@unique
class EnumSystemChannelKind(str, Enum):
    """
    Kind of a bus-internal system channel.

    The set is closed: new kinds are not registered at runtime. Two of the
    kinds are singletons and two are parameterized (by datacenter name and
    by canonical cluster name respectively).

    Values:
        MASTER_FANOUT: Global fanout channel all nodes publish system events to
        REPLICATION_FANOUT: Per-datacenter outbound fanout channel
        MASTER_REPLAY: Replay channel for previously delivered events
        MASTER_CANARY: Per-cluster canary monitoring subscription

    Example:
        >>> EnumSystemChannelKind.MASTER_FANOUT.is_fanout()
        True
        >>> EnumSystemChannelKind.MASTER_CANARY.is_parameterized()
        True
    """

    MASTER_FANOUT = "master_fanout"
    """Global fanout channel; a singleton."""

    REPLICATION_FANOUT = "replication_fanout"
    """Outbound fanout channel for one remote datacenter."""

    MASTER_REPLAY = "master_replay"
    """Replay channel; a singleton."""

    MASTER_CANARY = "master_canary"
    """Canary subscription for one cluster."""

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    def is_fanout(self) -> bool:
        """Check if channels of this kind are mirrored across datacenters."""
        return self in (
            EnumSystemChannelKind.MASTER_FANOUT,
            EnumSystemChannelKind.REPLICATION_FANOUT,
        )

    def is_parameterized(self) -> bool:
        """Check if channels of this kind carry a datacenter or cluster parameter."""
        return self in (
            EnumSystemChannelKind.REPLICATION_FANOUT,
            EnumSystemChannelKind.MASTER_CANARY,
        )

    def is_deduped(self) -> bool:
        """Check if channels of this kind receive deduplicated delivery.

        The canary is the only system channel kind that is deduplicated.
        """
        return self == EnumSystemChannelKind.MASTER_CANARY


__all__ = ["EnumSystemChannelKind"]
