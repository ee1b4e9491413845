# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Datacenter protocol consumed by replication fanout naming.

Datacenters are owned by the topology/discovery layer. The channel
namespace only reads their ``name``, so any object exposing a string
``name`` attribute satisfies this protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolDataCenter(Protocol):
    """Protocol for a datacenter participating in cross-region replication.

    Note:
        The name is used verbatim in replication fanout channel names. It
        must be unique across datacenters and is not escaped.
    """

    @property
    def name(self) -> str:
        """Stable, unique datacenter name."""
        ...


__all__ = [
    "ProtocolDataCenter",
]
