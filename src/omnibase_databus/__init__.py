# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Databus Channel Namespace.

This package is the channel-naming and routing-classification layer of the
multi-datacenter databus. Every node classifies a channel from its name
alone, so the naming scheme is the agreement mechanism between nodes:

- System vs user channels
- Cross-datacenter fanout channels (master and per-datacenter replication)
- Dedup vs raw delivery
- Per-cluster canary subscription naming

Key Components:
    - omnibase_databus.channels: grammar constants, ChannelNamespaceRegistry
      and the default-registry operations
    - omnibase_databus.models: frozen value models (config, dedup mapping,
      datacenter, parsed system channel)

The package performs no I/O and holds no
message state.
"""

__all__: list[str] = []
