# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Databus Enumerations Module.

Exports:
    EnumChannelDelivery: Delivery semantics for a channel (DEDUPED, RAW)
    EnumSystemChannelKind: Closed set of system channel kinds (MASTER_FANOUT,
        REPLICATION_FANOUT, MASTER_REPLAY, MASTER_CANARY)
"""

from omnibase_databus.enums.enum_channel_delivery import EnumChannelDelivery
from omnibase_databus.enums.enum_system_channel_kind import EnumSystemChannelKind

__all__: list[str] = [
    "EnumChannelDelivery",
    "EnumSystemChannelKind",
]
