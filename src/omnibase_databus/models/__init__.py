# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Databus value models.

All models are frozen pydantic models and safe to share across threads.

Exports:
    ModelChannelNamespaceConfig: Channel name grammar configuration
    ModelDataCenter: Datacenter identity used for replication fanout naming
    ModelDedupChannelMapping: Read/write channel contract for dedup queues
    ModelSystemChannel: Parsed system channel (kind + parameter)
"""

from omnibase_databus.models.model_channel_namespace_config import (
    ModelChannelNamespaceConfig,
)
from omnibase_databus.models.model_data_center import ModelDataCenter
from omnibase_databus.models.model_dedup_channel_mapping import (
    ModelDedupChannelMapping,
)
from omnibase_databus.models.model_system_channel import ModelSystemChannel

__all__: list[str] = [
    "ModelChannelNamespaceConfig",
    "ModelDataCenter",
    "ModelDedupChannelMapping",
    "ModelSystemChannel",
]
