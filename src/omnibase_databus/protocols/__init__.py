# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for external collaborators consumed by the databus namespace."""

from omnibase_databus.protocols.protocol_data_center import ProtocolDataCenter

__all__: list[str] = [
    "ProtocolDataCenter",
]
