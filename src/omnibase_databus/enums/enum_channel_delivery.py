# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Channel Delivery Enumeration.

Defines how events published to a channel reach subscribers:
- DEDUPED: Duplicate publishes are collapsed by the dedup queue
- RAW: Every publish is delivered as-is

Thread Safety:
    All enums in this module are immutable and thread-safe.
"""

from enum import Enum, unique


@unique
class EnumChannelDelivery(str, Enum):
    """
    Delivery semantics selected for a channel.

    Values:
        DEDUPED: Events pass through the dedup queue before delivery
        RAW: Events bypass the dedup queue

    Example:
        >>> str(EnumChannelDelivery.RAW)
        'raw'
    """

    DEDUPED = "deduped"
    RAW = "raw"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @classmethod
    def from_non_deduped(cls, non_deduped: bool) -> "EnumChannelDelivery":
        """Map a non-deduped classification onto a delivery mode."""
        return cls.RAW if non_deduped else cls.DEDUPED


__all__ = ["EnumChannelDelivery"]
