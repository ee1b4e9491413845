# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dedup channel mapping shared with the dedup queue subsystem.

The dedup queue keeps two event channels per queue: a write channel that
publishers append to, and a read channel holding the deduplicated events
consumers poll. The write channel is shared with the queue name itself, so
it doubles as the ordinary subscription channel; only the read side carries
a prefix. ``ModelDedupChannelMapping`` lets the dedup subsystem recognize
and pair its own internal channels.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelDedupChannelMapping(BaseModel):
    """Immutable read/write channel naming contract for dedup queues.

    Attributes:
        read_prefix: Prefix of the read-side (deduplicated) channel.

    Example:
        >>> mapping = ModelDedupChannelMapping.shared_write_channel("__dedupq_read:")
        >>> mapping.read_channel("orders")
        '__dedupq_read:orders'
        >>> mapping.write_channel("orders")
        'orders'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    read_prefix: str = Field(
        ...,
        description="Prefix of the read-side (deduplicated) channel.",
        min_length=1,
    )

    @classmethod
    def shared_write_channel(cls, read_prefix: str) -> ModelDedupChannelMapping:
        """Build a mapping whose write channel is the queue name itself."""
        return cls(read_prefix=read_prefix)

    @property
    def write_prefix(self) -> str:
        """Companion write-side prefix; empty because the write channel is shared."""
        return ""

    def write_channel(self, queue: str) -> str:
        """Return the write-side channel name for ``queue``."""
        return self.write_prefix + queue

    def read_channel(self, queue: str) -> str:
        """Return the read-side channel name for ``queue``."""
        return self.read_prefix + queue

    def queue_from_read_channel(self, channel: str) -> str | None:
        """Recover the queue name from a read channel, or ``None``."""
        if not channel.startswith(self.read_prefix):
            return None
        return channel[len(self.read_prefix) :]


__all__ = ["ModelDedupChannelMapping"]
