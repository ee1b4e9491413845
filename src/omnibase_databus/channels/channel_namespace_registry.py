# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Channel namespace registry for the databus.

Formal Invariant:
    The channel name alone decides how the bus treats a channel. Every node
    in every datacenter classifies a given name the same way, without
    coordination, because all of them share the same grammar. The
    ``ChannelNamespaceRegistry`` is the single place that knows the grammar;
    publishers, fanout replicators, dedup routing and canary monitors MUST ask
    it instead of matching prefixes themselves.

Classification Order:
    Dedup eligibility (``is_non_deduped``) is decided on its own and before
    any fanout decision. A name under the dedup-internal prefix always gets
    raw delivery, even though it is not a system channel, so a user channel
    that accidentally collides with the dedup queue's naming is never
    captured by the dedup subsystem.

Thread Safety:
    The registry holds only frozen models built in ``__init__``. All methods
    are pure and may be called concurrently without synchronization.

See Also:
    omnibase_databus.models.model_channel_namespace_config - Wire grammar
    omnibase_databus.channels.channel_names - Process-wide default registry
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from omnibase_databus.channels.util_cluster_canonical import canonicalize_cluster
from omnibase_databus.enums import EnumChannelDelivery, EnumSystemChannelKind
from omnibase_databus.models import (
    ModelChannelNamespaceConfig,
    ModelDedupChannelMapping,
    ModelSystemChannel,
)
from omnibase_databus.models.model_channel_namespace_config import CANARY_SEPARATOR
from omnibase_databus.protocols import ProtocolDataCenter

logger = logging.getLogger(__name__)


class ChannelNamespaceRegistry:
    """Classifies channel names and derives system channel names.

    None of the methods raise: any string is a valid channel name, and
    names that match no system grammar are ordinary user channels.

    Args:
        config: Channel name grammar. Defaults to the wire grammar.

    Example:
        >>> registry = ChannelNamespaceRegistry()
        >>> registry.replication_fanout_channel(ModelDataCenter(name="us-east-1"))
        '__system_bus:out:us-east-1'
        >>> registry.master_canary_subscription("QA Cluster")
        '__system_bus:canary-qa-cluster'
        >>> registry.is_non_deduped("__dedupq_read:orders")
        True
    """

    def __init__(self, config: ModelChannelNamespaceConfig | None = None) -> None:
        self._config = config if config is not None else ModelChannelNamespaceConfig()
        self._canary_subscription_prefix = (
            self._config.master_canary_prefix + CANARY_SEPARATOR
        )
        self._dedup_channels = ModelDedupChannelMapping.shared_write_channel(
            self._config.dedup_read_prefix
        )
        logger.debug(
            "Channel namespace registry initialized "
            "(system_prefix=%r, dedup_read_prefix=%r)",
            self._config.system_prefix,
            self._config.dedup_read_prefix,
        )

    @property
    def config(self) -> ModelChannelNamespaceConfig:
        """Grammar this registry classifies against."""
        return self._config

    # --------------------------------------------------------------------------
    # Classification
    # --------------------------------------------------------------------------

    def is_system_channel(self, channel: str) -> bool:
        """Return True if ``channel`` lives under the system prefix."""
        return channel.startswith(self._config.system_prefix)

    def is_system_fanout_channel(self, channel: str) -> bool:
        """Return True for the master fanout channel or any replication fanout channel.

        Replicators use this to decide whether a channel must be mirrored
        across datacenters.
        """
        return (
            channel == self._config.master_fanout
            or channel.startswith(self._config.replication_fanout_prefix)
        )

    def is_replication_fanout_channel(self, channel: str) -> bool:
        """Return True for an outbound fanout channel of any datacenter."""
        return channel.startswith(self._config.replication_fanout_prefix)

    def is_non_deduped(self, channel: str) -> bool:
        """Return True if events on ``channel`` must bypass the dedup queue.

        The canary is the only system channel that gets deduped; replay and
        fanout channels must never collapse duplicate events. Names under the
        dedup-internal prefix also get raw access to the underlying channel,
        whether or not they are system channels.
        """
        return (
            self.is_system_channel(channel)
            and not channel.startswith(self._config.master_canary_prefix)
        ) or channel.startswith(self._config.dedup_internal_prefix)

    def delivery_mode(self, channel: str) -> EnumChannelDelivery:
        """Return the delivery semantics for ``channel``."""
        return EnumChannelDelivery.from_non_deduped(self.is_non_deduped(channel))

    def parse_system_channel(self, channel: str) -> ModelSystemChannel | None:
        """Parse ``channel`` into a system channel kind and parameter.

        Total over every ``str``: the result is built without re-validating
        the channel text, so names that pydantic would reject as strings
        (e.g., containing lone surrogates) still parse. ``parameter`` is the
        suffix after the kind's prefix, returned as-is.

        Returns:
            The parsed channel, or None when ``channel`` is not one of the
            four system channel kinds (user channels, dedup-internal channels
            and unrecognized names under the system prefix).

        Example:
            >>> registry.parse_system_channel("__system_bus:out:eu-west-1").parameter
            'eu-west-1'
            >>> registry.parse_system_channel("orders") is None
            True
        """
        config = self._config
        if channel == config.master_fanout:
            return ModelSystemChannel.model_construct(
                kind=EnumSystemChannelKind.MASTER_FANOUT,
                channel_name=channel,
            )
        if channel == config.master_replay:
            return ModelSystemChannel.model_construct(
                kind=EnumSystemChannelKind.MASTER_REPLAY,
                channel_name=channel,
            )
        if channel.startswith(config.replication_fanout_prefix):
            return ModelSystemChannel.model_construct(
                kind=EnumSystemChannelKind.REPLICATION_FANOUT,
                parameter=channel[len(config.replication_fanout_prefix) :],
                channel_name=channel,
            )
        if channel.startswith(self._canary_subscription_prefix):
            return ModelSystemChannel.model_construct(
                kind=EnumSystemChannelKind.MASTER_CANARY,
                parameter=channel[len(self._canary_subscription_prefix) :],
                channel_name=channel,
            )
        return None

    def system_channel_kind(self, channel: str) -> EnumSystemChannelKind | None:
        """Return the system channel kind of ``channel``, or None."""
        parsed = self.parse_system_channel(channel)
        return parsed.kind if parsed is not None else None

    # --------------------------------------------------------------------------
    # Derivation
    # --------------------------------------------------------------------------

    def master_fanout_channel(self) -> str:
        """Return the global fanout channel name."""
        return self._config.master_fanout

    def replication_fanout_channel(self, datacenter: ProtocolDataCenter) -> str:
        """Return the outbound fanout channel for ``datacenter``.

        The datacenter name is appended verbatim; unique datacenter names
        give unique channels.
        """
        return self._config.replication_fanout_prefix + datacenter.name

    def replication_fanout_channels(
        self, datacenters: Iterable[ProtocolDataCenter]
    ) -> tuple[str, ...]:
        """Return the outbound fanout channel for each datacenter, in order."""
        return tuple(self.replication_fanout_channel(dc) for dc in datacenters)

    def master_replay_channel(self) -> str:
        """Return the replay channel name."""
        return self._config.master_replay

    def master_canary_subscription(self, cluster: str) -> str:
        """Return the canary subscription name for ``cluster``.

        Cluster names differing only by letter case or by space-vs-hyphen
        map to the same subscription.
        """
        return self._canary_subscription_prefix + canonicalize_cluster(cluster)

    def dedup_channels(self) -> ModelDedupChannelMapping:
        """Return the dedup channel mapping built when the registry was created."""
        return self._dedup_channels


__all__ = ["ChannelNamespaceRegistry"]
