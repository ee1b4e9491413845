# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Channel namespace grammar configuration.

``ModelChannelNamespaceConfig`` carries every literal of the channel name
grammar. Its defaults ARE the wire contract shared by all nodes in all
datacenters; changing any of them on a subset of nodes breaks
classification agreement across the bus.

Wire Grammar (defaults)::

    system_prefix             = "__system_bus:"
    master_fanout             = system_prefix + "master"
    replication_fanout_prefix = system_prefix + "out:"
    master_replay             = system_prefix + "replay"
    master_canary_prefix      = system_prefix + "canary"
    dedup_internal_prefix     = "__dedupq_"
    dedup_read_prefix         = "__dedupq_read:"

Canary subscriptions join ``master_canary_prefix`` and the canonical cluster
name with ``CANARY_SEPARATOR``.

Building:
    - ``ModelChannelNamespaceConfig()`` - the wire defaults, used by the
      process-wide default registry
    - ``with_system_prefix(prefix)`` - every system name recomposed under
      another prefix, for explicitly built registries
    - ``from_mapping(data)`` - plain mapping with the same field names

A grammar that would make classification ambiguous is rejected with
``ChannelNamespaceConfigurationError``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from omnibase_databus.errors import (
    ChannelNamespaceConfigurationError,
    ModelDatabusErrorContext,
)

logger = logging.getLogger(__name__)

# ==============================================================================
# Wire Grammar Literals
# ==============================================================================

DEFAULT_SYSTEM_PREFIX: Final[str] = "__system_bus:"

_MASTER_FANOUT_SUFFIX: Final[str] = "master"
_REPLICATION_FANOUT_SUFFIX: Final[str] = "out:"
_MASTER_REPLAY_SUFFIX: Final[str] = "replay"
_MASTER_CANARY_SUFFIX: Final[str] = "canary"

DEFAULT_DEDUP_INTERNAL_PREFIX: Final[str] = "__dedupq_"
DEFAULT_DEDUP_READ_PREFIX: Final[str] = DEFAULT_DEDUP_INTERNAL_PREFIX + "read:"

CANARY_SEPARATOR: Final[str] = "-"

# Fields naming system channel kinds; each must live under system_prefix.
_SYSTEM_NAME_FIELDS: Final[tuple[str, ...]] = (
    "master_fanout",
    "replication_fanout_prefix",
    "master_replay",
    "master_canary_prefix",
)

# Kind prefixes matched with startswith(); no other kind name may fall under them.
_SYSTEM_PREFIX_FIELDS: Final[tuple[str, ...]] = (
    "replication_fanout_prefix",
    "master_canary_prefix",
)


def _compose(system_prefix: str) -> dict[str, str]:
    return {
        "system_prefix": system_prefix,
        "master_fanout": system_prefix + _MASTER_FANOUT_SUFFIX,
        "replication_fanout_prefix": system_prefix + _REPLICATION_FANOUT_SUFFIX,
        "master_replay": system_prefix + _MASTER_REPLAY_SUFFIX,
        "master_canary_prefix": system_prefix + _MASTER_CANARY_SUFFIX,
    }


_DEFAULT_NAMES: Final[dict[str, str]] = _compose(DEFAULT_SYSTEM_PREFIX)


class ModelChannelNamespaceConfig(BaseModel):
    """Immutable channel namespace grammar.

    Attributes:
        system_prefix: Reserved prefix marking a channel as bus-internal.
        master_fanout: Global fanout channel name.
        replication_fanout_prefix: Prefix of per-datacenter fanout channels.
        master_replay: Replay channel name.
        master_canary_prefix: Prefix of per-cluster canary subscriptions.
        dedup_internal_prefix: Prefix reserved for the dedup queue's own
            channels. Channels under it always get raw delivery.
        dedup_read_prefix: Read-side prefix handed to the dedup subsystem.

    Example:
        >>> config = ModelChannelNamespaceConfig()
        >>> config.master_fanout
        '__system_bus:master'
        >>> ModelChannelNamespaceConfig.with_system_prefix("__test_bus:").master_replay
        '__test_bus:replay'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        from_attributes=True,
    )

    system_prefix: str = Field(
        default=_DEFAULT_NAMES["system_prefix"],
        description="Reserved prefix marking a channel as bus-internal.",
        min_length=1,
    )
    master_fanout: str = Field(
        default=_DEFAULT_NAMES["master_fanout"],
        description="Global fanout channel name.",
        min_length=1,
    )
    replication_fanout_prefix: str = Field(
        default=_DEFAULT_NAMES["replication_fanout_prefix"],
        description="Prefix of per-datacenter fanout channels.",
        min_length=1,
    )
    master_replay: str = Field(
        default=_DEFAULT_NAMES["master_replay"],
        description="Replay channel name.",
        min_length=1,
    )
    master_canary_prefix: str = Field(
        default=_DEFAULT_NAMES["master_canary_prefix"],
        description="Prefix of per-cluster canary subscriptions.",
        min_length=1,
    )
    dedup_internal_prefix: str = Field(
        default=DEFAULT_DEDUP_INTERNAL_PREFIX,
        description="Prefix reserved for the dedup queue's own channels.",
        min_length=1,
    )
    dedup_read_prefix: str = Field(
        default=DEFAULT_DEDUP_READ_PREFIX,
        description="Read-side prefix handed to the dedup subsystem.",
        min_length=1,
    )

    @model_validator(mode="after")
    def _validate_grammar(self) -> ModelChannelNamespaceConfig:
        # ChannelNamespaceConfigurationError is not a ValueError, so pydantic
        # lets it propagate unwrapped.
        for field_name in _SYSTEM_NAME_FIELDS:
            value = getattr(self, field_name)
            if not value.startswith(self.system_prefix) or value == self.system_prefix:
                raise _grammar_error(
                    f"{field_name} '{value}' must extend the system prefix "
                    f"'{self.system_prefix}'",
                    parameter=field_name,
                )

        if self.master_fanout == self.master_replay:
            raise _grammar_error(
                "master_fanout and master_replay must differ",
                parameter="master_replay",
            )

        for prefix_field in _SYSTEM_PREFIX_FIELDS:
            prefix = getattr(self, prefix_field)
            for other_field in _SYSTEM_NAME_FIELDS:
                if other_field == prefix_field:
                    continue
                other = getattr(self, other_field)
                if other.startswith(prefix):
                    raise _grammar_error(
                        f"{other_field} '{other}' falls under {prefix_field} "
                        f"'{prefix}' and would be misclassified",
                        parameter=other_field,
                    )

        # Both directions: a system prefix under the dedup-internal prefix
        # would make every system channel raw, canary included.
        if self.dedup_internal_prefix.startswith(
            self.system_prefix
        ) or self.system_prefix.startswith(self.dedup_internal_prefix):
            raise _grammar_error(
                f"dedup_internal_prefix '{self.dedup_internal_prefix}' and "
                f"system_prefix '{self.system_prefix}' must not overlap",
                parameter="dedup_internal_prefix",
            )

        if not self.dedup_read_prefix.startswith(self.dedup_internal_prefix):
            raise _grammar_error(
                f"dedup_read_prefix '{self.dedup_read_prefix}' must start with "
                f"dedup_internal_prefix '{self.dedup_internal_prefix}'",
                parameter="dedup_read_prefix",
            )
        return self

    @classmethod
    def with_system_prefix(
        cls,
        system_prefix: str,
        *,
        dedup_read_prefix: str | None = None,
    ) -> ModelChannelNamespaceConfig:
        """Recompose every system channel name under ``system_prefix``."""
        data: dict[str, str] = _compose(system_prefix)
        if dedup_read_prefix is not None:
            data["dedup_read_prefix"] = dedup_read_prefix
        return cls.from_mapping(data)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, object],
    ) -> ModelChannelNamespaceConfig:
        """Build a config from a plain mapping.

        When ``system_prefix`` is given, the system channel names not listed
        explicitly are recomposed under it.

        Raises:
            ChannelNamespaceConfigurationError: If the mapping holds unknown
                fields, non-string values, or an ambiguous grammar.
        """
        merged: dict[str, object] = {}
        system_prefix = data.get("system_prefix")
        if isinstance(system_prefix, str) and system_prefix:
            merged.update(_compose(system_prefix))
        merged.update(data)
        try:
            return cls(**merged)
        except ChannelNamespaceConfigurationError:
            logger.warning("Rejected channel namespace grammar %r", dict(data))
            raise
        except ValidationError as e:
            logger.warning("Invalid channel namespace configuration %r", dict(data))
            raise ChannelNamespaceConfigurationError(
                f"Invalid channel namespace configuration: {e}",
                context=ModelDatabusErrorContext.with_correlation(
                    operation="load_config",
                ),
            ) from e


def _grammar_error(message: str, *, parameter: str) -> ChannelNamespaceConfigurationError:
    return ChannelNamespaceConfigurationError(
        message,
        context=ModelDatabusErrorContext.with_correlation(operation="validate_config"),
        parameter=parameter,
    )


__all__ = [
    "CANARY_SEPARATOR",
    "DEFAULT_DEDUP_INTERNAL_PREFIX",
    "DEFAULT_DEDUP_READ_PREFIX",
    "DEFAULT_SYSTEM_PREFIX",
    "ModelChannelNamespaceConfig",
]
