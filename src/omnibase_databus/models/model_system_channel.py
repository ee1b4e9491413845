# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parsed system channel: a system channel kind plus its parameter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omnibase_databus.enums import EnumSystemChannelKind


class ModelSystemChannel(BaseModel):
    """Tagged system channel identity.

    ``parameter`` holds the text following the kind's prefix, returned
    as-is: the datacenter name for ``REPLICATION_FANOUT`` and the cluster
    suffix for ``MASTER_CANARY`` (already canonical for names built by
    ``master_canary_subscription``, not re-canonicalized when parsed). It is
    ``None`` for the two singleton kinds.

    Attributes:
        kind: System channel kind.
        parameter: Datacenter or cluster parameter, when the kind has one.
        channel_name: The wire channel name.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    kind: EnumSystemChannelKind = Field(
        ...,
        description="System channel kind.",
    )
    parameter: str | None = Field(
        default=None,
        description="Text after the kind's prefix: datacenter name or cluster suffix.",
    )
    channel_name: str = Field(
        ...,
        description="Wire channel name.",
        min_length=1,
    )

    @model_validator(mode="after")
    def _validate_parameter(self) -> ModelSystemChannel:
        if self.kind.is_parameterized() and self.parameter is None:
            raise ValueError(f"{self.kind} channels require a parameter")
        if not self.kind.is_parameterized() and self.parameter is not None:
            raise ValueError(f"{self.kind} channels take no parameter")
        return self

    @property
    def is_fanout(self) -> bool:
        """True for master and replication fanout channels."""
        return self.kind.is_fanout()

    @property
    def is_deduped(self) -> bool:
        """True only for canary subscriptions."""
        return self.kind.is_deduped()


__all__ = ["ModelSystemChannel"]
