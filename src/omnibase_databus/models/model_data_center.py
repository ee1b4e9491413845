# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Datacenter model used when deriving replication fanout channels."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelDataCenter(BaseModel):
    """Datacenter identity as seen by the channel namespace.

    Satisfies ``ProtocolDataCenter``.

    Attributes:
        name: Stable, unique datacenter name (e.g., ``"us-east-1"``).

    Example:
        >>> ModelDataCenter(name="us-east-1").name
        'us-east-1'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        from_attributes=True,
    )

    name: str = Field(
        ...,
        description="Stable, unique datacenter name.",
        min_length=1,
    )


__all__ = ["ModelDataCenter"]
