# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Databus Error Context Configuration Model.

This module defines the model bundling the structured fields attached to
databus errors, keeping error ``__init__`` signatures short while staying
strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelDatabusErrorContext(BaseModel):
    """Structured context attached to databus errors.

    Attributes:
        operation: Operation being performed (load_config, validate_config)
        target_name: Target resource name, such as a grammar field
        correlation_id: Correlation ID for distributed tracing

    Example:
        >>> context = ModelDatabusErrorContext.with_correlation(
        ...     operation="load_config",
        ...     target_name="master_replay",
        ... )
        >>> raise ChannelNamespaceConfigurationError("bad prefix", context=context)
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable for thread safety
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (load_config, build_registry, etc.)",
    )
    target_name: str | None = Field(
        default=None,
        description="Target resource name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        *,
        correlation_id: UUID | None = None,
        operation: str | None = None,
        target_name: str | None = None,
    ) -> ModelDatabusErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id or uuid4(),
        )


__all__ = ["ModelDatabusErrorContext"]
