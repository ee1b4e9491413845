# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Databus Error Classes.

Error Hierarchy:
    DatabusError (base databus error)
    └── ProtocolConfigurationError
        └── ChannelNamespaceConfigurationError

Channel classification and name derivation never raise. These errors are
only raised while building configuration, before any registry is in use.

All errors:
    - Support proper error chaining with ``raise ... from e``
    - Carry a ``ModelDatabusErrorContext`` with a correlation ID
    - Keep any extra keyword context in ``context_data``
"""

from __future__ import annotations

from uuid import UUID

from omnibase_databus.errors.model_databus_error_context import (
    ModelDatabusErrorContext,
)


class DatabusError(Exception):
    """Base error class for databus errors.

    Example:
        >>> context = ModelDatabusErrorContext(operation="load_config")
        >>> raise DatabusError("Operation failed", context=context, parameter="master_replay")
    """

    def __init__(
        self,
        message: str,
        context: ModelDatabusErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize DatabusError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled error context (operation, target_name, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.context_data: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.operation is not None:
                self.context_data["operation"] = context.operation
            if context.target_name is not None:
                self.context_data["target_name"] = context.target_name

    @property
    def correlation_id(self) -> UUID | None:
        """Correlation ID from the attached context, if any."""
        if self.context is None:
            return None
        return self.context.correlation_id


class ProtocolConfigurationError(DatabusError):
    """Raised when configuration validation fails.

    Used for configuration parsing errors, missing required fields,
    or invalid configuration values.
    """


class ChannelNamespaceConfigurationError(ProtocolConfigurationError):
    """Raised when a channel namespace grammar is rejected.

    A grammar is rejected when it would break cross-datacenter agreement,
    for example a system channel name that does not start with the system
    prefix, or a dedup read prefix outside the dedup-internal namespace.

    Example:
        >>> raise ChannelNamespaceConfigurationError(
        ...     "master_replay must start with the system prefix",
        ...     context=ModelDatabusErrorContext.with_correlation(
        ...         operation="validate_config",
        ...     ),
        ...     parameter="master_replay",
        ... )
    """


__all__ = [
    "ChannelNamespaceConfigurationError",
    "DatabusError",
    "ProtocolConfigurationError",
]
