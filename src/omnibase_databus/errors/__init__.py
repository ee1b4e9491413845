# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Databus Errors Module.

Channel classification is total and never raises; the errors exported here
are raised only while loading or validating namespace configuration.

Exports:
    ModelDatabusErrorContext: Bundled structured error context
    DatabusError: Base databus error class
    ProtocolConfigurationError: Configuration validation errors
    ChannelNamespaceConfigurationError: Rejected channel namespace grammar

Correlation ID Assignment:
    Propagate a caller's correlation_id into the error context when one
    exists; otherwise use ``ModelDatabusErrorContext.with_correlation()``
    which generates a uuid4.
"""

from omnibase_databus.errors.databus_errors import (
    ChannelNamespaceConfigurationError,
    DatabusError,
    ProtocolConfigurationError,
)
from omnibase_databus.errors.model_databus_error_context import (
    ModelDatabusErrorContext,
)

__all__: list[str] = [
    "ChannelNamespaceConfigurationError",
    "DatabusError",
    "ModelDatabusErrorContext",
    "ProtocolConfigurationError",
]
