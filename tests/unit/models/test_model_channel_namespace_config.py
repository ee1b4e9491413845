# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ModelChannelNamespaceConfig.

Tests cover:
    - Wire grammar defaults
    - Grammar validation
    - Mapping loading
"""

from __future__ import annotations

import logging

import pytest

from omnibase_databus.errors import (
    ChannelNamespaceConfigurationError,
    ProtocolConfigurationError,
)
from omnibase_databus.models import ModelChannelNamespaceConfig

pytestmark = [pytest.mark.unit]


class TestDefaults:
    """Tests for the default grammar."""

    def test_wire_grammar(self) -> None:
        """Defaults equal the wire grammar bit-exactly."""
        config = ModelChannelNamespaceConfig()
        assert config.model_dump() == {
            "system_prefix": "__system_bus:",
            "master_fanout": "__system_bus:master",
            "replication_fanout_prefix": "__system_bus:out:",
            "master_replay": "__system_bus:replay",
            "master_canary_prefix": "__system_bus:canary",
            "dedup_internal_prefix": "__dedupq_",
            "dedup_read_prefix": "__dedupq_read:",
        }

    def test_with_system_prefix(self) -> None:
        """All system names are recomposed under a new prefix."""
        config = ModelChannelNamespaceConfig.with_system_prefix("__qa_bus:")
        assert config.master_fanout == "__qa_bus:master"
        assert config.replication_fanout_prefix == "__qa_bus:out:"
        assert config.master_replay == "__qa_bus:replay"
        assert config.master_canary_prefix == "__qa_bus:canary"
        assert config.dedup_read_prefix == "__dedupq_read:"

    def test_with_system_prefix_and_dedup_prefix(self) -> None:
        """The dedup read prefix can be set alongside the system prefix."""
        config = ModelChannelNamespaceConfig.with_system_prefix(
            "__qa_bus:", dedup_read_prefix="__dedupq_qa:"
        )
        assert config.dedup_read_prefix == "__dedupq_qa:"


class TestGrammarValidation:
    """Tests for rejected grammars."""

    def test_kind_outside_system_prefix(self) -> None:
        """Kind names must extend the system prefix."""
        with pytest.raises(ChannelNamespaceConfigurationError, match="master_replay"):
            ModelChannelNamespaceConfig(master_replay="replay")

    def test_kind_equal_to_system_prefix(self) -> None:
        """A kind name cannot be the bare system prefix."""
        with pytest.raises(ChannelNamespaceConfigurationError, match="master_fanout"):
            ModelChannelNamespaceConfig(master_fanout="__system_bus:")

    def test_master_equals_replay(self) -> None:
        """Master fanout and replay must differ."""
        with pytest.raises(ChannelNamespaceConfigurationError, match="must differ"):
            ModelChannelNamespaceConfig(master_replay="__system_bus:master")

    def test_master_under_replication_prefix(self) -> None:
        """Master fanout must not fall under the replication prefix."""
        with pytest.raises(ChannelNamespaceConfigurationError, match="misclassified"):
            ModelChannelNamespaceConfig(master_fanout="__system_bus:out:master")

    def test_replay_under_canary_prefix(self) -> None:
        """Replay must not fall under the canary prefix."""
        with pytest.raises(ChannelNamespaceConfigurationError, match="misclassified"):
            ModelChannelNamespaceConfig(master_replay="__system_bus:canary-replay")

    def test_dedup_prefix_under_system_prefix(self) -> None:
        """Dedup-internal names must stay outside the system namespace."""
        with pytest.raises(
            ChannelNamespaceConfigurationError, match="dedup_internal_prefix"
        ):
            ModelChannelNamespaceConfig(
                dedup_internal_prefix="__system_bus:dedupq_",
                dedup_read_prefix="__system_bus:dedupq_read:",
            )

    def test_dedup_read_prefix_outside_internal_prefix(self) -> None:
        """The dedup read prefix must live under the dedup-internal prefix."""
        with pytest.raises(ChannelNamespaceConfigurationError, match="dedup_read_prefix"):
            ModelChannelNamespaceConfig(dedup_read_prefix="read:")

    def test_error_carries_parameter(self) -> None:
        """Grammar errors name the offending field and carry a correlation ID."""
        with pytest.raises(ChannelNamespaceConfigurationError) as exc_info:
            ModelChannelNamespaceConfig(master_replay="replay")
        assert exc_info.value.context_data["parameter"] == "master_replay"
        assert exc_info.value.correlation_id is not None

    def test_from_mapping_wraps_validation_error(self) -> None:
        """Unknown fields surface as configuration errors."""
        with pytest.raises(ChannelNamespaceConfigurationError, match="Invalid"):
            ModelChannelNamespaceConfig.from_mapping({"unknown": "x"})

    def test_from_mapping_empty_prefix(self) -> None:
        """An empty system prefix is rejected."""
        with pytest.raises(ProtocolConfigurationError):
            ModelChannelNamespaceConfig.from_mapping({"system_prefix": ""})

    def test_system_prefix_under_dedup_internal_prefix(self) -> None:
        """A system prefix inside the dedup-internal namespace is rejected."""
        with pytest.raises(ChannelNamespaceConfigurationError, match="must not overlap"):
            ModelChannelNamespaceConfig.with_system_prefix("__dedupq_sys:")


class TestFromMapping:
    """Tests for mapping loading."""

    def test_system_prefix_only(self) -> None:
        """A mapping naming only the system prefix recomposes the kind names."""
        config = ModelChannelNamespaceConfig.from_mapping({"system_prefix": "__qa_bus:"})
        assert config.master_replay == "__qa_bus:replay"

    def test_explicit_fields(self) -> None:
        """Explicit fields win over recomposed names."""
        config = ModelChannelNamespaceConfig.from_mapping(
            {"system_prefix": "__qa_bus:", "master_replay": "__qa_bus:rewind"}
        )
        assert config.master_replay == "__qa_bus:rewind"
        assert config.master_fanout == "__qa_bus:master"

    def test_empty_mapping(self) -> None:
        """An empty mapping yields the wire grammar."""
        assert ModelChannelNamespaceConfig.from_mapping({}) == (
            ModelChannelNamespaceConfig()
        )

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejected grammars are logged before the error propagates."""
        with caplog.at_level(logging.WARNING):
            with pytest.raises(ChannelNamespaceConfigurationError):
                ModelChannelNamespaceConfig.from_mapping({"master_replay": "replay"})
        assert "Rejected channel namespace grammar" in caplog.text
