"""Tests for RenderConfig, FailurePolicy and the exception hierarchy."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from conditional import (
    ConditionalError,
    ConfigurationError,
    EitherArityError,
    FailurePolicy,
    RenderConfig,
    ResolutionError,
)


class TestRenderConfig:
    def test_defaults(self):
        config = RenderConfig()
        assert config.on_failure is FailurePolicy.EMPTY
        assert config.log_stale is True

    def test_policy_from_string(self):
        assert RenderConfig(on_failure="raise").on_failure is FailurePolicy.RAISE

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValidationError):
            RenderConfig(on_failure="retry")

    def test_frozen(self):
        config = RenderConfig()
        with pytest.raises(ValidationError):
            config.log_stale = False

    def test_policy_is_str_enum(self):
        assert FailurePolicy.EMPTY == "empty"
        assert [p.value for p in FailurePolicy] == ["empty", "raise"]


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(ConfigurationError, ConditionalError)
        assert issubclass(EitherArityError, ConfigurationError)
        assert issubclass(ResolutionError, ConditionalError)

    def test_either_arity_message(self):
        assert str(EitherArityError(3)) == "Either requires exactly 2 branches, got 3 branch(es)"
        assert "no branches" in str(EitherArityError(None))

    def test_resolution_error_carries_cause(self):
        cause = ValueError("boom")
        err = ResolutionError("input", cause)
        assert err.cause is cause
        assert err.value == "input"
        assert "ValueError: boom" in str(err)
