# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tests for modelinfo Error Handling

Validates:
- Error hierarchy
- Error message formatting
- Suggestions in error messages
- Context information
"""

import pytest

from modelinfo.errors import (
    ModelInfoError,
    UsageError,
    ArtifactLoadError,
    ArtifactReadError,
    ConfigurationError,
)


class TestModelInfoError:
    """Tests for ModelInfoError base class."""

    def test_basic_error(self):
        error = ModelInfoError("Test error")
        assert str(error) == "Test error"

    def test_error_with_suggestions(self):
        error = ModelInfoError("Test error", suggestions=["Fix A", "Fix B"])
        msg = str(error)
        assert "Suggestions:" in msg
        assert "1. Fix A" in msg
        assert "2. Fix B" in msg

    def test_error_with_context(self):
        error = ModelInfoError("Test error", context={"key1": "value1"})
        msg = str(error)
        assert "Context:" in msg
        assert "key1: value1" in msg

    def test_message_stays_single_line(self):
        error = ModelInfoError("Test error", suggestions=["Fix A"], context={"k": "v"})
        assert error.message == "Test error"
        assert "\n" not in error.message


class TestHierarchy:
    """All fatal errors share one base class."""

    @pytest.mark.parametrize(
        "error",
        [
            UsageError("bad"),
            ArtifactLoadError("bad"),
            ArtifactReadError("bad"),
            ConfigurationError("bad"),
        ],
    )
    def test_subclass(self, error):
        assert isinstance(error, ModelInfoError)
        with pytest.raises(ModelInfoError):
            raise error


class TestArtifactLoadError:
    """Tests for ArtifactLoadError."""

    def test_message_prefix(self):
        error = ArtifactLoadError("corrupt")
        assert error.message == "Failed to load artifact: corrupt"

    def test_message_names_path(self):
        error = ArtifactLoadError("file does not exist", path="/tmp/m.onnx")
        assert error.message == (
            "Failed to load artifact '/tmp/m.onnx': file does not exist"
        )
        assert error.path == "/tmp/m.onnx"
        assert "path: /tmp/m.onnx" in str(error)

    def test_default_suggestions(self):
        error = ArtifactLoadError("corrupt")
        assert len(error.suggestions) == 2

    def test_custom_suggestions(self):
        error = ArtifactLoadError("corrupt", suggestions=["Rebuild the engine"])
        assert error.suggestions == ["Rebuild the engine"]


class TestArtifactReadError:
    """Tests for ArtifactReadError."""

    def test_context(self):
        error = ArtifactReadError("dtype query failed", tensor_name="x", query="dtype")
        assert error.message == "Failed to read tensor metadata: dtype query failed"
        assert error.tensor_name == "x"
        assert error.query == "dtype"
        assert error.context == {"tensor": "x", "query": "dtype"}


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_configuration_error(self):
        error = ConfigurationError(
            "Invalid level", config_key="graph_optimization_level", config_value="max"
        )
        msg = str(error)
        assert "Configuration error:" in msg
        assert "graph_optimization_level" in msg
        assert "max" in msg
