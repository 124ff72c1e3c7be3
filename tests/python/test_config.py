# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tests for InspectorConfig
"""

import pytest

from modelinfo.config import InspectorConfig
from modelinfo.errors import ConfigurationError
from modelinfo.observability import Verbosity


class TestDefaults:
    def test_defaults(self):
        config = InspectorConfig()
        assert config.get_verbosity() == Verbosity.WARNING
        assert config.graph_optimization_level == "all"
        assert config.providers == ("CPUExecutionProvider",)
        assert config.trt_log_severity == "warning"
        assert config.json_logs is False
        config.validate()


class TestFromEnv:
    def test_empty_environment(self):
        assert InspectorConfig.from_env({}) == InspectorConfig()

    def test_overrides(self):
        config = InspectorConfig.from_env(
            {
                "MODELINFO_VERBOSITY": "4",
                "MODELINFO_ORT_OPT_LEVEL": " Basic ",
                "MODELINFO_ORT_PROVIDERS": "CUDAExecutionProvider, CPUExecutionProvider",
                "MODELINFO_TRT_LOG_SEVERITY": "VERBOSE",
                "MODELINFO_JSON_LOGS": "yes",
            }
        )
        assert config.get_verbosity() == Verbosity.DEBUG
        assert config.graph_optimization_level == "basic"
        assert config.providers == ("CUDAExecutionProvider", "CPUExecutionProvider")
        assert config.trt_log_severity == "verbose"
        assert config.json_logs is True

    def test_non_integer_verbosity(self):
        with pytest.raises(ConfigurationError) as exc_info:
            InspectorConfig.from_env({"MODELINFO_VERBOSITY": "loud"})
        assert exc_info.value.context["config_key"] == "MODELINFO_VERBOSITY"

    def test_invalid_opt_level(self):
        with pytest.raises(ConfigurationError):
            InspectorConfig.from_env({"MODELINFO_ORT_OPT_LEVEL": "turbo"})

    def test_invalid_severity(self):
        with pytest.raises(ConfigurationError):
            InspectorConfig.from_env({"MODELINFO_TRT_LOG_SEVERITY": "chatty"})


class TestValidate:
    def test_verbosity_out_of_range(self):
        with pytest.raises(ConfigurationError):
            InspectorConfig(verbosity=7).validate()

    def test_empty_providers(self):
        with pytest.raises(ConfigurationError):
            InspectorConfig(providers=()).validate()
