# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Inspector Configuration

Loader settings and logging options. Defaults can be overridden through
MODELINFO_* environment variables and then by command line flags.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .errors import ConfigurationError
from .observability import Verbosity

GRAPH_OPTIMIZATION_LEVELS = ("disable", "basic", "extended", "all")
TRT_LOG_SEVERITIES = ("internal_error", "error", "warning", "info", "verbose")

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class InspectorConfig:
    """
    Configuration for one inspection run.

    Attributes:
        verbosity: Diagnostic verbosity level (0-4)
        graph_optimization_level: onnxruntime graph optimization level used
            when opening the session ("disable", "basic", "extended", "all")
        providers: onnxruntime execution providers, in priority order
        trt_log_severity: Minimum TensorRT runtime message severity forwarded
            to the logger
        json_logs: Emit diagnostics as JSON lines instead of text
    """

    verbosity: int = Verbosity.WARNING
    graph_optimization_level: str = "all"
    providers: tuple[str, ...] = field(default=("CPUExecutionProvider",))
    trt_log_severity: str = "warning"
    json_logs: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "InspectorConfig":
        """Build a configuration from MODELINFO_* environment variables."""
        env = os.environ if environ is None else environ
        config = cls()

        verbosity = env.get("MODELINFO_VERBOSITY")
        if verbosity is not None:
            try:
                config.verbosity = int(verbosity)
            except ValueError as err:
                raise ConfigurationError(
                    "verbosity must be an integer between 0 and 4",
                    config_key="MODELINFO_VERBOSITY",
                    config_value=verbosity,
                ) from err

        opt_level = env.get("MODELINFO_ORT_OPT_LEVEL")
        if opt_level:
            config.graph_optimization_level = opt_level.strip().lower()

        providers = env.get("MODELINFO_ORT_PROVIDERS")
        if providers:
            config.providers = tuple(
                p.strip() for p in providers.split(",") if p.strip()
            )

        severity = env.get("MODELINFO_TRT_LOG_SEVERITY")
        if severity:
            config.trt_log_severity = severity.strip().lower()

        json_logs = env.get("MODELINFO_JSON_LOGS")
        if json_logs is not None:
            config.json_logs = json_logs.strip().lower() in _TRUE_VALUES

        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigurationError for out-of-range values."""
        if not 0 <= int(self.verbosity) <= 4:
            raise ConfigurationError(
                "verbosity must be between 0 and 4",
                config_key="verbosity",
                config_value=str(self.verbosity),
            )
        if self.graph_optimization_level not in GRAPH_OPTIMIZATION_LEVELS:
            raise ConfigurationError(
                f"graph optimization level must be one of "
                f"{', '.join(GRAPH_OPTIMIZATION_LEVELS)}",
                config_key="graph_optimization_level",
                config_value=self.graph_optimization_level,
            )
        if not self.providers:
            raise ConfigurationError(
                "at least one execution provider is required",
                config_key="providers",
            )
        if self.trt_log_severity not in TRT_LOG_SEVERITIES:
            raise ConfigurationError(
                f"TensorRT log severity must be one of {', '.join(TRT_LOG_SEVERITIES)}",
                config_key="trt_log_severity",
                config_value=self.trt_log_severity,
            )

    def get_verbosity(self) -> Verbosity:
        """Get verbosity enum."""
        return Verbosity(int(self.verbosity))
