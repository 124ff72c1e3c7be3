# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
modelinfo: Model Artifact Inspector

Reports the input/output contract of ONNX models and TensorRT engines
(tensor names, element types, shapes, layouts and optimization profiles)
without running them.

Example:
    import modelinfo

    report = modelinfo.inspect_artifact("resnet50.onnx")
    print(report.input_count, report.output_count)
"""

__version__ = "0.1.0"

from .core import (
    ArtifactKind,
    ArtifactReport,
    Direction,
    Dynamic,
    ElementType,
    LayoutFormat,
    ShapeProfile,
    TensorDescriptor,
)

from .adapters import ONNXAdapter, TensorRTAdapter, detect_kind, get_adapter

from .config import InspectorConfig

from .api import inspect_artifact

from .observability import set_verbosity, Verbosity

from .errors import (
    ModelInfoError,
    UsageError,
    ArtifactLoadError,
    ArtifactReadError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    "ArtifactKind",
    "ArtifactReport",
    "Direction",
    "Dynamic",
    "ElementType",
    "LayoutFormat",
    "ShapeProfile",
    "TensorDescriptor",
    "ONNXAdapter",
    "TensorRTAdapter",
    "detect_kind",
    "get_adapter",
    "InspectorConfig",
    "inspect_artifact",
    "set_verbosity",
    "Verbosity",
    "ModelInfoError",
    "UsageError",
    "ArtifactLoadError",
    "ArtifactReadError",
    "ConfigurationError",
]
