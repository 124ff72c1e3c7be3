# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
modelinfo Adapters

One adapter per supported artifact format. The adapter is chosen from the
artifact kind requested on the command line, or from the file extension.
"""

import os
from typing import Optional

from .base import BaseAdapter
from .onnx_adapter import ONNXAdapter
from .tensorrt_adapter import EngineHandle, TensorRTAdapter
from ..config import InspectorConfig
from ..core import ArtifactKind
from ..errors import UsageError

_ADAPTERS = {
    ArtifactKind.GRAPH: ONNXAdapter,
    ArtifactKind.ENGINE: TensorRTAdapter,
}

_EXTENSIONS = {
    ".onnx": ArtifactKind.GRAPH,
    ".engine": ArtifactKind.ENGINE,
    ".plan": ArtifactKind.ENGINE,
    ".trt": ArtifactKind.ENGINE,
}


def detect_kind(path: str) -> ArtifactKind:
    """Infer the artifact kind from the file extension."""
    ext = os.path.splitext(path)[1].lower()
    try:
        return _EXTENSIONS[ext]
    except KeyError:
        known = ", ".join(sorted(_EXTENSIONS))
        raise UsageError(
            f"cannot tell the artifact kind of '{path}' "
            f"(known extensions: {known}); pass --kind"
        ) from None


def get_adapter(
    kind: ArtifactKind, config: Optional[InspectorConfig] = None
) -> BaseAdapter:
    """Create the adapter for an artifact kind."""
    return _ADAPTERS[kind](config)


__all__ = [
    "BaseAdapter",
    "ONNXAdapter",
    "TensorRTAdapter",
    "EngineHandle",
    "detect_kind",
    "get_adapter",
]
