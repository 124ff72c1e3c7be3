# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
modelinfo API

Single entry point tying the pipeline together:
artifact -> adapter handle -> TensorDescriptors -> rendered table.
"""

from typing import Optional, TextIO, Union

from .adapters import detect_kind, get_adapter
from .config import InspectorConfig
from .core import ArtifactKind, ArtifactReport
from .errors import UsageError
from .observability import get_logger
from .report import render


def inspect_artifact(
    path: str,
    kind: Optional[Union[ArtifactKind, str]] = None,
    config: Optional[InspectorConfig] = None,
    stream: Optional[TextIO] = None,
) -> ArtifactReport:
    """
    Inspect one artifact and write its report.

    Args:
        path: Artifact file path.
        kind: ArtifactKind or its value ("graph", "engine"). Detected from the
            file extension when omitted.
        config: Loader and logging configuration.
        stream: Report destination, stdout by default.

    Returns:
        The ArtifactReport that was rendered.

    Raises:
        ArtifactLoadError: If the artifact cannot be opened.
        ArtifactReadError: If a tensor metadata query fails.
        UsageError: If the kind is unknown or cannot be determined.
    """
    config = config or InspectorConfig()
    if kind is None:
        kind = detect_kind(path)
    elif not isinstance(kind, ArtifactKind):
        try:
            kind = ArtifactKind(kind)
        except ValueError:
            known = ", ".join(k.value for k in ArtifactKind)
            raise UsageError(
                f"unknown artifact kind '{kind}' (expected one of: {known})"
            ) from None

    adapter = get_adapter(kind, config)
    get_logger().info(
        f"Inspecting {kind.value} artifact", component="api", artifact=path
    )
    report = adapter.inspect(path)
    render(report, stream)
    return report
