# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Artifact Report

Everything the renderer needs about one inspected artifact, collected before
any output is written.
"""

from dataclasses import dataclass, field
from enum import Enum

from .tensor import TensorDescriptor
from .types import Direction


class ArtifactKind(Enum):
    """Supported artifact formats."""

    GRAPH = "graph"  # ONNX exchange graph
    ENGINE = "engine"  # compiled TensorRT engine


@dataclass(frozen=True)
class ArtifactReport:
    """
    Complete, immutable inspection result.

    Attributes:
        kind: Artifact format, selects report columns and display convention
        title: Banner title
        path: Artifact path as given by the user
        summary: Ordered (label, value) header lines
        tensors: Descriptors in artifact order
    """

    kind: ArtifactKind
    title: str
    path: str
    summary: tuple[tuple[str, str], ...] = ()
    tensors: tuple[TensorDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "summary", tuple(self.summary))
        object.__setattr__(self, "tensors", tuple(self.tensors))

    @property
    def inputs(self) -> list[TensorDescriptor]:
        return [t for t in self.tensors if t.direction is Direction.INPUT]

    @property
    def outputs(self) -> list[TensorDescriptor]:
        return [t for t in self.tensors if t.direction is Direction.OUTPUT]

    @property
    def input_count(self) -> int:
        return len(self.inputs)

    @property
    def output_count(self) -> int:
        return len(self.outputs)
