# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""modelinfo Core Module"""

from .types import (
    Dim,
    Direction,
    Dynamic,
    ElementType,
    LayoutFormat,
    element_type_to_string,
    is_dynamic,
    to_dim,
    to_dims,
)
from .tensor import ShapeProfile, TensorDescriptor
from .report import ArtifactKind, ArtifactReport

__all__ = [
    "Dim",
    "Direction",
    "Dynamic",
    "ElementType",
    "LayoutFormat",
    "element_type_to_string",
    "is_dynamic",
    "to_dim",
    "to_dims",
    "ShapeProfile",
    "TensorDescriptor",
    "ArtifactKind",
    "ArtifactReport",
]
