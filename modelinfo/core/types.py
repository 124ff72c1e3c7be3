# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
modelinfo Core Types

Canonical enums and the dimension representation shared by every backend.
Native type codes, layout tags and shape values from either artifact format
are converted into these before anything is rendered.
"""

from enum import Enum, auto
from typing import Any, Iterable, Union


class ElementType(Enum):
    """Canonical tensor element types."""

    Float32 = auto()
    Float16 = auto()
    BFloat16 = auto()
    Float64 = auto()
    Int4 = auto()
    Int8 = auto()
    Int16 = auto()
    Int32 = auto()
    Int64 = auto()
    UInt8 = auto()
    UInt16 = auto()
    UInt32 = auto()
    UInt64 = auto()
    Bool = auto()
    String = auto()
    FP8 = auto()
    Unknown = auto()


def element_type_to_string(element_type: ElementType) -> str:
    """Get the lower-case label of an element type."""
    return element_type.name.lower()


class Direction(Enum):
    """Whether a tensor is consumed or produced by the model."""

    INPUT = "INPUT"
    OUTPUT = "OUTPUT"


class LayoutFormat(Enum):
    """Physical memory layouts reported by compiled engines."""

    LINEAR = auto()
    CHW2 = auto()
    CHW4 = auto()
    CHW16 = auto()
    CHW32 = auto()
    DHWC8 = auto()
    CDHW32 = auto()
    HWC = auto()
    DLA_LINEAR = auto()
    DLA_HWC4 = auto()
    HWC16 = auto()
    DHWC = auto()
    UNKNOWN = auto()


class _DynamicType:
    """Sentinel type for a dimension whose size is resolved at execution time."""

    _instance = None

    def __new__(cls) -> "_DynamicType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Dynamic"

    def __reduce__(self):
        return (_DynamicType, ())


Dynamic = _DynamicType()

# A dimension is either a concrete non-negative size or Dynamic
Dim = Union[int, _DynamicType]


def to_dim(value: Any) -> Dim:
    """
    Convert a native dimension value to a canonical Dim.

    -1 (or any other negative sentinel), None and symbolic dimension names
    are unbound and map to Dynamic. Every other integer, including 0, is
    kept as is.
    """
    if value is None or value is Dynamic or isinstance(value, str):
        return Dynamic
    value = int(value)
    if value < 0:
        return Dynamic
    return value


def to_dims(values: Iterable[Any]) -> tuple[Dim, ...]:
    """Convert a native shape to a tuple of Dims, preserving order."""
    return tuple(to_dim(v) for v in values)


def is_dynamic(dims: Iterable[Dim]) -> bool:
    """Check if any dimension is Dynamic."""
    return any(d is Dynamic for d in dims)
