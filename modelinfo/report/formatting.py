# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Shape and Type Formatting

Pure functions turning canonical values into display strings. Each backend
renders with its own DisplayConvention; a report never mixes two.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.types import Dim, Dynamic, ElementType, LayoutFormat

ELLIPSIS = "..."
UNKNOWN_LABEL = "unknown"


@dataclass(frozen=True)
class DisplayConvention:
    """
    How one backend spells dynamic dimensions and element types.

    Attributes:
        dynamic_token: Placeholder printed for a Dynamic dimension
        uppercase_types: Print element types as FLOAT32 instead of float32
    """

    dynamic_token: str
    uppercase_types: bool = False


GRAPH_CONVENTION = DisplayConvention(dynamic_token="None", uppercase_types=False)
ENGINE_CONVENTION = DisplayConvention(dynamic_token="dynamic", uppercase_types=True)

_ELEMENT_TYPE_LABELS = {
    ElementType.Float32: "float32",
    ElementType.Float16: "float16",
    ElementType.BFloat16: "bfloat16",
    ElementType.Float64: "float64",
    ElementType.Int4: "int4",
    ElementType.Int8: "int8",
    ElementType.Int16: "int16",
    ElementType.Int32: "int32",
    ElementType.Int64: "int64",
    ElementType.UInt8: "uint8",
    ElementType.UInt16: "uint16",
    ElementType.UInt32: "uint32",
    ElementType.UInt64: "uint64",
    ElementType.Bool: "bool",
    ElementType.String: "string",
    ElementType.FP8: "fp8",
}


def format_dimension(dim: Dim, convention: DisplayConvention = GRAPH_CONVENTION) -> str:
    """Format one dimension: decimal for concrete sizes, the token for Dynamic."""
    if dim is Dynamic:
        return convention.dynamic_token
    return str(int(dim))


def format_shape(
    dims: Iterable[Dim], convention: DisplayConvention = GRAPH_CONVENTION
) -> str:
    """
    Format a shape as "[d0, d1, ...]".

    Dimension order is kept exactly as stored. A scalar renders as "[]".
    """
    return "[" + ", ".join(format_dimension(d, convention) for d in dims) + "]"


def format_element_type(
    element_type, convention: DisplayConvention = GRAPH_CONVENTION
) -> str:
    """
    Get the display label of an element type.

    Anything without a label, including ElementType.Unknown and values that
    are not ElementType at all, renders as "unknown".
    """
    label = _ELEMENT_TYPE_LABELS.get(element_type) if isinstance(
        element_type, ElementType
    ) else None
    if label is None:
        return UNKNOWN_LABEL
    return label.upper() if convention.uppercase_types else label


def format_layout(layout: Optional[LayoutFormat]) -> str:
    """Get the display tag of a layout format; absent layouts are blank."""
    if layout is None:
        return ""
    if layout is LayoutFormat.UNKNOWN:
        return UNKNOWN_LABEL
    return layout.name


def truncate(text: str, width: int) -> str:
    """
    Fit text into a column of the given width.

    One character of every column is kept free as a separator, so the text
    budget is width - 1. Longer text is cut and ends in "...", filling the
    budget exactly.
    """
    budget = width - 1
    if len(text) <= budget:
        return text
    keep = max(0, budget - len(ELLIPSIS))
    return text[:keep] + ELLIPSIS
