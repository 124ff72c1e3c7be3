# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""modelinfo Report Module"""

from .formatting import (
    DisplayConvention,
    ENGINE_CONVENTION,
    GRAPH_CONVENTION,
    format_dimension,
    format_element_type,
    format_layout,
    format_shape,
    truncate,
)
from .table import (
    BANNER_WIDTH,
    Column,
    ENGINE_LAYOUT,
    GRAPH_LAYOUT,
    TableLayout,
    render,
    render_lines,
    render_rows,
)

__all__ = [
    "DisplayConvention",
    "ENGINE_CONVENTION",
    "GRAPH_CONVENTION",
    "format_dimension",
    "format_element_type",
    "format_layout",
    "format_shape",
    "truncate",
    "BANNER_WIDTH",
    "Column",
    "ENGINE_LAYOUT",
    "GRAPH_LAYOUT",
    "TableLayout",
    "render",
    "render_lines",
    "render_rows",
]
