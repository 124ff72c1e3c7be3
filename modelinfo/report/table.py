# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Fixed-width Table Renderer

Turns an ArtifactReport into the plain-text report. The renderer is the only
place that knows that profile 0 shares the tensor's main row and that
further profiles and the shape-tensor note get rows of their own.
"""

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from ..core.report import ArtifactKind, ArtifactReport
from ..core.tensor import TensorDescriptor
from .formatting import (
    ENGINE_CONVENTION,
    GRAPH_CONVENTION,
    DisplayConvention,
    format_element_type,
    format_layout,
    format_shape,
    truncate,
)

BANNER_WIDTH = 120
PROFILE_LABEL = "Profile {index}"
NOTE_LABEL = "Note"
SHAPE_TENSOR_NOTE = "Shape tensor"


@dataclass(frozen=True)
class Column:
    """A fixed-width report column."""

    title: str
    width: int
    truncates: bool = True

    def cell(self, text: str) -> str:
        if self.truncates:
            text = truncate(text, self.width)
        return text.ljust(self.width)


@dataclass(frozen=True)
class TableLayout:
    """Column set and display convention of one report kind."""

    columns: tuple[Column, ...]
    convention: DisplayConvention
    has_profiles: bool


_LEADING_COLUMNS = (
    Column("Index", 8),
    Column("Type", 12),
    Column("Name", 20),
    Column("Data Type", 12),
)

GRAPH_LAYOUT = TableLayout(
    columns=_LEADING_COLUMNS + (Column("Shape", 20),),
    convention=GRAPH_CONVENTION,
    has_profiles=False,
)

ENGINE_LAYOUT = TableLayout(
    columns=_LEADING_COLUMNS
    + (
        Column("Min Shape", 20),
        Column("Opt Shape", 20),
        Column("Max Shape", 20),
        # layout tags are printed in full
        Column("Format", 8, truncates=False),
    ),
    convention=ENGINE_CONVENTION,
    has_profiles=True,
)

LAYOUTS = {
    ArtifactKind.GRAPH: GRAPH_LAYOUT,
    ArtifactKind.ENGINE: ENGINE_LAYOUT,
}


def _format_row(layout: TableLayout, cells: list[str]) -> str:
    padded = [column.cell(text) for column, text in zip(layout.columns, cells)]
    return "".join(padded).rstrip()


def _tensor_rows(
    layout: TableLayout, position: int, tensor: TensorDescriptor
) -> Iterator[list[str]]:
    """Yield the cells of every reporting unit belonging to one tensor."""
    conv = layout.convention
    index = str(position)
    leading = [
        index,
        tensor.direction.value,
        tensor.name,
        format_element_type(tensor.element_type, conv),
    ]

    if not layout.has_profiles:
        yield leading + [format_shape(tensor.shape, conv)]
    else:
        primary = tensor.primary_profile
        if primary is not None:
            triple = primary.shapes()
        else:
            triple = (tensor.shape, tensor.shape, tensor.shape)
        yield (
            leading
            + [format_shape(s, conv) for s in triple]
            + [format_layout(tensor.layout_format)]
        )

        for profile in tensor.profiles[1:]:
            yield (
                [index, PROFILE_LABEL.format(index=profile.profile_index), "", ""]
                + [format_shape(s, conv) for s in profile.shapes()]
                + [""]
            )

    if tensor.is_shape_tensor:
        blanks = [""] * (len(layout.columns) - 3)
        yield [index, NOTE_LABEL, SHAPE_TENSOR_NOTE] + blanks


def render_rows(report: ArtifactReport) -> list[str]:
    """
    Render the table body, one line per reporting unit.

    The displayed index is the tensor's position in the report. Graph reports
    list inputs first, so outputs show input_count + index.
    """
    layout = LAYOUTS[report.kind]
    lines = []
    for position, tensor in enumerate(report.tensors):
        for cells in _tensor_rows(layout, position, tensor):
            lines.append(_format_row(layout, cells))
    return lines


def render_lines(report: ArtifactReport) -> list[str]:
    """Render the complete report as a list of lines."""
    layout = LAYOUTS[report.kind]

    lines = ["", f"=== {report.title} ==="]
    for label, value in report.summary:
        lines.append(f"{label}: {value}")
    lines.append("")

    lines.append("=" * BANNER_WIDTH)
    lines.append(_format_row(layout, [c.title for c in layout.columns]))
    lines.append("-" * BANNER_WIDTH)
    lines.extend(render_rows(report))
    lines.append("=" * BANNER_WIDTH)
    return lines


def render(report: ArtifactReport, stream: Optional[TextIO] = None) -> None:
    """Write the report to stream (stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write("\n".join(render_lines(report)) + "\n")
    out.flush()
