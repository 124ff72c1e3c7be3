# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Property-based tests using Hypothesis.

These tests require:
    - hypothesis library: pip install hypothesis
"""

from hypothesis import given, strategies as st

from modelinfo.core import (
    ArtifactKind,
    ArtifactReport,
    Direction,
    Dynamic,
    ElementType,
    LayoutFormat,
    ShapeProfile,
    TensorDescriptor,
)
from modelinfo.report import (
    ENGINE_CONVENTION,
    GRAPH_CONVENTION,
    format_dimension,
    format_element_type,
    format_shape,
    render_rows,
    truncate,
)

dims = st.one_of(st.integers(min_value=0, max_value=2**31), st.just(Dynamic))
shapes = st.lists(dims, max_size=8).map(tuple)
conventions = st.sampled_from([GRAPH_CONVENTION, ENGINE_CONVENTION])


@given(shapes, conventions)
def test_shape_separator_count(shape, convention):
    text = format_shape(shape, convention)
    if not shape:
        assert text == "[]"
    else:
        assert text != "[]"
        assert text.count(", ") == len(shape) - 1


@given(st.integers(min_value=0, max_value=2**63), conventions)
def test_concrete_dimension_round_trips(value, convention):
    assert int(format_dimension(value, convention)) == value


@given(conventions)
def test_dynamic_dimension_is_token(convention):
    text = format_dimension(Dynamic, convention)
    assert text == convention.dynamic_token
    assert not text.isdigit()


@given(st.one_of(st.integers(), st.text(), st.none()))
def test_unmapped_element_type_is_unknown(value):
    assert format_element_type(value) == "unknown"


@given(st.text(max_size=60), st.integers(min_value=4, max_value=40))
def test_truncate_fits_column(text, width):
    result = truncate(text, width)
    if len(text) <= width - 1:
        assert result == text
    else:
        assert result.endswith("...")
        assert len(result) == width - 1
        assert text.startswith(result[:-3])


@given(st.integers(min_value=0, max_value=6), st.integers(min_value=0, max_value=6))
def test_graph_indices_strictly_increasing(n_inputs, n_outputs):
    tensors = [
        TensorDescriptor(i, Direction.INPUT, f"in{i}", ElementType.Float32, (1,))
        for i in range(n_inputs)
    ] + [
        TensorDescriptor(i, Direction.OUTPUT, f"out{i}", ElementType.Float32, (1,))
        for i in range(n_outputs)
    ]
    report = ArtifactReport(ArtifactKind.GRAPH, "T", "m.onnx", tensors=tensors)
    indices = [int(row.split()[0]) for row in render_rows(report)]
    assert indices == list(range(n_inputs + n_outputs))
    assert indices[n_inputs:] == [n_inputs + i for i in range(n_outputs)]


@given(st.integers(min_value=1, max_value=5), st.booleans())
def test_engine_row_count(num_profiles, shape_tensor):
    profiles = [ShapeProfile(k, (1,), (2,), (3,)) for k in range(num_profiles)]
    tensor = TensorDescriptor(
        0,
        Direction.INPUT,
        "x",
        ElementType.Float32,
        (Dynamic,),
        layout_format=LayoutFormat.LINEAR,
        profiles=profiles,
        is_shape_tensor=shape_tensor,
    )
    report = ArtifactReport(ArtifactKind.ENGINE, "T", "m.engine", tensors=[tensor])
    assert len(render_rows(report)) == 1 + (num_profiles - 1) + int(shape_tensor)
