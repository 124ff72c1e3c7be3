# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
ONNX Adapter

Reads the input/output contract of an ONNX model through an onnxruntime
inference session. ONNX graphs have no layout or optimization-profile
concept, so descriptors carry a single shape each.
"""

from typing import Any

from .base import BaseAdapter
from ..core import ArtifactKind, Direction, ElementType, TensorDescriptor, to_dims
from ..errors import ArtifactLoadError

# onnxruntime reports element types as "tensor(<name>)"
_ORT_ELEMENT_TYPES = {
    "float": ElementType.Float32,
    "float16": ElementType.Float16,
    "bfloat16": ElementType.BFloat16,
    "double": ElementType.Float64,
    "int4": ElementType.Int4,
    "int8": ElementType.Int8,
    "int16": ElementType.Int16,
    "int32": ElementType.Int32,
    "int64": ElementType.Int64,
    "uint8": ElementType.UInt8,
    "uint16": ElementType.UInt16,
    "uint32": ElementType.UInt32,
    "uint64": ElementType.UInt64,
    "bool": ElementType.Bool,
    "string": ElementType.String,
    "float8e4m3fn": ElementType.FP8,
    "float8e4m3fnuz": ElementType.FP8,
    "float8e5m2": ElementType.FP8,
    "float8e5m2fnuz": ElementType.FP8,
}

_ORT_OPT_LEVELS = {
    "disable": "ORT_DISABLE_ALL",
    "basic": "ORT_ENABLE_BASIC",
    "extended": "ORT_ENABLE_EXTENDED",
    "all": "ORT_ENABLE_ALL",
}


def ort_type_to_element_type(type_str: Any) -> ElementType:
    """
    Convert an onnxruntime type string to an ElementType.

    Sequences, maps and element types without a canonical counterpart map
    to ElementType.Unknown.
    """
    if not isinstance(type_str, str):
        return ElementType.Unknown
    if not (type_str.startswith("tensor(") and type_str.endswith(")")):
        return ElementType.Unknown
    return _ORT_ELEMENT_TYPES.get(type_str[len("tensor("):-1], ElementType.Unknown)


class ONNXAdapter(BaseAdapter):
    """
    Adapter for ONNX models.

    Example:
        adapter = ONNXAdapter()
        report = adapter.inspect("model.onnx")
    """

    kind = ArtifactKind.GRAPH
    title = "ONNX Model Information"

    def __init__(self, config=None):
        super().__init__(config)
        self._ort = None

    @property
    def name(self) -> str:
        return "onnx"

    @property
    def is_available(self) -> bool:
        try:
            import onnxruntime  # noqa: F401

            return True
        except ImportError:
            return False

    def _get_ort(self):
        """Lazy import onnxruntime."""
        if self._ort is None:
            try:
                import onnxruntime

                self._ort = onnxruntime
            except ImportError as err:
                raise ImportError(
                    "onnxruntime is required for ONNXAdapter. "
                    "Install it with: pip install onnxruntime"
                ) from err
        return self._ort

    def _load(self, path: str) -> Any:
        ort = self._get_ort()

        options = ort.SessionOptions()
        level = _ORT_OPT_LEVELS[self.config.graph_optimization_level]
        options.graph_optimization_level = getattr(ort.GraphOptimizationLevel, level)

        try:
            return ort.InferenceSession(
                path,
                sess_options=options,
                providers=list(self.config.providers),
            )
        except Exception as e:
            text = str(e).strip()
            reason = text.splitlines()[0] if text else type(e).__name__
            raise ArtifactLoadError(reason, path=path) from e

    def describe(self, handle: Any) -> list[TensorDescriptor]:
        """Inputs first, then outputs, each in session order."""
        inputs = self._query("inputs", None, handle.get_inputs)
        outputs = self._query("outputs", None, handle.get_outputs)

        descriptors = [
            self._convert_node_arg(i, Direction.INPUT, arg)
            for i, arg in enumerate(inputs)
        ]
        descriptors += [
            self._convert_node_arg(i, Direction.OUTPUT, arg)
            for i, arg in enumerate(outputs)
        ]
        return descriptors

    def summarize(self, handle: Any, path: str) -> list[tuple[str, str]]:
        inputs = self._query("inputs", None, handle.get_inputs)
        outputs = self._query("outputs", None, handle.get_outputs)
        return [
            ("Model path", path),
            ("Number of inputs", str(len(inputs))),
            ("Number of outputs", str(len(outputs))),
        ]

    def _convert_node_arg(
        self, index: int, direction: Direction, arg: Any
    ) -> TensorDescriptor:
        """Convert an onnxruntime NodeArg to a TensorDescriptor."""
        name = self._query("name", None, getattr, arg, "name")
        type_str = self._query("type", name, getattr, arg, "type")
        shape = self._query("shape", name, getattr, arg, "shape")

        return TensorDescriptor(
            index=index,
            direction=direction,
            name=name or "",
            element_type=ort_type_to_element_type(type_str),
            shape=self._query("shape", name, to_dims, shape or ()),
        )
