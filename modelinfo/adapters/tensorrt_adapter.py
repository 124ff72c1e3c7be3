# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
TensorRT Adapter

Reads the I/O contract of a serialized TensorRT engine: per-tensor direction,
data type, memory layout, shape-tensor marker and the min/opt/max shapes of
every optimization profile.

Native enums are matched by member name rather than by value so that
unfamiliar members from newer TensorRT releases degrade to "unknown"
instead of failing.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .base import BaseAdapter
from ..core import (
    ArtifactKind,
    Direction,
    ElementType,
    LayoutFormat,
    ShapeProfile,
    TensorDescriptor,
    to_dims,
)
from ..errors import ArtifactLoadError, ArtifactReadError
from ..observability import get_logger

_TRT_DATA_TYPES = {
    "FLOAT": ElementType.Float32,
    "HALF": ElementType.Float16,
    "BF16": ElementType.BFloat16,
    "INT4": ElementType.Int4,
    "INT8": ElementType.Int8,
    "INT32": ElementType.Int32,
    "INT64": ElementType.Int64,
    "UINT8": ElementType.UInt8,
    "BOOL": ElementType.Bool,
    "FP8": ElementType.FP8,
}

_TRT_FORMATS = {
    fmt.name: fmt for fmt in LayoutFormat if fmt is not LayoutFormat.UNKNOWN
}

_TRT_SEVERITIES = ("internal_error", "error", "warning", "info", "verbose")


def _enum_name(value: Any) -> str:
    """Get the member name of a TensorRT enum value."""
    name = getattr(value, "name", None)
    if isinstance(name, str):
        return name
    return str(value).split(".")[-1]


def trt_dtype_to_element_type(dtype: Any) -> ElementType:
    """Convert a tensorrt.DataType to an ElementType; unmapped is Unknown."""
    return _TRT_DATA_TYPES.get(_enum_name(dtype), ElementType.Unknown)


def trt_format_to_layout(fmt: Any) -> LayoutFormat:
    """Convert a tensorrt.TensorFormat to a LayoutFormat; unmapped is UNKNOWN."""
    return _TRT_FORMATS.get(_enum_name(fmt), LayoutFormat.UNKNOWN)


def _make_trt_logger(trt, min_severity: str):
    """
    Build a tensorrt.ILogger that forwards runtime messages to the
    modelinfo logger.
    """
    threshold = _TRT_SEVERITIES.index(min_severity)

    class _ForwardingLogger(trt.ILogger):
        def __init__(self):
            trt.ILogger.__init__(self)

        def log(self, severity, msg):
            name = _enum_name(severity).lower()
            rank = _TRT_SEVERITIES.index(name) if name in _TRT_SEVERITIES else 0
            if rank > threshold:
                return
            logger = get_logger()
            if rank <= 1:
                logger.error(msg, component="tensorrt.runtime")
            elif rank == 2:
                logger.warning(msg, component="tensorrt.runtime")
            elif rank == 3:
                logger.info(msg, component="tensorrt.runtime")
            else:
                logger.debug(msg, component="tensorrt.runtime")

    return _ForwardingLogger()


@dataclass
class EngineHandle:
    """
    A deserialized engine together with the objects that must outlive it.

    The engine has to be destroyed before its runtime.
    """

    engine: Any
    runtime: Any = None
    trt_logger: Any = None


class TensorRTAdapter(BaseAdapter):
    """
    Adapter for serialized TensorRT engines.

    Example:
        adapter = TensorRTAdapter()
        report = adapter.inspect("model.engine")
    """

    kind = ArtifactKind.ENGINE
    title = "TensorRT Engine Information"

    def __init__(self, config=None):
        super().__init__(config)
        self._trt = None

    @property
    def name(self) -> str:
        return "tensorrt"

    @property
    def is_available(self) -> bool:
        try:
            import tensorrt  # noqa: F401

            return True
        except ImportError:
            return False

    def _get_trt(self):
        """Lazy import tensorrt."""
        if self._trt is None:
            try:
                import tensorrt

                self._trt = tensorrt
            except ImportError as err:
                raise ImportError(
                    "TensorRT is required for TensorRTAdapter. "
                    "Install it with: pip install tensorrt"
                ) from err
        return self._trt

    def _load(self, path: str) -> EngineHandle:
        trt = self._get_trt()

        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ArtifactLoadError(
                f"cannot read file: {e.strerror or e}", path=path
            ) from e
        if not data:
            raise ArtifactLoadError("file is empty", path=path)

        trt_logger = _make_trt_logger(trt, self.config.trt_log_severity)
        try:
            runtime = trt.Runtime(trt_logger)
        except Exception as e:
            raise ArtifactLoadError(
                f"failed to create TensorRT runtime: {e}", path=path
            ) from e

        try:
            engine = runtime.deserialize_cuda_engine(data)
        except Exception as e:
            raise ArtifactLoadError(
                f"failed to deserialize engine: {e}", path=path
            ) from e
        if engine is None:
            raise ArtifactLoadError("failed to deserialize engine", path=path)

        return EngineHandle(engine=engine, runtime=runtime, trt_logger=trt_logger)

    def _release(self, handle: EngineHandle) -> None:
        handle.engine = None
        handle.runtime = None
        handle.trt_logger = None

    def describe(self, handle: EngineHandle) -> list[TensorDescriptor]:
        """All I/O tensors in engine order; direction is read per tensor."""
        engine = handle.engine
        count = self._query("num_io_tensors", None, getattr, engine, "num_io_tensors")
        num_profiles = self._num_profiles(engine)

        counters = {Direction.INPUT: 0, Direction.OUTPUT: 0}
        descriptors = []
        for i in range(int(count)):
            name = self._query("tensor_name", None, engine.get_tensor_name, i)
            direction = self._direction(engine, name)

            descriptors.append(
                TensorDescriptor(
                    index=counters[direction],
                    direction=direction,
                    name=name or "",
                    element_type=trt_dtype_to_element_type(
                        self._query("dtype", name, engine.get_tensor_dtype, name)
                    ),
                    shape=to_dims(
                        self._query("shape", name, engine.get_tensor_shape, name)
                    ),
                    layout_format=trt_format_to_layout(
                        self._query("format", name, engine.get_tensor_format, name)
                    ),
                    profiles=self._profiles(engine, name, direction, num_profiles),
                    is_shape_tensor=bool(
                        self._query(
                            "is_shape_inference_io",
                            name,
                            engine.is_shape_inference_io,
                            name,
                        )
                    ),
                )
            )
            counters[direction] += 1
        return descriptors

    def summarize(self, handle: EngineHandle, path: str) -> list[tuple[str, str]]:
        engine = handle.engine
        count = int(
            self._query("num_io_tensors", None, getattr, engine, "num_io_tensors")
        )
        names = [
            self._query("tensor_name", None, engine.get_tensor_name, i)
            for i in range(count)
        ]
        inputs = sum(1 for n in names if self._direction(engine, n) is Direction.INPUT)
        engine_name = self._query("name", None, getattr, engine, "name")

        return [
            ("Engine path", path),
            ("Engine name", engine_name or ""),
            ("Number of I/O tensors", str(count)),
            ("Number of inputs", str(inputs)),
            ("Number of outputs", str(count - inputs)),
            ("Number of optimization profiles", str(self._num_profiles(engine))),
        ]

    def _num_profiles(self, engine) -> int:
        value = self._query(
            "num_optimization_profiles",
            None,
            getattr,
            engine,
            "num_optimization_profiles",
        )
        # profile 0 always exists, even for engines built without explicit profiles
        return max(1, int(value))

    def _direction(self, engine, name: str) -> Direction:
        mode = _enum_name(self._query("mode", name, engine.get_tensor_mode, name))
        if mode == "INPUT":
            return Direction.INPUT
        if mode == "OUTPUT":
            return Direction.OUTPUT
        raise ArtifactReadError(
            f"tensor is not an I/O tensor (mode {mode})",
            tensor_name=name,
            query="mode",
        )

    def _profiles(
        self,
        engine,
        name: str,
        direction: Direction,
        num_profiles: int,
    ) -> tuple[ShapeProfile, ...]:
        """
        Read the min/opt/max shapes of every profile.

        Output tensors have no profile ranges; their engine shape stands in
        for all three.
        """
        profiles = []
        fixed: Optional[tuple] = None
        for k in range(num_profiles):
            if direction is Direction.INPUT:
                shapes = self._query(
                    "profile_shape", name, engine.get_tensor_profile_shape, name, k
                )
                if len(shapes) != 3:
                    raise ArtifactReadError(
                        f"expected min/opt/max shapes for profile {k}, "
                        f"got {len(shapes)}",
                        tensor_name=name,
                        query="profile_shape",
                    )
                min_shape, opt_shape, max_shape = (to_dims(s) for s in shapes)
            else:
                if fixed is None:
                    fixed = to_dims(
                        self._query("shape", name, engine.get_tensor_shape, name)
                    )
                min_shape = opt_shape = max_shape = fixed
            profiles.append(
                ShapeProfile(
                    profile_index=k,
                    min_shape=min_shape,
                    opt_shape=opt_shape,
                    max_shape=max_shape,
                )
            )
        return tuple(profiles)
