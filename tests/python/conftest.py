# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Pytest configuration for modelinfo Python tests.
"""

import enum
import io
import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import modelinfo
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from modelinfo.observability import ModelInfoLogger  # noqa: E402

# Skip test modules that require optional dependencies not installed
collect_ignore = []

# Check for hypothesis
try:
    import hypothesis  # noqa: F401
except ImportError:
    collect_ignore.append("test_property_based.py")


@pytest.fixture(autouse=True)
def fresh_logger(monkeypatch):
    """Give every test its own logger writing to an in-memory stream."""
    monkeypatch.delenv("MODELINFO_VERBOSITY", raising=False)
    ModelInfoLogger.reset()
    logger = ModelInfoLogger.get()
    logger.set_output(io.StringIO())
    yield logger
    ModelInfoLogger.reset()


# ---------------------------------------------------------------------------
# onnxruntime stand-ins
# ---------------------------------------------------------------------------


class FakeNodeArg:
    """Mimics onnxruntime.NodeArg."""

    def __init__(self, name, type="tensor(float)", shape=None):
        self.name = name
        self.type = type
        self.shape = [] if shape is None else shape


class FakeSession:
    """Mimics the query surface of onnxruntime.InferenceSession."""

    def __init__(self, inputs=(), outputs=()):
        self._inputs = list(inputs)
        self._outputs = list(outputs)

    def get_inputs(self):
        return self._inputs

    def get_outputs(self):
        return self._outputs


# ---------------------------------------------------------------------------
# TensorRT stand-ins
# ---------------------------------------------------------------------------


class FakeDataType(enum.Enum):
    FLOAT = 0
    HALF = 1
    INT8 = 2
    INT32 = 3
    BOOL = 4
    UINT8 = 5
    FP8 = 6
    BF16 = 7
    INT64 = 8
    INT4 = 9
    FP4 = 10


class FakeTensorFormat(enum.Enum):
    LINEAR = 0
    CHW2 = 1
    HWC8 = 2
    CHW4 = 3
    CHW32 = 5
    DLA_LINEAR = 9


class FakeTensorIOMode(enum.Enum):
    NONE = 0
    INPUT = 1
    OUTPUT = 2


class FakeEngine:
    """
    Mimics the tensorrt.ICudaEngine query surface.

    `tensors` is a list of dicts with keys name, mode, dtype, format, shape,
    profiles (list of [min, opt, max] per profile, inputs only) and
    shape_tensor.
    """

    def __init__(self, tensors, num_profiles=1, name="fake_engine"):
        self._tensors = {t["name"]: t for t in tensors}
        self._order = [t["name"] for t in tensors]
        self.num_optimization_profiles = num_profiles
        self.name = name

    @property
    def num_io_tensors(self):
        return len(self._order)

    def get_tensor_name(self, index):
        return self._order[index]

    def get_tensor_mode(self, name):
        return self._tensors[name]["mode"]

    def get_tensor_dtype(self, name):
        return self._tensors[name].get("dtype", FakeDataType.FLOAT)

    def get_tensor_format(self, name):
        return self._tensors[name].get("format", FakeTensorFormat.LINEAR)

    def get_tensor_shape(self, name):
        return self._tensors[name]["shape"]

    def get_tensor_profile_shape(self, name, profile_index):
        if self._tensors[name]["mode"] is not FakeTensorIOMode.INPUT:
            raise RuntimeError("profile shapes are only defined for inputs")
        return self._tensors[name]["profiles"][profile_index]

    def is_shape_inference_io(self, name):
        return self._tensors[name].get("shape_tensor", False)


def engine_tensor(
    name,
    mode=FakeTensorIOMode.INPUT,
    shape=(-1, 3, 224, 224),
    profiles=None,
    **kwargs,
):
    """Build one FakeEngine tensor entry."""
    entry = {"name": name, "mode": mode, "shape": list(shape)}
    if profiles is not None:
        entry["profiles"] = profiles
    entry.update(kwargs)
    return entry


@pytest.fixture
def resnet_profiles():
    """Two optimization profiles for a [-1, 3, 224, 224] input."""
    return [
        [[1, 3, 224, 224], [4, 3, 224, 224], [8, 3, 224, 224]],
        [[8, 3, 224, 224], [16, 3, 224, 224], [32, 3, 224, 224]],
    ]
