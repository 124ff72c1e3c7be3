# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Base Adapter Interface

Defines the abstract base class that both artifact backends implement. An
adapter opens one artifact through its loader library and converts the
loader's native metadata into canonical TensorDescriptors.
"""

import os
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from ..config import InspectorConfig
from ..core import ArtifactKind, ArtifactReport, TensorDescriptor
from ..errors import ArtifactLoadError, ArtifactReadError, ModelInfoError
from ..observability import get_logger


class BaseAdapter(ABC):
    """
    Abstract base class for artifact backends.

    Subclasses provide the loader (`_load`) and the metadata conversion
    (`describe`, `summarize`); this class owns path checks, handle release
    and the assembly of the final ArtifactReport.
    """

    kind: ArtifactKind
    title: str

    def __init__(self, config: Optional[InspectorConfig] = None):
        self.config = config or InspectorConfig()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this adapter (e.g., 'onnx', 'tensorrt')."""
        pass

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if the loader library is installed."""
        pass

    @abstractmethod
    def _load(self, path: str) -> Any:
        """
        Load the artifact at path and return the loader's handle.

        Raises:
            ArtifactLoadError: If the loader rejects the artifact.
        """
        pass

    def _release(self, handle: Any) -> None:
        """Release a handle returned by _load."""
        del handle

    @abstractmethod
    def describe(self, handle: Any) -> list[TensorDescriptor]:
        """
        Convert the handle's I/O metadata to TensorDescriptors.

        Raises:
            ArtifactReadError: If any tensor query fails.
        """
        pass

    @abstractmethod
    def summarize(self, handle: Any, path: str) -> list[tuple[str, str]]:
        """Return the ordered (label, value) header lines of the report."""
        pass

    @contextmanager
    def open(self, path: str) -> Iterator[Any]:
        """
        Open an artifact for the duration of a with-block.

        The handle is released on exit, also when the block raises.
        """
        if not os.path.exists(path):
            raise ArtifactLoadError("file does not exist", path=path)
        if not os.path.isfile(path):
            raise ArtifactLoadError("path is not a regular file", path=path)

        logger = get_logger()
        start = time.perf_counter()
        handle = self._load(path)
        logger.debug(
            "Artifact loaded",
            component=self.name,
            artifact=path,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        try:
            yield handle
        finally:
            self._release(handle)
            logger.debug("Artifact released", component=self.name, artifact=path)

    def inspect(self, path: str) -> ArtifactReport:
        """
        Open, describe and summarize one artifact.

        The report is complete before it is returned, so a failure never
        leaves half a table behind.
        """
        with self.open(path) as handle:
            start = time.perf_counter()
            tensors = self.describe(handle)
            summary = self.summarize(handle, path)
            get_logger().debug(
                f"Described {len(tensors)} tensors",
                component=self.name,
                artifact=path,
                duration_ms=(time.perf_counter() - start) * 1000,
            )
        return ArtifactReport(
            kind=self.kind,
            title=self.title,
            path=path,
            summary=summary,
            tensors=tensors,
        )

    @staticmethod
    def _query(what: str, tensor_name: Optional[str], fn, *args):
        """
        Run one metadata query, turning loader failures into ArtifactReadError.
        """
        try:
            return fn(*args)
        except ModelInfoError:
            raise
        except Exception as e:
            raise ArtifactReadError(
                f"{what} query failed: {e}", tensor_name=tensor_name, query=what
            ) from e
