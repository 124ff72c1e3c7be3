# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
modelinfo Observability Module

Structured stderr logging for the inspector.
"""

from .logger import (
    Verbosity,
    LogEntry,
    ModelInfoLogger,
    get_logger,
    set_verbosity,
)

__all__ = [
    "Verbosity",
    "LogEntry",
    "ModelInfoLogger",
    "get_logger",
    "set_verbosity",
]
