# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
modelinfo Command Line Interface

    modelinfo <artifact> [--kind graph|engine]
    onnxinfo <model.onnx>
    trtinfo <model.engine>
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .config import GRAPH_OPTIMIZATION_LEVELS, InspectorConfig
from .core import ArtifactKind
from .errors import ModelInfoError, UsageError
from .observability import Verbosity, get_logger

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser(
    prog: str, kind: Optional[ArtifactKind] = None
) -> argparse.ArgumentParser:
    """Build the argument parser; `kind` fixes the backend for onnxinfo/trtinfo."""
    descriptions = {
        None: "Report the input/output tensors of an ONNX model or TensorRT engine",
        ArtifactKind.GRAPH: "Report the input/output tensors of an ONNX model",
        ArtifactKind.ENGINE: "Report the I/O tensors and optimization profiles "
        "of a TensorRT engine",
    }
    parser = argparse.ArgumentParser(prog=prog, description=descriptions[kind])

    parser.add_argument("artifact", help="Path to the artifact to inspect")

    if kind is None:
        parser.add_argument(
            "--kind",
            choices=[k.value for k in ArtifactKind],
            default=None,
            help="Artifact kind (default: detected from the file extension)",
        )

    parser.add_argument(
        "--version",
        action="version",
        version=f"modelinfo v{_version()}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase diagnostic output on stderr (repeatable)",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress diagnostics other than the final error line",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit diagnostics as JSON lines",
    )
    if kind is not ArtifactKind.ENGINE:
        parser.add_argument(
            "--opt-level",
            choices=GRAPH_OPTIMIZATION_LEVELS,
            default=None,
            help="onnxruntime graph optimization level (default: all)",
        )
    return parser


def _version() -> str:
    from . import __version__

    return __version__


def _configure(args: argparse.Namespace) -> InspectorConfig:
    config = InspectorConfig.from_env()

    if args.quiet:
        config.verbosity = Verbosity.SILENT
    elif args.verbose:
        config.verbosity = min(Verbosity.DEBUG, int(config.verbosity) + args.verbose)
    if args.json_logs:
        config.json_logs = True
    if getattr(args, "opt_level", None):
        config.graph_optimization_level = args.opt_level
    config.validate()

    logger = get_logger()
    logger.set_verbosity(config.verbosity)
    logger.set_json_format(config.json_logs)
    return config


def run(
    argv: Optional[Sequence[str]] = None,
    prog: str = "modelinfo",
    kind: Optional[ArtifactKind] = None,
) -> int:
    """Parse arguments, inspect the artifact and return the exit status."""
    from .api import inspect_artifact

    parser = build_parser(prog, kind)
    args = parser.parse_args(argv)

    try:
        config = _configure(args)
        selected = kind or (ArtifactKind(args.kind) if args.kind else None)
        inspect_artifact(args.artifact, kind=selected, config=config)
    except ModelInfoError as e:
        get_logger().debug(str(e), component="cli")
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_USAGE if isinstance(e, UsageError) else EXIT_FAILURE
    except ImportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for `modelinfo`."""
    return run(argv, prog="modelinfo")


def onnxinfo(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for `onnxinfo`."""
    return run(argv, prog="onnxinfo", kind=ArtifactKind.GRAPH)


def trtinfo(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for `trtinfo`."""
    return run(argv, prog="trtinfo", kind=ArtifactKind.ENGINE)


if __name__ == "__main__":
    sys.exit(main())
