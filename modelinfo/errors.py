# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
modelinfo Error Hierarchy

Every failure that ends an inspection run is one of these. None of them are
retried and none allow a partial report.

Error Categories:
- ModelInfoError: Base class for all modelinfo errors
- UsageError: Bad or missing command line argument
- ArtifactLoadError: Artifact missing, unreadable, or rejected by its loader
- ArtifactReadError: Artifact loaded but a tensor metadata query failed
- ConfigurationError: Invalid configuration value
"""

from typing import Optional


class ModelInfoError(Exception):
    """
    Base class for all modelinfo errors.

    Attributes:
        message: Human-readable one-line error message
        suggestions: List of suggestions to fix the error
        context: Optional context dictionary for debugging
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[list[str]] = None,
        context: Optional[dict] = None,
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.context = context or {}

        full_message = self._format_message()
        super().__init__(full_message)

    def _format_message(self) -> str:
        """Format the error message with suggestions."""
        lines = [self.message]

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                lines.append(f"  {i}. {suggestion}")

        if self.context:
            lines.append("")
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)


class UsageError(ModelInfoError):
    """Bad or missing command line argument."""

    def __init__(self, message: str):
        super().__init__(message=message)


class ArtifactLoadError(ModelInfoError):
    """
    Artifact could not be opened.

    Raised when:
    - The file does not exist or cannot be read
    - The loader rejects the bytes (corrupt, truncated, version mismatch)
    - Session or runtime construction fails
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.path = path
        context = {}
        if path:
            context["path"] = path

        default_suggestions = [
            "Check that the path points to an existing artifact",
            "Verify the artifact was produced by a compatible runtime version",
        ]

        prefix = "Failed to load artifact"
        if path:
            prefix += f" '{path}'"

        super().__init__(
            message=f"{prefix}: {message}",
            suggestions=suggestions or default_suggestions,
            context=context,
        )


class ArtifactReadError(ModelInfoError):
    """
    Tensor metadata query failed on an opened artifact.

    The whole run is aborted; no partial report is produced.
    """

    def __init__(
        self,
        message: str,
        tensor_name: Optional[str] = None,
        query: Optional[str] = None,
    ):
        self.tensor_name = tensor_name
        self.query = query
        context = {}
        if tensor_name:
            context["tensor"] = tensor_name
        if query:
            context["query"] = query

        super().__init__(
            message=f"Failed to read tensor metadata: {message}",
            context=context,
        )


class ConfigurationError(ModelInfoError):
    """
    Configuration or setup error.

    Raised when:
    - Invalid configuration parameters
    - Invalid environment overrides
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        context = {}
        if config_key:
            context["config_key"] = config_key
        if config_value:
            context["config_value"] = str(config_value)

        suggestions = [
            "Check configuration parameters",
            "Check MODELINFO_* environment variables",
        ]

        super().__init__(
            message=f"Configuration error: {message}",
            suggestions=suggestions,
            context=context,
        )
