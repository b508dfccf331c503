"""
MGMP Converter Exception Classes

Custom exceptions for better error handling and debugging in the converter.
"""

from typing import Any


class MgmpConverterError(Exception):
    """Base exception for all converter errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class RecordLoadError(MgmpConverterError):
    """Raised when a source record file cannot be read or parsed."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        context = {}
        if file_path:
            context["file_path"] = file_path
        super().__init__(message, "RECORD_LOAD_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the load error."""
        if "file_path" in self.context:
            return (
                f"Check that '{self.context['file_path']}' exists and holds a "
                "JSON or YAML mapping of attribute names to values"
            )
        return "Check the record file for syntax errors"


class ConfigurationError(MgmpConverterError):
    """Raised when converter settings are invalid or cannot be loaded."""

    def __init__(self, message: str, setting: str | None = None) -> None:
        context = {}
        if setting:
            context["setting"] = setting
        super().__init__(message, "CONFIGURATION_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the configuration."""
        if "setting" in self.context:
            return f"Review the value of '{self.context['setting']}'"
        return "Review the settings file against ConverterSettings"


class GeometryParseError(MgmpConverterError):
    """Raised when a WKT location cannot be parsed."""

    def __init__(self, message: str, wkt: str | None = None) -> None:
        context = {}
        if wkt:
            context["wkt"] = wkt
        super().__init__(message, "GEOMETRY_PARSE_ERROR", context)


class DocumentAssemblyError(MgmpConverterError):
    """Raised when the assignment list cannot be turned into a document."""

    def __init__(self, message: str, path: str | None = None) -> None:
        context = {}
        if path:
            context["path"] = path
        super().__init__(message, "DOCUMENT_ASSEMBLY_ERROR", context)


class PathSyntaxError(DocumentAssemblyError):
    """Raised when a document path is malformed."""


class IndexSubstitutionError(AssertionError):
    """Raised when a non-positive occurrence index is substituted into a path.

    This signals a wiring bug in a mapping step, not bad input data.
    """
