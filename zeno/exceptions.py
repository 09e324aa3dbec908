"""Shared exception classes for zeno."""

from enum import Enum


class ErrorTier(Enum):
    """How an error affects the outcome of a command."""

    FATAL = "fatal"
    RECOVERABLE = "recoverable"


class ZenoError(Exception):
    """Base exception for zeno errors."""

    tier = ErrorTier.FATAL


class InvalidComponentNameError(ZenoError):
    """Raised when a component name is empty or unsafe."""


class ConfigParseError(ZenoError):
    """Raised when zeno.toml cannot be parsed or is invalid."""


class ComponentNotFoundError(ZenoError):
    """Raised when the remote repository has no such component."""


class FetchError(ZenoError):
    """Raised on connection-level failures while fetching a component."""


class DependencyError(ZenoError):
    """Base for errors in the dependency check, which never abort a run."""

    tier = ErrorTier.RECOVERABLE


class DependencyScanError(DependencyError):
    """Raised when the component file cannot be read for import scanning."""


class ManifestNotFoundError(DependencyError):
    """Raised when package.json is not found."""


class ManifestParseError(DependencyError):
    """Raised when package.json cannot be parsed."""


class InstallError(DependencyError):
    """Raised when the package manager fails to install dependencies."""


class ExportFileError(ZenoError):
    """Raised when the central export file cannot be read or written."""
