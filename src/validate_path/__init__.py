"""Check path formats without touching the filesystem."""

from .api import is_valid_path, parse_path_type, require_valid_path, validate_path
from .classifier import PathClassifier
from .errors import (
    InvalidArgumentError,
    InvalidExtensionSpecError,
    InvalidPathError,
    ValidatePathError,
)
from .extensions import resolve_extensions, validate_extensions
from .models import (
    ClassificationLog,
    Issue,
    IssueSeverity,
    Parsed,
    PathType,
    PathValidationResult,
    Rejected,
    ResolvedExtensionSpec,
)
from .parsers import PathParser, PlatformType, PosixPathParser, WindowsPathParser

__all__ = [
    "ClassificationLog",
    "InvalidArgumentError",
    "InvalidExtensionSpecError",
    "InvalidPathError",
    "Issue",
    "IssueSeverity",
    "Parsed",
    "PathClassifier",
    "PathParser",
    "PathType",
    "PathValidationResult",
    "PlatformType",
    "PosixPathParser",
    "Rejected",
    "ResolvedExtensionSpec",
    "ValidatePathError",
    "WindowsPathParser",
    "is_valid_path",
    "parse_path_type",
    "require_valid_path",
    "resolve_extensions",
    "validate_extensions",
    "validate_path",
]
