"""Public entry points with argument validation.

Arguments are checked before any classification runs. Malformed arguments
raise InvalidArgumentError (or InvalidExtensionSpecError) immediately; they
never appear in the returned log.
"""

from collections.abc import Iterable

from .classifier import PathClassifier
from .constants import PATH_TYPE_NAMES, WILDCARD
from .errors import InvalidArgumentError, InvalidPathError
from .extensions import flatten_tokens, validate_extensions
from .models import PathType, PathValidationResult

_PATH_TYPES_BY_NAME = {
    "any": PathType.ANY,
    "file": PathType.FILE,
    "dir": PathType.DIRECTORY,
    "directory": PathType.DIRECTORY,
}


def parse_path_type(value: PathType | str) -> PathType:
    """Convert a path type argument to a PathType.

    Text is matched case-insensitively as a prefix of "any", "file", "dir"
    or "directory", e.g. "F" and "Dir" are accepted.

    Raises:
        InvalidArgumentError: If the value is not text or matches no name
    """
    if isinstance(value, PathType):
        return value
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"path_type must be text, got {type(value).__name__}"
        )

    token = value.strip().lower()
    matches = {
        _PATH_TYPES_BY_NAME[name]
        for name in PATH_TYPE_NAMES
        if token and name.startswith(token)
    }
    if len(matches) != 1:
        raise InvalidArgumentError(
            f"Invalid path_type {value!r}. Must be one of: {', '.join(PATH_TYPE_NAMES)}"
        )
    return matches.pop()


def _check_path(path: object) -> None:
    if not isinstance(path, str):
        raise InvalidArgumentError(f"path must be text, got {type(path).__name__}")


def validate_path(
    path: str,
    path_type: PathType | str = PathType.ANY,
    valid_extensions: str | Iterable = WILDCARD,
    *,
    classifier: PathClassifier | None = None,
) -> PathValidationResult:
    """Check arguments, then classify the path.

    Raises:
        InvalidArgumentError: If an argument is malformed
    """
    _check_path(path)
    resolved_type = parse_path_type(path_type)
    classifier = classifier or PathClassifier()
    # Generators can be read only once
    tokens = flatten_tokens(valid_extensions)
    validate_extensions(tokens, classifier.extension_groups)
    return classifier.classify(path, resolved_type, tokens)


def is_valid_path(
    path: str,
    path_type: PathType | str = PathType.ANY,
    valid_extensions: str | Iterable = WILDCARD,
    *,
    classifier: PathClassifier | None = None,
) -> tuple[bool, dict[str, str]]:
    """Check if a path format is valid, without checking that it exists.

    Args:
        path: Path to validate
        path_type: "any" (default), "file", "dir" or "directory"
        valid_extensions: Extensions accepted for a file path. Each entry is
            "." (any extension, the default), "" (no extension), text
            beginning with a period such as ".mat", or a group name such as
            "image". A single entry or a collection of entries.
        classifier: Classifier to use; defaults to one for the configured
            platform

    Returns:
        Tuple of the verdict and a log with "warning" and "info" text. The
        warning explains why the path is invalid or that its location is
        ambiguous; the info describes formatting the platform handles itself.

    Raises:
        InvalidArgumentError: If an argument is malformed

    Example:
        >>> ok, log = is_valid_path("output/xray.jpg", "file", ["", ".mat", "image"])
        >>> ok
        True
    """
    result = validate_path(path, path_type, valid_extensions, classifier=classifier)
    return result.is_valid, result.log.as_dict()


def require_valid_path(
    path: str,
    path_type: PathType | str = PathType.ANY,
    valid_extensions: str | Iterable = WILDCARD,
    *,
    classifier: PathClassifier | None = None,
) -> None:
    """Raise if a path format is not valid.

    Takes the same arguments as is_valid_path.

    Raises:
        InvalidArgumentError: If an argument is malformed
        InvalidPathError: If the path is not valid; the message is the
            warning text of the log
    """
    result = validate_path(path, path_type, valid_extensions, classifier=classifier)
    if not result.is_valid:
        raise InvalidPathError(result)
