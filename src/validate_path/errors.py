"""Exceptions raised by validate_path.

Conditions found while classifying a path are logged, not raised. These
exceptions cover malformed caller input and the raising variant of the API.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import PathValidationResult


class ValidatePathError(Exception):
    """Base exception for validate_path."""

    pass


class InvalidArgumentError(ValidatePathError, ValueError):
    """Argument has the wrong shape, type or value."""

    pass


class InvalidExtensionSpecError(InvalidArgumentError):
    """An entry of the valid extensions argument is malformed."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Invalid extension entry {token!r}. "
            "Each entry in valid_extensions must be either:\n"
            " -\tEmpty text, representing no extension.\n"
            " -\tA period (.), representing any extension.\n"
            " -\tText beginning with a period, e.g., '.mat'.\n"
            " -\tThe name of an extension group, e.g., 'image'."
        )


class InvalidPathError(ValidatePathError, ValueError):
    """Raised by require_valid_path when a path fails validation.

    The message is exactly the warning text of the classification log.
    """

    def __init__(self, result: "PathValidationResult"):
        self.result = result
        super().__init__(result.log.warning)
