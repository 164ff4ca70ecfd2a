"""Message templates for classification issues.

Each function formats one condition found by the classifier. Messages have a
one-line heading followed by ``" -\\t"`` detail lines.
"""

import re

from .constants import NO_EXTENSION, WILDCARD
from .models import PathType, ResolvedExtensionSpec


def parsed_path(canonical: str) -> str:
    return f'The platform parsed the path as:\n -\t"{canonical}"'


def normalized_path(normalized: str) -> str:
    return f'The platform eliminated redundant name elements, as follows:\n -\t"{normalized}"'


def bad_path(reason: str, offset: int | None) -> str:
    """Describe a parse rejection.

    Args:
        reason: Reason reported by the parser; ``<c>`` is rendered as ``'c'``
        offset: 0-based offset of the offending character, if known
    """
    reason = re.sub(r"<(.+?)>", r"'\1'", reason)
    if offset is not None and offset >= 0:
        reason = f"{reason} at index {offset + 1}"
    return f"Path is invalid:\n -\t{reason}."


def directory_has_extension(ext: str) -> str:
    if ext == WILDCARD:
        ext = "'.'"
    return (
        "Invalid directory:\n"
        f" -\tDirectory path cannot have a file extension, but input path had {ext}."
    )


def file_no_name() -> str:
    return "Invalid file name:\n -\tFile path must contain a non-empty file name."


def accepted_extensions(spec: ResolvedExtensionSpec) -> str:
    """Describe which extensions a specification accepts."""
    if spec.has_wildcard:
        return "Any file extension is accepted"
    if len(spec.extensions) == 1:
        if spec.has_none:
            return "A file extension should not have been provided"
        (only,) = spec.extensions
        return f"The file extension must be {only}"

    listed = sorted(ext for ext in spec.extensions if ext != NO_EXTENSION)
    if spec.has_none:
        listed.append("or none")
    return "Valid file extensions are " + ", ".join(listed)


def invalid_extension(ext: str, spec: ResolvedExtensionSpec) -> str:
    if ext:
        provided = f"The provided extension was {ext}"
    else:
        provided = "No file extension was provided"
    return f"Invalid file extension:\n -\t{provided}.\n -\t{accepted_extensions(spec)}."


def wrong_separators(used: list[str], preferred: str) -> str:
    """Describe separators that differ from the platform's.

    Args:
        used: Distinct separators found, in order of first appearance
        preferred: Separator of the current platform
    """
    if len(used) == 1:
        reason = f"Path uses '{used[0]}' but the current platform uses '{preferred}'"
    else:
        reason = f"Path contains both '{used[0]}' and '{used[1]}'"
    return f"Incorrect file separators:\n -\t{reason}."


def repeated_separators() -> str:
    return (
        "Repeated file separators:\n"
        " -\tDouble slashes ('\\\\' or '//') in the path are ignored."
    )


def ambiguous_path_type(path_type: PathType, separator: str) -> str:
    correction = separator if path_type == PathType.DIRECTORY else WILDCARD
    return (
        "Ambiguous path location:\n"
        " -\tCannot detect if the path is a directory or file.\n"
        f" -\tAppend a trailing '{correction}' to resolve the path as a {path_type.value}."
    )
