"""Parsing and resolution of extension specifications.

An extension specification is a token or collection of tokens, each one of:

- ``"."``: any extension is accepted
- ``""``: a path without an extension is accepted
- ``".txt"``: that literal extension is accepted
- a group name such as ``"image"``: every extension of the group is accepted
"""

from collections.abc import Iterable, Mapping

from .constants import EXTENSION_GROUPS, EXTENSION_MARKER, NO_EXTENSION, WILDCARD
from .errors import InvalidArgumentError, InvalidExtensionSpecError
from .models import EntryKind, ExtensionSpecEntry, ResolvedExtensionSpec

ExtensionGroups = Mapping[str, Iterable[str]]


def flatten_tokens(value: str | Iterable) -> list[str]:
    """Collapse a token or any nesting of token collections to a flat list.

    Raises:
        InvalidArgumentError: If an element is not text
    """
    if isinstance(value, str):
        return [value]
    if not isinstance(value, Iterable):
        raise InvalidArgumentError(
            f"valid_extensions must be text or a collection of text, got {type(value).__name__}"
        )

    tokens: list[str] = []
    for item in value:
        tokens.extend(flatten_tokens(item))
    return tokens


def _find_group(token: str, groups: ExtensionGroups) -> str | None:
    lowered = token.lower()
    for name in groups:
        if name.lower() == lowered:
            return name
    return None


def parse_token(token: str, groups: ExtensionGroups = EXTENSION_GROUPS) -> ExtensionSpecEntry:
    """Classify a single raw token.

    Raises:
        InvalidExtensionSpecError: If the token is not one of the accepted forms
    """
    if token == WILDCARD:
        return ExtensionSpecEntry(EntryKind.WILDCARD, token)
    if token == NO_EXTENSION:
        return ExtensionSpecEntry(EntryKind.NONE, token)

    group = _find_group(token, groups)
    if group is not None:
        return ExtensionSpecEntry(EntryKind.GROUP, group)

    if token.startswith(EXTENSION_MARKER):
        return ExtensionSpecEntry(EntryKind.NAMED, token)

    raise InvalidExtensionSpecError(token)


def parse_tokens(
    value: str | Iterable, groups: ExtensionGroups = EXTENSION_GROUPS
) -> list[ExtensionSpecEntry]:
    """Flatten and classify every token of an extension specification.

    Raises:
        InvalidArgumentError: If the specification is empty or holds non-text
        InvalidExtensionSpecError: If a token is malformed
    """
    tokens = flatten_tokens(value)
    if not tokens:
        raise InvalidArgumentError("valid_extensions must contain at least one entry")
    return [parse_token(t, groups) for t in tokens]


def validate_extensions(value: str | Iterable, groups: ExtensionGroups = EXTENSION_GROUPS) -> None:
    """Fail fast on a malformed extension specification.

    Raises:
        InvalidArgumentError: If the specification is empty or holds non-text
        InvalidExtensionSpecError: If a token is malformed
    """
    parse_tokens(value, groups)


def resolve_entries(
    entries: Iterable[ExtensionSpecEntry], groups: ExtensionGroups = EXTENSION_GROUPS
) -> ResolvedExtensionSpec:
    """Reduce parsed entries to a canonical specification.

    Groups are expanded to their member extensions before de-duplication.
    If the wildcard is present, every other entry is dropped.
    """
    literals: set[str] = set()
    for entry in entries:
        if entry.kind == EntryKind.WILDCARD:
            return ResolvedExtensionSpec(
                extensions=frozenset({WILDCARD}),
                has_wildcard=True,
                has_none=False,
                has_explicit=False,
            )
        if entry.kind == EntryKind.GROUP:
            literals.update(groups[entry.value])
        else:
            literals.add(entry.value)

    return ResolvedExtensionSpec(
        extensions=frozenset(literals),
        has_wildcard=False,
        has_none=NO_EXTENSION in literals,
        has_explicit=any(ext != NO_EXTENSION for ext in literals),
    )


def resolve_extensions(
    value: str | Iterable, groups: ExtensionGroups = EXTENSION_GROUPS
) -> ResolvedExtensionSpec:
    """Parse and resolve a raw extension specification.

    Example:
        >>> spec = resolve_extensions(["", ".csv"])
        >>> spec.matches(".csv"), spec.matches(""), spec.matches(".txt")
        (True, True, False)
    """
    return resolve_entries(parse_tokens(value, groups), groups)
