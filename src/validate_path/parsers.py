"""Platform path parsers.

A parser turns a raw path string into either a canonical and a normalized
rendering, or a rejection with a reason. The classifier consumes parsers only
through the ``PathParser`` interface, so tests can supply scripted outcomes and
either grammar can be used on any host.
"""

import os
from abc import ABC, abstractmethod
from enum import Enum

from .models import ParseOutcome, Parsed, Rejected


class PlatformType(str, Enum):
    """Supported path grammars."""

    POSIX = "posix"
    WINDOWS = "windows"


class PathParser(ABC):
    """Abstract platform path parser.

    Attributes:
        platform: Grammar implemented by the parser
        separator: Preferred separator of the platform
        alt_separator: Other separator users commonly type by mistake,
                       or the alternate separator the platform accepts
    """

    platform: PlatformType
    separator: str
    alt_separator: str

    @abstractmethod
    def parse(self, path: str) -> ParseOutcome:
        """Parse a non-empty path string.

        Args:
            path: Raw path text

        Returns:
            Parsed with canonical and normalized renderings, or Rejected
        """
        pass

    def root_length(self, path: str) -> int:
        """Length of the root prefix of a path, such as a drive or leading separator."""
        return 0


def normalize_names(names: list[str], rooted: bool) -> list[str]:
    """Remove ``.`` elements and resolvable ``..`` elements.

    Leading ``..`` elements are kept for relative paths and dropped under a
    root, where they cannot climb any higher.
    """
    out: list[str] = []
    for name in names:
        if name == ".":
            continue
        if name == "..":
            if out and out[-1] != "..":
                out.pop()
                continue
            if rooted:
                continue
        out.append(name)
    return out


class PosixPathParser(PathParser):
    """Parser for POSIX paths, where only ``/`` separates names."""

    platform = PlatformType.POSIX
    separator = "/"
    alt_separator = "\\"

    def root_length(self, path: str) -> int:
        return 1 if path.startswith(self.separator) else 0

    def parse(self, path: str) -> ParseOutcome:
        nul = path.find("\0")
        if nul >= 0:
            return Rejected("Nul character not allowed", nul)

        root = "/" if path.startswith("/") else ""
        names = [name for name in path.split("/") if name]
        canonical = root + "/".join(names)
        normalized = root + "/".join(normalize_names(names, rooted=bool(root)))
        return Parsed(canonical=canonical, normalized=normalized)


class WindowsPathParser(PathParser):
    """Parser for Windows drive-letter and relative paths.

    Both ``\\`` and ``/`` separate names; the canonical rendering uses ``\\``.
    UNC and DOS device paths, which begin with two separators, are rejected.
    """

    platform = PlatformType.WINDOWS
    separator = "\\"
    alt_separator = "/"

    RESERVED_CHARS = '<>:"|?*'

    def _is_separator(self, char: str) -> bool:
        return char in (self.separator, self.alt_separator)

    def _parse_root(self, path: str) -> tuple[str, int]:
        """Return the canonical root and the offset where names begin."""
        if len(path) >= 2 and path[1] == ":" and path[0].isascii() and path[0].isalpha():
            drive = path[:2]
            if len(path) > 2 and self._is_separator(path[2]):
                return drive + self.separator, 3
            return drive, 2
        if self._is_separator(path[0]):
            return self.separator, 1
        return "", 0

    def root_length(self, path: str) -> int:
        return self._parse_root(path)[1] if path else 0

    def parse(self, path: str) -> ParseOutcome:
        if len(path) >= 2 and self._is_separator(path[0]) and self._is_separator(path[1]):
            return Rejected("UNC and device paths are not supported", 0)

        root, start = self._parse_root(path)
        names: list[str] = []
        current = ""
        for index in range(start, len(path) + 1):
            char = path[index] if index < len(path) else self.separator
            if self._is_separator(char):
                if current:
                    if current.endswith(" "):
                        return Rejected("Trailing char < >", index - 1)
                    names.append(current)
                current = ""
                continue
            if char in self.RESERVED_CHARS or ord(char) < 32:
                return Rejected(f"Illegal char <{char}>", index)
            current += char

        rooted = root.endswith(self.separator)
        canonical = root + self.separator.join(names)
        normalized = root + self.separator.join(normalize_names(names, rooted=rooted))
        return Parsed(canonical=canonical, normalized=normalized)


def create_parser(platform: PlatformType | str) -> PathParser:
    """Create the parser for a path grammar.

    Raises:
        ValueError: If the platform is not supported
    """
    if isinstance(platform, str):
        try:
            platform = PlatformType(platform.lower())
        except ValueError as e:
            raise ValueError(
                f"Unsupported platform: {platform}. "
                f"Must be one of: {', '.join(t.value for t in PlatformType)}"
            ) from e

    if platform == PlatformType.WINDOWS:
        return WindowsPathParser()
    return PosixPathParser()


def host_platform() -> PlatformType:
    """Grammar of the operating system running this process."""
    return PlatformType.WINDOWS if os.sep == "\\" else PlatformType.POSIX


def get_parser() -> PathParser:
    """Get the parser selected by VALIDATE_PATH_PLATFORM.

    ``auto`` (the default) follows the host operating system.
    """
    from common.env import env

    platform = env.platform()
    if platform == "auto":
        return create_parser(host_platform())
    return create_parser(platform)
