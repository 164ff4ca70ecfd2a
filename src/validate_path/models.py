"""Data models for path classification results."""

from dataclasses import dataclass, field
from enum import Enum


class PathType(str, Enum):
    """Location type a path is expected to denote."""

    ANY = "any"
    FILE = "file"
    DIRECTORY = "directory"


class IssueSeverity(Enum):
    """Severity levels for classification issues."""

    WARNING = "warning"  # Invalidates the path, or the location is ambiguous
    INFO = "info"  # Formatting the platform handles on its own


class EntryKind(Enum):
    """Kinds of entry accepted in an extension specification."""

    WILDCARD = "wildcard"  # "." accepts any extension
    NONE = "none"  # "" accepts no extension
    NAMED = "named"  # ".txt"
    GROUP = "group"  # "image"


@dataclass(frozen=True)
class ExtensionSpecEntry:
    """A single parsed token of an extension specification."""

    kind: EntryKind
    value: str


@dataclass(frozen=True)
class ResolvedExtensionSpec:
    """Canonical form of an extension specification.

    ``extensions`` holds the literal extensions after group expansion and
    de-duplication. It contains ``""`` when no extension is accepted, and is
    exactly ``{"."}`` when the wildcard is present.
    """

    extensions: frozenset[str]
    has_wildcard: bool
    has_none: bool
    has_explicit: bool

    def matches(self, ext: str) -> bool:
        """Check an observed extension against the specification.

        Args:
            ext: Extension of the final path component, including its leading
                 period, or empty text

        Returns:
            True if the extension is accepted
        """
        if self.has_wildcard:
            return True
        if self.has_none and ext in ("", "."):
            return True
        return ext in self.extensions


@dataclass(frozen=True)
class Parsed:
    """Platform parser accepted the path."""

    canonical: str  # Re-rendered without semantic change
    normalized: str  # Canonical with redundant name elements removed


@dataclass(frozen=True)
class Rejected:
    """Platform parser rejected the path."""

    reason: str
    offset: int | None = None  # 0-based position of the offending character


ParseOutcome = Parsed | Rejected


@dataclass
class Issue:
    """A single classification issue."""

    severity: IssueSeverity
    rule_id: str  # e.g., "PATH_001"
    message: str


@dataclass
class ClassificationLog:
    """Ordered warning and info messages produced for one path."""

    issues: list[Issue] = field(default_factory=list)

    def add(self, severity: IssueSeverity, rule_id: str, message: str) -> None:
        self.issues.append(Issue(severity=severity, rule_id=rule_id, message=message))

    @property
    def warnings(self) -> list[str]:
        return [i.message for i in self.issues if i.severity == IssueSeverity.WARNING]

    @property
    def infos(self) -> list[str]:
        return [i.message for i in self.issues if i.severity == IssueSeverity.INFO]

    @property
    def warning(self) -> str:
        """Warning messages joined by newlines, or "" if there are none."""
        return "\n".join(self.warnings)

    @property
    def info(self) -> str:
        """Info messages joined by newlines, or "" if there are none."""
        return "\n".join(self.infos)

    def as_dict(self) -> dict[str, str]:
        return {"warning": self.warning, "info": self.info}


@dataclass
class PathValidationResult:
    """Result of classifying a single path."""

    path: str
    path_type: PathType
    is_valid: bool
    log: ClassificationLog

    @property
    def has_warnings(self) -> bool:
        """Check if result contains any warnings."""
        return bool(self.log.warnings)

    @property
    def is_clean(self) -> bool:
        """Check if result has no messages at all."""
        return len(self.log.issues) == 0
