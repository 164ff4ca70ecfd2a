"""Path classifier orchestrating parsing, separator and type checks."""

from collections.abc import Iterable

from common.logger import get_logger

from . import messages
from .constants import DOT_REFERENCES, EXTENSION_GROUPS, EXTENSION_MARKER, WILDCARD
from .extensions import ExtensionGroups, resolve_extensions
from .models import (
    ClassificationLog,
    IssueSeverity,
    Parsed,
    PathType,
    PathValidationResult,
    Rejected,
)
from .parsers import PathParser, get_parser

logger = get_logger(__name__)

RULE_PREFIX = "PATH"

# Rule ids, stable across releases for JSON consumers
RULE_BAD_PATH = f"{RULE_PREFIX}_001"
RULE_PARSED = f"{RULE_PREFIX}_002"
RULE_NORMALIZED = f"{RULE_PREFIX}_003"
RULE_WRONG_SEPARATORS = f"{RULE_PREFIX}_004"
RULE_REPEATED_SEPARATORS = f"{RULE_PREFIX}_005"
RULE_DIRECTORY_EXTENSION = f"{RULE_PREFIX}_006"
RULE_FILE_NO_NAME = f"{RULE_PREFIX}_007"
RULE_INVALID_EXTENSION = f"{RULE_PREFIX}_008"
RULE_AMBIGUOUS = f"{RULE_PREFIX}_009"


class PathClassifier:
    """Classifies path strings without touching the filesystem."""

    def __init__(
        self,
        parser: PathParser | None = None,
        separator: str | None = None,
        alt_separator: str | None = None,
        extension_groups: ExtensionGroups | None = None,
    ):
        """Initialize the classifier.

        Args:
            parser: Platform parser; defaults to the configured platform
            separator: Preferred separator; defaults to the parser's
            alt_separator: Alternate separator; defaults to the parser's
            extension_groups: Named extension groups; defaults to EXTENSION_GROUPS
        """
        self.parser = parser if parser is not None else get_parser()
        self.separator = separator or self.parser.separator
        self.alt_separator = alt_separator or self.parser.alt_separator
        self.extension_groups = (
            extension_groups if extension_groups is not None else EXTENSION_GROUPS
        )

    def split_name(self, path: str) -> tuple[str, str]:
        """Split the final component of a path into name and extension.

        The extension starts at the last period and includes it. Self and
        parent references have neither a name nor an extension, and neither
        has a bare root such as a drive designator.
        """
        final = path[self.parser.root_length(path) :]
        for sep in (self.separator, self.alt_separator):
            final = final.rsplit(sep, 1)[-1]

        if final in DOT_REFERENCES:
            return "", ""

        dot = final.rfind(EXTENSION_MARKER)
        if dot < 0:
            return final, ""
        return final[:dot], final[dot:]

    def check_separators(self, path: str, log: ClassificationLog) -> None:
        """Log separator usage that the platform tolerates but does not prefer."""
        used = sorted(
            {sep for sep in (self.separator, self.alt_separator) if sep in path},
            key=path.index,
        )
        if len(used) > 1 or (used and used[0] != self.separator):
            log.add(
                IssueSeverity.INFO,
                RULE_WRONG_SEPARATORS,
                messages.wrong_separators(used, self.separator),
            )

        if any(sep * 2 in path for sep in (self.separator, self.alt_separator)):
            log.add(
                IssueSeverity.INFO,
                RULE_REPEATED_SEPARATORS,
                messages.repeated_separators(),
            )

    def check_extension(
        self, ext: str, valid_extensions: str | Iterable, log: ClassificationLog
    ) -> bool:
        spec = resolve_extensions(valid_extensions, self.extension_groups)
        if spec.matches(ext):
            return True
        log.add(
            IssueSeverity.WARNING,
            RULE_INVALID_EXTENSION,
            messages.invalid_extension(ext, spec),
        )
        return False

    def classify(
        self,
        path: str,
        path_type: PathType = PathType.ANY,
        valid_extensions: str | Iterable = WILDCARD,
    ) -> PathValidationResult:
        """Classify a path string.

        Args:
            path: Path to classify
            path_type: Location type the path must denote
            valid_extensions: Extension specification applied to file paths

        Returns:
            PathValidationResult with the verdict and log
        """
        log = ClassificationLog()
        is_valid = True

        if not path:
            # An empty path is the current location, so it can never name a file
            if path_type == PathType.FILE:
                is_valid = False
                log.add(IssueSeverity.WARNING, RULE_FILE_NO_NAME, messages.file_no_name())
                self.check_extension("", valid_extensions, log)
            logger.debug(f"Empty path classified as {path_type.value}: valid={is_valid}")
            return PathValidationResult(path=path, path_type=path_type, is_valid=is_valid, log=log)

        outcome = self.parser.parse(path)
        if isinstance(outcome, Rejected):
            is_valid = False
            log.add(
                IssueSeverity.WARNING,
                RULE_BAD_PATH,
                messages.bad_path(outcome.reason, outcome.offset),
            )
            logger.debug(f"Parser rejected {path!r}: {outcome.reason}")
        elif isinstance(outcome, Parsed):
            if outcome.canonical != path:
                log.add(IssueSeverity.INFO, RULE_PARSED, messages.parsed_path(outcome.canonical))
            if outcome.normalized != path:
                log.add(
                    IssueSeverity.INFO,
                    RULE_NORMALIZED,
                    messages.normalized_path(outcome.normalized),
                )

        self.check_separators(path, log)

        # Once the platform cannot parse the path, further explanation is noise
        if is_valid:
            name, ext = self.split_name(path)
            resolved_type = path_type
            if resolved_type == PathType.ANY and ext:
                resolved_type = PathType.FILE

            if resolved_type == PathType.DIRECTORY:
                if ext:
                    is_valid = False
                    log.add(
                        IssueSeverity.WARNING,
                        RULE_DIRECTORY_EXTENSION,
                        messages.directory_has_extension(ext),
                    )
                if name:
                    log.add(
                        IssueSeverity.WARNING,
                        RULE_AMBIGUOUS,
                        messages.ambiguous_path_type(resolved_type, self.separator),
                    )
            elif resolved_type == PathType.FILE:
                if not name:
                    is_valid = False
                    log.add(IssueSeverity.WARNING, RULE_FILE_NO_NAME, messages.file_no_name())
                if not ext:
                    log.add(
                        IssueSeverity.WARNING,
                        RULE_AMBIGUOUS,
                        messages.ambiguous_path_type(resolved_type, self.separator),
                    )
                if not self.check_extension(ext, valid_extensions, log):
                    is_valid = False

        logger.debug(
            f"Classified {path!r} as {path_type.value}: valid={is_valid}, "
            f"{len(log.warnings)} warnings, {len(log.infos)} infos"
        )
        return PathValidationResult(path=path, path_type=path_type, is_valid=is_valid, log=log)
