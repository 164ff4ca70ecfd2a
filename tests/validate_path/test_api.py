"""Tests for the public entry points."""

import pytest

from validate_path.api import is_valid_path, parse_path_type, require_valid_path
from validate_path.classifier import PathClassifier
from validate_path.errors import (
    InvalidArgumentError,
    InvalidExtensionSpecError,
    InvalidPathError,
)
from validate_path.models import PathType
from validate_path.parsers import PosixPathParser, WindowsPathParser

WINDOWS = PathClassifier(parser=WindowsPathParser())
POSIX = PathClassifier(parser=PosixPathParser())


class TestParsePathType:
    """Tests for path type argument handling."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("any", PathType.ANY),
            ("FILE", PathType.FILE),
            ("f", PathType.FILE),
            ("dir", PathType.DIRECTORY),
            ("Directory", PathType.DIRECTORY),
            ("d", PathType.DIRECTORY),
            (PathType.FILE, PathType.FILE),
        ],
    )
    def test_accepted_spellings(self, value, expected):
        assert parse_path_type(value) == expected

    @pytest.mark.parametrize("value", ["", ".txt", "folder", "files", 1, None])
    def test_rejected_values(self, value):
        with pytest.raises(InvalidArgumentError):
            parse_path_type(value)


# Paths that are valid without any warning, checked against Windows grammar
VALID_PATHS = [
    ("dir\\dir\\dir\\ambiguous",),
    ("dir\\dir\\dir\\ambiguous", "any"),
    ("\\dir\\dir\\dir\\ambiguous",),
    (".\\dir\\dir\\dir\\ambiguous",),
    ("..\\dir\\dir\\dir\\ambiguous",),
    ("..\\..\\.\\dir\\ambiguous",),
    ("", "dir"),
    ("dir\\dir\\dir\\", "dir"),
    ("dir\\dir\\dir\\file.", "file"),
    ("dir\\dir\\dir\\file.", "file", "."),
    ("dir\\dir\\dir\\file.", "file", ""),
    ("dir\\dir\\dir\\file.txt", "file", ".txt"),
    ("dir\\dir\\dir\\file.", "file", [".txt", ""]),
    ("dir\\dir\\dir\\file.mat", "file", [".txt", "."]),
    ("dir\\dir\\dir\\file.txt", "file", [".csv", ".txt"]),
    ("dir\\dir\\dir\\file.txt", "file", (".csv", ".txt")),
    ("dir\\dir\\dir\\file.txt", "file", [[".csv", ".txt"], [".xls", ".xlsx"]]),
    ("dir\\dir\\dir\\", "dir", ".txt"),
    ("dir/dir/",),
    ("dir\\/dir/",),
    ("dir/dir//dir/",),
    ("C:\\ffmpeg\\",),
    ("..\\file.dat", "file"),
]

# Paths that are invalid, checked against Windows grammar
INVALID_PATHS = [
    ("dir\\dir\\dir\\file.", "dir"),
    ("dir\\dir\\dir\\file.ext", "dir"),
    ("dir\\dir\\dir\\", "file"),
    ("", "file"),
    ("", "file", "."),
    ("dir\\dir\\dir\\file.", "file", ".txt"),
    ("dir\\dir\\dir\\file", "file", ".txt"),
    ("dir\\dir\\dir\\file.txt", "file", ""),
    ("dir\\dir\\dir\\file.mat", "file", [[".csv", ".txt"], [".xls", ".xlsx"]]),
    ("dir\\dir\\dir\\:",),
    ("dir\\dir\\dir\\*",),
    ("dir\\dir\\dir\\?",),
    ('dir\\dir\\dir\\"',),
    ("dir\\dir\\dir\\<",),
    ("dir\\dir\\dir\\>",),
    ("dir\\dir\\dir\\|",),
    ("\\\\127.0.0.1\\temp",),
    ("file://C:/file.dat",),
]

# Valid paths whose location is ambiguous
AMBIGUOUS_PATHS = [
    ("dir\\dir\\dir\\ambiguous", "dir"),
    ("dir\\dir\\dir\\ambiguous", "file"),
    ("dir\\dir\\dir\\ambiguous", "file", ""),
]


class TestIsValidPath:
    """Tests for is_valid_path."""

    @pytest.mark.parametrize("args", VALID_PATHS)
    def test_valid_paths(self, args):
        ok, log = is_valid_path(*args, classifier=WINDOWS)

        assert ok, log
        assert log["warning"] == ""

    @pytest.mark.parametrize("args", INVALID_PATHS)
    def test_invalid_paths(self, args):
        ok, log = is_valid_path(*args, classifier=WINDOWS)

        assert not ok
        assert log["warning"] != ""

    @pytest.mark.parametrize("args", AMBIGUOUS_PATHS)
    def test_ambiguous_paths(self, args):
        ok, log = is_valid_path(*args, classifier=WINDOWS)

        assert ok
        assert "Ambiguous path location" in log["warning"]

    @pytest.mark.parametrize("path", ["dir\\dir\\", "dir\\dir/dir/"])
    def test_backslashes_on_posix_are_formatting_only(self, path):
        ok, log = is_valid_path(path, classifier=POSIX)

        assert ok
        assert log["warning"] == ""
        assert "Incorrect file separators" in log["info"]

    def test_info_describes_redundant_elements(self):
        ok, log = is_valid_path(".\\dir\\ambiguous", classifier=WINDOWS)

        assert ok
        assert "redundant name elements" in log["info"]
        assert '"dir\\ambiguous"' in log["info"]

    def test_reserved_character_reason(self):
        _, log = is_valid_path("dir\\dir\\dir\\:", classifier=WINDOWS)
        assert log["warning"] == "Path is invalid:\n -\tIllegal char ':' at index 13."

    def test_image_group(self):
        ok, _ = is_valid_path("output/xray.jpg", "file", ["", ".mat", "image"], classifier=POSIX)
        assert ok

    def test_extensions_from_generator(self):
        """Test that a one-shot iterable of extensions is read only once."""
        ok, log = is_valid_path(
            "dir/file.txt", "file", (ext for ext in [".txt"]), classifier=POSIX
        )

        assert ok
        assert log["warning"] == ""

    def test_extensions_from_generator_still_checked(self):
        ok, log = is_valid_path(
            "dir/file.mat", "file", (ext for ext in [".csv", ".txt"]), classifier=POSIX
        )

        assert not ok
        assert "Valid file extensions are .csv, .txt" in log["warning"]

    def test_default_classifier_uses_configured_platform(self, monkeypatch):
        monkeypatch.setenv("VALIDATE_PATH_PLATFORM", "windows")
        ok, log = is_valid_path("dir/dir/")

        assert ok
        assert "current platform uses '\\'" in log["info"]


class TestInvalidArguments:
    """Tests for argument validation, which raises before classification."""

    @pytest.mark.parametrize(
        "args",
        [
            (1,),
            (["dir", "dir"],),
            (None,),
            ("file.txt", ".txt"),
            ("file.txt", "file", 3),
            ("file.txt", "file", []),
        ],
    )
    def test_invalid_arguments(self, args):
        with pytest.raises(InvalidArgumentError):
            is_valid_path(*args, classifier=POSIX)

    def test_extension_without_period(self):
        with pytest.raises(InvalidExtensionSpecError):
            is_valid_path("file.txt", "file", ["", "txt"], classifier=POSIX)

    def test_extensions_validated_for_directories_too(self):
        with pytest.raises(InvalidExtensionSpecError):
            is_valid_path("dir/", "dir", "txt", classifier=POSIX)


class TestRequireValidPath:
    """Tests for require_valid_path."""

    def test_valid_path_returns_none(self):
        assert require_valid_path("dir/sub/file.txt", "file", ".txt", classifier=POSIX) is None

    def test_ambiguous_path_does_not_raise(self):
        require_valid_path("dir/ambiguous", "dir", classifier=POSIX)

    def test_invalid_path_raises_with_warning_text(self):
        _, log = is_valid_path("dir/file.mat", "file", [".csv", ".txt"], classifier=POSIX)

        with pytest.raises(InvalidPathError) as exc_info:
            require_valid_path("dir/file.mat", "file", [".csv", ".txt"], classifier=POSIX)

        assert str(exc_info.value) == log["warning"]
        assert exc_info.value.result.path == "dir/file.mat"

    def test_invalid_path_error_is_value_error(self):
        with pytest.raises(ValueError):
            require_valid_path("", "file", classifier=POSIX)

    def test_malformed_arguments_raise_argument_error(self):
        with pytest.raises(InvalidArgumentError):
            require_valid_path("dir", "folder", classifier=POSIX)
