"""Shared constants for the validate_path package."""

# Character introducing a file extension within a path component
EXTENSION_MARKER = "."

# Extension token accepting any extension
WILDCARD = EXTENSION_MARKER

# Extension token accepting a path without an extension
NO_EXTENSION = ""

# Self and parent references; they never carry a name or an extension
DOT_REFERENCES: set[str] = {".", ".."}

# Named extension groups accepted in place of a literal extension token.
# "image" lists the raster formats commonly readable by imaging libraries.
EXTENSION_GROUPS: dict[str, frozenset[str]] = {
    "image": frozenset(
        {
            ".bmp",
            ".cur",
            ".fits",
            ".fts",
            ".gif",
            ".hdf",
            ".ico",
            ".j2c",
            ".j2k",
            ".jp2",
            ".jpeg",
            ".jpf",
            ".jpg",
            ".jpx",
            ".pbm",
            ".pcx",
            ".pgm",
            ".png",
            ".pnm",
            ".ppm",
            ".ras",
            ".tif",
            ".tiff",
            ".webp",
            ".xwd",
        }
    ),
}

# Accepted spellings of the path type argument
PATH_TYPE_NAMES: tuple[str, ...] = ("any", "file", "dir", "directory")
