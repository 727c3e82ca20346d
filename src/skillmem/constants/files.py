"""Constants for file copying, binary detection, and atomic writes."""

from __future__ import annotations

BINARY_SNIFF_BYTES: int = 8192
ATOMIC_TEMP_PREFIX: str = ".tmp-"
ATOMIC_TEMP_SUFFIX: str = ".part"
COPY_IGNORED_NAMES: tuple[str, ...] = (".git",)
VIEW_TRUNCATION_MARKER: str = "[truncated]"

BINARY_EXTENSIONS: frozenset[str] = frozenset(
    {
        # Images
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".bmp",
        ".ico",
        ".webp",
        ".svg",
        ".tiff",
        ".tif",
        # Audio
        ".mp3",
        ".wav",
        ".ogg",
        ".flac",
        ".aac",
        ".m4a",
        # Video
        ".mp4",
        ".avi",
        ".mov",
        ".mkv",
        ".webm",
        ".wmv",
        # Archives
        ".zip",
        ".tar",
        ".gz",
        ".bz2",
        ".7z",
        ".rar",
        ".xz",
        # Documents
        ".pdf",
        ".doc",
        ".docx",
        ".xls",
        ".xlsx",
        ".ppt",
        ".pptx",
        # Executables
        ".exe",
        ".dll",
        ".so",
        ".dylib",
        ".bin",
        # Fonts
        ".ttf",
        ".otf",
        ".woff",
        ".woff2",
        ".eot",
        # Other
        ".pyc",
        ".class",
        ".o",
        ".a",
        ".node",
    }
)
