"""Path helpers: normalisation, directory and extension tokens, binary checks."""

from __future__ import annotations

from repo_entropy.domain.entities import NO_EXTENSION, ROOT_DIR, FileRecord

# Formats that are never text; remote trees carry no content to sniff.
BINARY_EXTENSIONS: frozenset[str] = frozenset(
    {
        "pyc", "pyo", "so", "o", "a", "dylib", "lib",
        "dll", "exe", "bin", "class", "jar", "war", "wasm",
        "png", "jpg", "jpeg", "gif", "bmp", "ico", "tif", "tiff",
        "webp", "psd", "mp3", "mp4", "avi", "mov", "wav", "flac", "ogg",
        "woff", "woff2", "ttf", "eot", "otf",
        "zip", "tar", "gz", "tgz", "bz2", "xz", "rar", "7z",
        "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
        "sqlite", "db", "pickle", "pkl", "npy", "npz", "parquet",
    }
)


def normalize_path(path: str) -> str:
    """Forward slashes, no leading ``./`` and no trailing separator."""
    norm = path.replace("\\", "/").strip()
    while norm.startswith("./"):
        norm = norm[2:]
    return norm.strip("/")


def filename(path: str) -> str:
    return path.rsplit("/", maxsplit=1)[-1]


def directory_of(path: str) -> str:
    """Containing directory of *path*, with top-level files mapped to ``root``.

    A top-level directory literally named ``root`` maps to the same key.
    """
    norm = normalize_path(path)
    if "/" not in norm:
        return ROOT_DIR
    return norm.rsplit("/", maxsplit=1)[0]


def extension_of(path: str) -> str:
    """Lower-cased extension token without the dot (``no-extension`` if none)."""
    name = filename(normalize_path(path))
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return NO_EXTENSION
    return name[dot + 1 :].lower()


def has_binary_extension(path: str) -> bool:
    return extension_of(path) in BINARY_EXTENSIONS


def should_skip(record: FileRecord) -> bool:
    """Return *True* if the record must stay out of every histogram."""
    return record.binary
