"""Small filesystem helpers on top of resolved directories.

These are the only functions in the package that touch the filesystem beyond
reading the environment. Errors from the filesystem are never swallowed:
create_directory and write_target let OSError propagate to the caller.
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

StrPath = str | Path


class CategoryUnavailable(LookupError):
    """Raised when asked to create something under a directory the platform does not define."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"No {category} directory is available on this platform or in this environment")


def create_directory(base: StrPath, relative_path: StrPath) -> Path:
    """Create base/relative_path and any missing ancestors, returning the full path.

    An already existing directory is not an error.

    Raises:
        OSError: If creation is blocked (permissions, or a file in the way)
    """
    full_path = Path(base) / relative_path
    full_path.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Ensured directory {full_path}")
    return full_path


def find_file(primary_base: StrPath, override_bases: Iterable[StrPath], relative_path: StrPath) -> Path | None:
    """Look for relative_path under primary_base, then under each override base in order.

    Returns the first existing match, or None if there is none.
    """
    for base in (primary_base, *override_bases):
        candidate = Path(base) / relative_path
        if candidate.exists():
            return candidate
    return None


def write_target(base: StrPath, relative_path: StrPath) -> Path:
    """Prepare base/relative_path for writing: create its parent directories, not the path itself.

    Raises:
        OSError: If a parent directory cannot be created
    """
    target = Path(base) / relative_path
    target.parent.mkdir(parents=True, exist_ok=True)
    return target
