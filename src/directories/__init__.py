"""Standard per-user directories on Linux, macOS and Windows.

Provides BaseDirs, UserDirs and ProjectDirs snapshots resolved from the
running platform, plus small helpers for creating directories and finding
files inside them.

    from directories import ProjectDirs

    dirs = ProjectDirs.from_identifier("com", "Foo Corp", "Bar App")
    settings = dirs.place_config_file("settings.toml")

Log messages are disabled by default; call logger.enable("directories")
(loguru) to see them.
"""

from loguru import logger

from .context import Context, HomeDirNotFound
from .dirs import BaseDirs, ProjectDirs, UserDirs
from .helpers import CategoryUnavailable, create_directory, find_file, write_target
from .known_folders import KnownFolder, KnownFolderError
from .names import sanitize, strip_qualification

logger.disable(__name__)

__all__ = [
    "BaseDirs",
    "CategoryUnavailable",
    "Context",
    "HomeDirNotFound",
    "KnownFolder",
    "KnownFolderError",
    "ProjectDirs",
    "UserDirs",
    "create_directory",
    "find_file",
    "sanitize",
    "strip_qualification",
    "write_target",
]
