"""XDG base directories and user directories for Linux and other unix systems.

Base directories come from the XDG_* environment variables, falling back to
the defaults of the XDG Base Directory Specification. An override is only
accepted when it is an absolute path. User directories are asked from the
`xdg-user-dir` helper, one category at a time.
"""

from pathlib import Path

from .context import Context
from .dirs import BaseDirs, ProjectDirs, UserDirs
from .helpers import StrPath

DEFAULT_CONFIG_DIRS = "/etc/xdg"
DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"

# UserDirs field -> xdg-user-dir keyword
USER_DIR_KEYWORDS = {
    "audio_dir": "MUSIC",
    "desktop_dir": "DESKTOP",
    "document_dir": "DOCUMENTS",
    "download_dir": "DOWNLOAD",
    "picture_dir": "PICTURES",
    "public_dir": "PUBLICSHARE",
    "template_dir": "TEMPLATES",
    "video_dir": "VIDEOS",
}


def _search_dirs(context: Context, name: str, default: str) -> tuple[Path, ...]:
    """Absolute entries of a colon-separated XDG_*_DIRS variable; relative entries are skipped."""
    value = context.environ.get(name) or default
    return tuple(Path(entry) for entry in value.split(":") if entry and Path(entry).is_absolute())


def _user_dir(context: Context, keyword: str) -> Path | None:
    value = context.user_dir(keyword)
    if not value:
        return None
    path = Path(value)
    return path if path.is_absolute() else None


class UnixResolver:
    def base_dirs(self, context: Context) -> BaseDirs:
        home = context.home_dir()
        data_dir = context.absolute_env("XDG_DATA_HOME") or home / ".local" / "share"
        return BaseDirs(
            home_dir=home,
            cache_dir=context.absolute_env("XDG_CACHE_HOME") or home / ".cache",
            config_dir=context.absolute_env("XDG_CONFIG_HOME") or home / ".config",
            data_dir=data_dir,
            data_local_dir=data_dir,
            executable_dir=context.absolute_env("XDG_BIN_HOME") or data_dir.parent / "bin",
            runtime_dir=context.absolute_env("XDG_RUNTIME_DIR"),
            state_dir=context.absolute_env("XDG_STATE_HOME") or home / ".local" / "state",
            config_search_dirs=_search_dirs(context, "XDG_CONFIG_DIRS", DEFAULT_CONFIG_DIRS),
            data_search_dirs=_search_dirs(context, "XDG_DATA_DIRS", DEFAULT_DATA_DIRS),
        )

    def user_dirs(self, context: Context) -> UserDirs:
        home = context.home_dir()
        data_dir = context.absolute_env("XDG_DATA_HOME") or home / ".local" / "share"
        found = {field: _user_dir(context, keyword) for field, keyword in USER_DIR_KEYWORDS.items()}
        return UserDirs(home_dir=home, font_dir=data_dir / "fonts", **found)

    def project_dirs(self, context: Context, project_path: StrPath) -> ProjectDirs:
        project_path = Path(project_path)
        base = self.base_dirs(context)
        return ProjectDirs(
            project_path=project_path,
            cache_dir=base.cache_dir / project_path,
            config_dir=base.config_dir / project_path,
            data_dir=base.data_dir / project_path,
            data_local_dir=base.data_local_dir / project_path,
            runtime_dir=base.runtime_dir / project_path if base.runtime_dir else None,
            state_dir=base.state_dir / project_path if base.state_dir else None,
            config_search_dirs=tuple(d / project_path for d in base.config_search_dirs),
            data_search_dirs=tuple(d / project_path for d in base.data_search_dirs),
        )
