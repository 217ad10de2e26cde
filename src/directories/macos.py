"""Standard directories on macOS.

Everything is a fixed location under the home directory (or /Library for the
system-wide search dirs); no environment variable besides HOME is read.
"""

from pathlib import Path

from .context import Context
from .dirs import BaseDirs, ProjectDirs, UserDirs
from .helpers import StrPath

SYSTEM_LIBRARY = Path("/Library")


class MacOSResolver:
    def base_dirs(self, context: Context) -> BaseDirs:
        home = context.home_dir()
        library = home / "Library"
        return BaseDirs(
            home_dir=home,
            cache_dir=library / "Caches",
            config_dir=library / "Preferences",
            data_dir=library / "Application Support",
            data_local_dir=library / "Application Support",
            config_search_dirs=(SYSTEM_LIBRARY / "Preferences",),
            data_search_dirs=(SYSTEM_LIBRARY / "Application Support",),
        )

    def user_dirs(self, context: Context) -> UserDirs:
        home = context.home_dir()
        return UserDirs(
            home_dir=home,
            audio_dir=home / "Music",
            desktop_dir=home / "Desktop",
            document_dir=home / "Documents",
            download_dir=home / "Downloads",
            font_dir=home / "Library" / "Fonts",
            picture_dir=home / "Pictures",
            public_dir=home / "Public",
            video_dir=home / "Movies",
        )

    def project_dirs(self, context: Context, project_path: StrPath) -> ProjectDirs:
        project_path = Path(project_path)
        base = self.base_dirs(context)
        return ProjectDirs(
            project_path=project_path,
            cache_dir=base.cache_dir / project_path,
            config_dir=base.config_dir / project_path,
            data_dir=base.data_dir / project_path,
            data_local_dir=base.data_local_dir / project_path,
            config_search_dirs=tuple(d / project_path for d in base.config_search_dirs),
            data_search_dirs=tuple(d / project_path for d in base.data_search_dirs),
        )
