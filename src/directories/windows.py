"""Standard directories on Windows, from the shell's known folders.

Profile, RoamingAppData and LocalAppData have to resolve: without them there
is no home, config or data directory to hand out. Every other folder is
optional and becomes None when the shell cannot resolve it, unless the
context is strict, in which case KnownFolderError is raised instead.

Paths are parsed with Windows rules whatever the host: on Windows they are
concrete Path objects, elsewhere (a win32 Context used on another system)
PureWindowsPath values that can be compared but not touched on disk.
"""

import os
from pathlib import Path, PurePath, PureWindowsPath

from loguru import logger

from .context import Context, HomeDirNotFound
from .dirs import BaseDirs, ProjectDirs, UserDirs
from .helpers import StrPath
from .known_folders import KnownFolder, KnownFolderError

USER_FOLDERS = {
    "audio_dir": KnownFolder.MUSIC,
    "desktop_dir": KnownFolder.DESKTOP,
    "document_dir": KnownFolder.DOCUMENTS,
    "download_dir": KnownFolder.DOWNLOADS,
    "picture_dir": KnownFolder.PICTURES,
    "public_dir": KnownFolder.PUBLIC,
    "template_dir": KnownFolder.TEMPLATES,
    "video_dir": KnownFolder.VIDEOS,
}


def windows_path(value: StrPath) -> PurePath:
    """Parse `value` with Windows path rules, as a concrete Path when running on Windows."""
    if os.name == "nt":
        return Path(value)
    return PureWindowsPath(value)


def _lookup(context: Context, folder: KnownFolder) -> PurePath | None:
    value = context.known_folder(folder)
    if not value:
        return None
    path = windows_path(value)
    if not path.is_absolute():
        logger.debug(f"Known folder {folder.name} resolved to relative path {value!r}, ignoring it")
        return None
    return path


def _required(context: Context, folder: KnownFolder) -> PurePath:
    path = _lookup(context, folder)
    if path is None:
        raise KnownFolderError(folder)
    return path


def _optional(context: Context, folder: KnownFolder) -> PurePath | None:
    path = _lookup(context, folder)
    if path is None and context.strict:
        raise KnownFolderError(folder)
    return path


def _home(context: Context) -> PurePath:
    home = _lookup(context, KnownFolder.PROFILE)
    if home is None:
        raise HomeDirNotFound("the Profile known folder could not be resolved")
    return home


def _program_data(context: Context) -> tuple[PurePath, ...]:
    program_data = _optional(context, KnownFolder.PROGRAM_DATA)
    return (program_data,) if program_data is not None else ()


class WindowsResolver:
    def base_dirs(self, context: Context) -> BaseDirs:
        home = _home(context)
        roaming = _required(context, KnownFolder.ROAMING_APP_DATA)
        local = _required(context, KnownFolder.LOCAL_APP_DATA)
        search_dirs = _program_data(context)
        return BaseDirs(
            home_dir=home,
            cache_dir=local,
            config_dir=roaming,
            data_dir=roaming,
            data_local_dir=local,
            config_search_dirs=search_dirs,
            data_search_dirs=search_dirs,
        )

    def user_dirs(self, context: Context) -> UserDirs:
        home = _home(context)
        found = {field: _optional(context, folder) for field, folder in USER_FOLDERS.items()}
        return UserDirs(home_dir=home, **found)

    def project_dirs(self, context: Context, project_path: StrPath) -> ProjectDirs:
        project_path = windows_path(project_path)
        roaming = _required(context, KnownFolder.ROAMING_APP_DATA) / project_path
        local = _required(context, KnownFolder.LOCAL_APP_DATA) / project_path
        program_data = tuple(d / project_path for d in _program_data(context))
        return ProjectDirs(
            project_path=project_path,
            cache_dir=local / "cache",
            config_dir=roaming / "config",
            data_dir=roaming / "data",
            data_local_dir=local / "data",
            config_search_dirs=tuple(d / "config" for d in program_data),
            data_search_dirs=tuple(d / "data" for d in program_data),
        )
