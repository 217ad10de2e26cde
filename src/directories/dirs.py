"""Directory snapshots.

Three immutable value types hold the result of one resolution:

- BaseDirs:    per-user locations shared by all applications (cache, config, data, ...)
- UserDirs:    user-facing folders (documents, music, pictures, ...)
- ProjectDirs: base locations scoped to one application

A snapshot is computed once, from the Context at call time, and never changes
afterwards. Optional fields are None when the platform or environment has no
value for them. Every path that is present is absolute.
"""

from dataclasses import dataclass
from pathlib import Path

from . import helpers
from .context import Context
from .helpers import CategoryUnavailable, StrPath
from .names import sanitize, strip_qualification
from .resolver import resolver_for


def _context(context: Context | None) -> Context:
    return context if context is not None else Context.from_environment()


@dataclass(frozen=True)
class BaseDirs:
    home_dir: Path
    cache_dir: Path
    config_dir: Path
    data_dir: Path
    data_local_dir: Path
    executable_dir: Path | None = None
    runtime_dir: Path | None = None
    state_dir: Path | None = None
    config_search_dirs: tuple[Path, ...] = ()
    data_search_dirs: tuple[Path, ...] = ()

    @classmethod
    def new(cls, context: Context | None = None) -> "BaseDirs":
        """Resolve the base directories of the current user.

        Raises:
            HomeDirNotFound: If the home directory cannot be determined
        """
        context = _context(context)
        return resolver_for(context).base_dirs(context)

    def create_config_directory(self, path: StrPath) -> Path:
        return helpers.create_directory(self.config_dir, path)

    def create_data_directory(self, path: StrPath) -> Path:
        return helpers.create_directory(self.data_dir, path)

    def create_cache_directory(self, path: StrPath) -> Path:
        return helpers.create_directory(self.cache_dir, path)

    def create_state_directory(self, path: StrPath) -> Path:
        """Create a directory under state_dir. Raises CategoryUnavailable where there is none."""
        if self.state_dir is None:
            raise CategoryUnavailable("state")
        return helpers.create_directory(self.state_dir, path)

    def create_runtime_directory(self, path: StrPath) -> Path:
        """Create a directory under runtime_dir. Raises CategoryUnavailable where there is none."""
        if self.runtime_dir is None:
            raise CategoryUnavailable("runtime")
        return helpers.create_directory(self.runtime_dir, path)


@dataclass(frozen=True)
class UserDirs:
    home_dir: Path
    audio_dir: Path | None = None
    desktop_dir: Path | None = None
    document_dir: Path | None = None
    download_dir: Path | None = None
    font_dir: Path | None = None
    picture_dir: Path | None = None
    public_dir: Path | None = None
    template_dir: Path | None = None
    video_dir: Path | None = None

    @classmethod
    def new(cls, context: Context | None = None) -> "UserDirs":
        """Resolve the user-facing directories of the current user.

        Raises:
            HomeDirNotFound: If the home directory cannot be determined
        """
        context = _context(context)
        return resolver_for(context).user_dirs(context)


@dataclass(frozen=True)
class ProjectDirs:
    """Base directories scoped to one application.

    On unix and macOS every path is the matching BaseDirs path joined with
    project_path. Windows nests an extra "cache", "config" or "data" folder
    below the fragment. On Windows the paths follow Windows rules even when
    a win32 Context is resolved elsewhere (see directories.windows).
    """

    project_path: Path
    cache_dir: Path
    config_dir: Path
    data_dir: Path
    data_local_dir: Path
    runtime_dir: Path | None = None
    state_dir: Path | None = None
    config_search_dirs: tuple[Path, ...] = ()
    data_search_dirs: tuple[Path, ...] = ()

    @classmethod
    def from_path(cls, project_path: StrPath, context: Context | None = None) -> "ProjectDirs":
        """Use `project_path` as the fragment, verbatim.

        Nothing is sanitized, so the result does not follow any platform's
        naming convention. Prefer from_identifier() for portable code.
        """
        context = _context(context)
        return resolver_for(context).project_dirs(context, project_path)

    @classmethod
    def from_identifier(
        cls, qualifier: str, organization: str, application: str, context: Context | None = None
    ) -> "ProjectDirs":
        """Derive the fragment from a (qualifier, organization, application) triple.

        Example: ("com", "Foo Corp", "Bar App") gives "bar-app" on unix,
        "com.Foo-Corp.Bar-App" on macOS and "Foo Corp\\Bar App" on Windows.

        Raises:
            ValueError: If the identifier yields an empty fragment (for example a
                blank application name on unix), which would put the project
                directly into the shared base directories
        """
        context = _context(context)
        fragment = sanitize(qualifier, organization, application, context.platform)
        if not fragment:
            raise ValueError(
                f"Identifier ({qualifier!r}, {organization!r}, {application!r}) gives an empty project name"
            )
        return resolver_for(context).project_dirs(context, fragment)

    @classmethod
    def from_project_name(cls, name: str, context: Context | None = None) -> "ProjectDirs":
        """Derive the fragment from a bare application name. Raises ValueError if it is blank."""
        return cls.from_identifier("", "", name, context)

    @classmethod
    def from_qualified_name(cls, qualified_name: str, context: Context | None = None) -> "ProjectDirs":
        """Derive the fragment from a dotted name such as "org.foo.BarApp", keeping only "BarApp".

        Raises ValueError when nothing is left, as with "org.foo." or a blank name.
        """
        return cls.from_project_name(strip_qualification(qualified_name), context)

    def find_config_file(self, path: StrPath) -> Path | None:
        """Find `path` in config_dir, then in the system config search dirs."""
        return helpers.find_file(self.config_dir, self.config_search_dirs, path)

    def find_data_file(self, path: StrPath) -> Path | None:
        """Find `path` in data_dir, then in the system data search dirs."""
        return helpers.find_file(self.data_dir, self.data_search_dirs, path)

    def place_config_file(self, path: StrPath) -> Path:
        return helpers.write_target(self.config_dir, path)

    def place_data_file(self, path: StrPath) -> Path:
        return helpers.write_target(self.data_dir, path)
