"""Platform resolver interface and selection.

A resolver turns a Context into populated snapshots. There is one resolver
per platform family, picked at runtime from context.platform. Resolvers share
the interface only; none of them derives from another.
"""

from typing import TYPE_CHECKING, Protocol

from .context import Context

if TYPE_CHECKING:
    from .dirs import BaseDirs, ProjectDirs, UserDirs
    from .helpers import StrPath


class Resolver(Protocol):
    def base_dirs(self, context: Context) -> "BaseDirs": ...

    def user_dirs(self, context: Context) -> "UserDirs": ...

    def project_dirs(self, context: Context, project_path: "StrPath") -> "ProjectDirs":
        """Project directories scoped under `project_path`, parsed with this platform's path rules."""
        ...


def resolver_for(context: Context) -> Resolver:
    """Return the resolver matching context.platform."""
    family = context.family
    if family == "windows":
        from .windows import WindowsResolver

        return WindowsResolver()
    if family == "macos":
        from .macos import MacOSResolver

        return MacOSResolver()
    from .unix import UnixResolver

    return UnixResolver()
