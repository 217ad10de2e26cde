"""Read-only resolution context.

Every resolver reads the outside world through a Context: the environment
mapping, the running platform, and three lookup callables: the
password-database home, the `xdg-user-dir` helper and the Windows known-folder
query.
Tests build a Context with fakes instead of touching the real process state.

Context.from_environment() follows the usual precedence:
explicit argument > environment variable > default.

- platform: argument > sys.platform
- strict:   argument > DIRECTORIES_STRICT > False
- environ:  argument > the live os.environ
"""

import os
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Self

from loguru import logger

from .known_folders import KnownFolder, known_folder

STRICT_ENV = "DIRECTORIES_STRICT"
USER_DIR_HELPER = "xdg-user-dir"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class HomeDirNotFound(RuntimeError):
    """Raised when the home directory cannot be determined. Nothing else can be resolved without it."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Could not determine the home directory: {detail}")


def platform_family(platform: str) -> str:
    """Map a sys.platform value to "windows", "macos" or "unix"."""
    if platform.startswith(("win32", "cygwin")):
        return "windows"
    if platform == "darwin":
        return "macos"
    return "unix"


def passwd_home() -> str | None:
    """Home directory of the current user from the password database, if there is one."""
    try:
        import pwd
    except ImportError:
        return None
    try:
        return pwd.getpwuid(os.getuid()).pw_dir or None
    except KeyError:
        return None


def query_user_dir(category: str) -> str | None:
    """Ask `xdg-user-dir` for a user directory. Returns None if the helper is missing or fails."""
    try:
        completed = subprocess.run([USER_DIR_HELPER, category], capture_output=True, check=False)
    except OSError as e:
        logger.debug(f"{USER_DIR_HELPER} {category}: helper unavailable ({e})")
        return None
    if completed.returncode != 0:
        logger.debug(f"{USER_DIR_HELPER} {category}: exited with status {completed.returncode}")
        return None
    output = os.fsdecode(completed.stdout)
    if output.endswith("\n"):
        output = output[:-1]
    return output or None


@dataclass(frozen=True)
class Context:
    """Everything a resolver is allowed to read."""

    platform: str
    environ: Mapping[str, str]
    strict: bool = False
    home_lookup: Callable[[], str | None] = field(default=passwd_home, repr=False)
    user_dir: Callable[[str], str | None] = field(default=query_user_dir, repr=False)
    known_folder: Callable[[KnownFolder], str | None] = field(default=known_folder, repr=False)

    @classmethod
    def from_environment(
        cls,
        platform: str | None = None,
        strict: bool | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Self:
        """Build a Context for the running process.

        Args:
            platform: sys.platform-style name (defaults to sys.platform)
            strict: raise on unavailable optional Windows folders (defaults to DIRECTORIES_STRICT)
            environ: environment mapping (defaults to os.environ, read live)
        """
        if environ is None:
            environ = os.environ
        if platform is None:
            platform = sys.platform
        if strict is None:
            strict = environ.get(STRICT_ENV, "").strip().lower() in _TRUTHY
        return cls(platform=platform, environ=environ, strict=strict)

    @property
    def family(self) -> str:
        return platform_family(self.platform)

    def absolute_env(self, name: str) -> Path | None:
        """Value of environment variable `name` as a Path, only if it is set and absolute."""
        value = self.environ.get(name)
        if not value:
            return None
        path = Path(value)
        if not path.is_absolute():
            logger.debug(f"Ignoring {name}={value!r}: not an absolute path")
            return None
        return path

    def home_dir(self) -> Path:
        """Resolve the home directory: HOME if absolute, then the password database.

        Raises:
            HomeDirNotFound: If neither source yields an absolute path
        """
        home = self.absolute_env("HOME")
        if home is not None:
            return home
        fallback = self.home_lookup()
        if fallback and Path(fallback).is_absolute():
            return Path(fallback)
        raise HomeDirNotFound("HOME is unset or relative and the password database has no entry")
