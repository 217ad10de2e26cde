"""Turning an application identifier into a path fragment.

An application is identified by a (qualifier, organization, application)
triple such as ("com", "Foo Corp", "Bar App"). Each platform family has its
own convention for the directory name derived from it:

- unix:    "bar-app"               (application only, lowercased, words joined by "-")
- macos:   "com.Foo-Corp.Bar-App"  (reverse-DNS bundle identifier)
- windows: "Foo Corp\\Bar App"     (organization and application as nested folders)
"""

import re
import sys
from pathlib import PureWindowsPath

from .context import platform_family

_WHITESPACE = re.compile(r"\s")


def lowercase_hyphenated(name: str) -> str:
    """Lowercase every whitespace-separated word of `name` and join them with hyphens."""
    return "-".join(word.lower() for word in name.split())


def bundle_identifier(qualifier: str, organization: str, application: str) -> str:
    """Join the non-empty parts with dots, after replacing whitespace by hyphens."""
    organization = _WHITESPACE.sub("-", organization)
    application = _WHITESPACE.sub("-", application)
    return ".".join(part for part in (qualifier, organization, application) if part)


def windows_fragment(organization: str, application: str) -> str:
    """Organization and application as successive folder names, kept verbatim."""
    parts = [part for part in (organization, application) if part]
    return str(PureWindowsPath(*parts)) if parts else ""


def sanitize(qualifier: str, organization: str, application: str, platform: str | None = None) -> str:
    """Derive the project fragment for `platform` (defaults to the running one)."""
    family = platform_family(platform if platform is not None else sys.platform)
    if family == "windows":
        return windows_fragment(organization, application)
    if family == "macos":
        return bundle_identifier(qualifier, organization, application)
    return lowercase_hyphenated(application)


def strip_qualification(name: str) -> str:
    """Everything after the last dot: "org.foo.BarApp" -> "BarApp"."""
    return name.rpartition(".")[2]
