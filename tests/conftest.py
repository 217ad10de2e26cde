import pytest
from loguru import logger

from directories.context import Context
from directories.known_folders import KnownFolder

WINDOWS_FOLDERS = {
    KnownFolder.PROFILE: "C:\\Users\\alice",
    KnownFolder.ROAMING_APP_DATA: "C:\\Users\\alice\\AppData\\Roaming",
    KnownFolder.LOCAL_APP_DATA: "C:\\Users\\alice\\AppData\\Local",
    KnownFolder.PROGRAM_DATA: "C:\\ProgramData",
    KnownFolder.MUSIC: "C:\\Users\\alice\\Music",
    KnownFolder.DESKTOP: "C:\\Users\\alice\\Desktop",
    KnownFolder.DOCUMENTS: "C:\\Users\\alice\\Documents",
    KnownFolder.DOWNLOADS: "C:\\Users\\alice\\Downloads",
    KnownFolder.PICTURES: "C:\\Users\\alice\\Pictures",
    KnownFolder.PUBLIC: "C:\\Users\\Public",
    KnownFolder.TEMPLATES: "C:\\Users\\alice\\AppData\\Roaming\\Microsoft\\Windows\\Templates",
    KnownFolder.VIDEOS: "C:\\Users\\alice\\Videos",
}


def _no_helper(category: str) -> None:
    return None


def _no_known_folder(folder: KnownFolder) -> None:
    raise AssertionError(f"unexpected known-folder query for {folder.name}")


@pytest.fixture
def make_context():
    """Build a Context from fakes so no test reads the real environment.

    Defaults: HOME=/home/alice, no xdg-user-dir helper, no password database.
    """

    def factory(
        platform="linux",
        environ=None,
        strict=False,
        home_lookup=lambda: None,
        user_dir=_no_helper,
        known_folder=_no_known_folder,
    ):
        if environ is None:
            environ = {"HOME": "/home/alice"}
        return Context(
            platform=platform,
            environ=environ,
            strict=strict,
            home_lookup=home_lookup,
            user_dir=user_dir,
            known_folder=known_folder,
        )

    return factory


@pytest.fixture
def windows_context(make_context):
    """A Windows Context whose known folders come from a dict (missing keys fail to resolve)."""

    def factory(folders=None, strict=False):
        table = dict(WINDOWS_FOLDERS if folders is None else folders)
        return make_context(platform="win32", environ={}, strict=strict, known_folder=table.get)

    return factory


@pytest.fixture
def without():
    """Copy of the fake known-folder table with the given folders removed."""

    def factory(*folders):
        return {k: v for k, v in WINDOWS_FOLDERS.items() if k not in folders}

    return factory


@pytest.fixture
def log_messages():
    """Collect messages logged by the package while the test runs."""
    messages: list[str] = []
    logger.enable("directories")
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("directories")
