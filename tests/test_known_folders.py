"""Tests for the known-folder query, with shell32/ole32 replaced by fakes."""

import ctypes
import uuid

import pytest

from directories import known_folders
from directories.known_folders import GUID, KnownFolder, KnownFolderError, known_folder


class FakeShell32:
    def __init__(self, result=0, path="C:\\Users\\alice", error=None):
        self.result = result
        self.path = path
        self.error = error
        self.requested = []

    def SHGetKnownFolderPath(self, guid_ref, flags, token, path_ref):
        self.requested.append(guid_ref._obj)
        if self.error is not None:
            raise self.error
        if self.path is not None:
            path_ref._obj.value = self.path
        return self.result


class FakeOle32:
    def __init__(self):
        self.freed = []

    def CoTaskMemFree(self, buffer):
        self.freed.append(buffer)


@pytest.fixture
def fake_libraries(monkeypatch):
    def install(**shell_kwargs):
        shell32 = FakeShell32(**shell_kwargs)
        ole32 = FakeOle32()
        monkeypatch.setattr(known_folders, "_load_libraries", lambda: (shell32, ole32))
        return shell32, ole32

    return install


def test_success_returns_path_and_frees_buffer(fake_libraries):
    """Test that a successful query returns the path and frees the shell buffer."""
    shell32, ole32 = fake_libraries(path="C:\\Users\\alice\\Music")

    assert known_folder(KnownFolder.MUSIC) == "C:\\Users\\alice\\Music"
    assert len(shell32.requested) == 1
    assert len(ole32.freed) == 1


def test_failure_returns_none_and_frees_buffer(fake_libraries):
    """Test that a failing HRESULT gives None and the buffer is still freed."""
    # E_FAIL, as the signed HRESULT ctypes hands back
    shell32, ole32 = fake_libraries(result=-2147467259, path=None)

    assert known_folder(KnownFolder.DOWNLOADS) is None
    assert len(ole32.freed) == 1


def test_exception_still_frees_buffer(fake_libraries):
    """Test that the buffer is freed when the call itself raises."""
    shell32, ole32 = fake_libraries(error=OSError("access violation"))

    with pytest.raises(OSError, match="access violation"):
        known_folder(KnownFolder.PROFILE)
    assert len(ole32.freed) == 1


def test_requested_guid_matches_folder(fake_libraries):
    """Test that the GUID passed to the shell matches the folder id."""
    shell32, _ = fake_libraries()

    known_folder(KnownFolder.PROFILE)

    guid = shell32.requested[0]
    expected = uuid.UUID(KnownFolder.PROFILE.value)
    assert guid.Data1 == expected.time_low
    assert guid.Data2 == expected.time_mid
    assert guid.Data3 == expected.time_hi_version
    assert bytes(guid.Data4) == expected.bytes[8:]


def test_guid_layout():
    """Test that GUID has the 16-byte Windows layout."""
    assert ctypes.sizeof(GUID) == 16


def test_known_folder_error_message():
    """Test that KnownFolderError is an OSError naming the folder and its GUID."""
    error = KnownFolderError(KnownFolder.ROAMING_APP_DATA)
    assert isinstance(error, OSError)
    assert "ROAMING_APP_DATA" in str(error)
    assert "{3EB685DB-65F9-4CF6-A03A-E3EF65729F3D}" in str(error)
