"""Windows known-folder lookup through the shell API.

SHGetKnownFolderPath hands back a wide string allocated with CoTaskMemAlloc.
The caller owns that buffer and has to release it with CoTaskMemFree whether
the call succeeded or not, so the whole exchange lives inside one scoped
acquisition (`_co_task_string`) whose `finally` always frees the buffer.

The shell32/ole32 handles are loaded lazily, so importing this module is safe
on every platform; only calling `known_folder` requires Windows.
"""

import ctypes
import uuid
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator, Self

from loguru import logger


class GUID(ctypes.Structure):
    _fields_ = [
        ("Data1", ctypes.c_uint32),
        ("Data2", ctypes.c_uint16),
        ("Data3", ctypes.c_uint16),
        ("Data4", ctypes.c_ubyte * 8),
    ]

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> Self:
        data4 = (ctypes.c_ubyte * 8).from_buffer_copy(value.bytes[8:])
        return cls(value.time_low, value.time_mid, value.time_hi_version, data4)


class KnownFolder(Enum):
    """KNOWNFOLDERID constants used by the Windows resolver."""

    PROFILE = "5E6C858F-0E22-4760-9AFE-EA3317B67173"
    ROAMING_APP_DATA = "3EB685DB-65F9-4CF6-A03A-E3EF65729F3D"
    LOCAL_APP_DATA = "F1B32785-6FBA-4FCF-9D55-7B8E7F157091"
    PROGRAM_DATA = "62AB5D82-FDC1-4DC3-A9DD-070D1D495D97"
    MUSIC = "4BD8D571-6D19-48D3-BE97-422220080E43"
    DESKTOP = "B4BFCC3A-DB2C-424C-B029-7FE99A87C641"
    DOCUMENTS = "FDD39AD0-238F-46AF-ADB4-6C85480369C7"
    DOWNLOADS = "374DE290-123F-4565-9164-39C4925E467B"
    PICTURES = "33E28130-4E1E-4676-835A-98395C3BC3BB"
    PUBLIC = "DFDF76A2-C82A-4D63-906A-5644AC457385"
    TEMPLATES = "A63293E8-664E-48DB-A079-DF759E0509F7"
    VIDEOS = "18989B1D-99B5-455B-841C-AB7C74E4DDFC"

    def guid(self) -> GUID:
        return GUID.from_uuid(uuid.UUID(self.value))


class KnownFolderError(OSError):
    """Raised when a known folder that has to exist cannot be resolved."""

    def __init__(self, folder: KnownFolder) -> None:
        self.folder = folder
        super().__init__(f"Windows known folder {folder.name} ({{{folder.value}}}) could not be resolved")


def _load_libraries() -> tuple[Any, Any]:
    """Return (shell32, ole32) with argument types declared. Windows only."""
    shell32 = ctypes.windll.shell32  # type: ignore[attr-defined]
    ole32 = ctypes.windll.ole32  # type: ignore[attr-defined]
    shell32.SHGetKnownFolderPath.argtypes = [
        ctypes.POINTER(GUID),
        ctypes.c_uint32,
        ctypes.c_void_p,
        ctypes.POINTER(ctypes.c_wchar_p),
    ]
    shell32.SHGetKnownFolderPath.restype = ctypes.c_long
    ole32.CoTaskMemFree.argtypes = [ctypes.c_void_p]
    ole32.CoTaskMemFree.restype = None
    return shell32, ole32


@contextmanager
def _co_task_string(shell32: Any, ole32: Any, folder: KnownFolder) -> Iterator[tuple[int, str | None]]:
    """Yield (HRESULT, path) for `folder`, freeing the OS buffer on exit no matter what."""
    guid = folder.guid()
    buffer = ctypes.c_wchar_p()
    try:
        result = shell32.SHGetKnownFolderPath(ctypes.byref(guid), 0, None, ctypes.byref(buffer))
        yield result, buffer.value
    finally:
        # SHGetKnownFolderPath allocates even on failure; freeing NULL is a no-op.
        ole32.CoTaskMemFree(buffer)


def known_folder(folder: KnownFolder) -> str | None:
    """Return the path of `folder`, or None if the shell cannot resolve it."""
    shell32, ole32 = _load_libraries()
    with _co_task_string(shell32, ole32, folder) as (result, path):
        if result != 0:
            logger.debug(f"SHGetKnownFolderPath({folder.name}) failed with HRESULT {result & 0xFFFFFFFF:#010x}")
            return None
        return path or None
