"""Access to a running process by its identifier."""

from __future__ import annotations

import errno

import psutil

UNKNOWN_NAME = "Unknown"
_NAME_CAPACITY = 64
_MAX_PID = 0xFFFFFFFF


def _as_os_error(exc: psutil.Error, pid: int) -> OSError:
    if isinstance(exc, psutil.NoSuchProcess):
        return ProcessLookupError(errno.ESRCH, f"no process with pid {pid}")
    if isinstance(exc, psutil.AccessDenied):
        return PermissionError(errno.EACCES, f"access denied to process {pid}")
    return OSError(str(exc) or f"cannot query process {pid}")


class Process:
    """An opened process whose name is looked up once, when it is opened."""

    __slots__ = ("pid", "name", "_handle")

    def __init__(self, pid: int, handle: psutil.Process, name: str = UNKNOWN_NAME) -> None:
        self.pid = pid
        self.name = name
        self._handle: psutil.Process | None = handle

    @classmethod
    def open(cls, pid: int) -> "Process":
        """Open the process with the given pid; raise OSError if that fails."""
        if isinstance(pid, bool) or not isinstance(pid, int):
            raise TypeError(f"pid must be an int, not {type(pid).__name__}")
        if not 0 <= pid <= _MAX_PID:
            raise ValueError(f"pid out of range: {pid}")
        try:
            handle = psutil.Process(pid)
        except psutil.Error as exc:
            raise _as_os_error(exc, pid) from exc
        process = cls(pid, handle)
        try:
            process.name = process.get_process_name()
        except OSError:
            process.name = UNKNOWN_NAME
        return process

    @property
    def closed(self) -> bool:
        return self._handle is None

    def get_process_name(self) -> str:
        """Query the base name of the process's main module."""
        if self._handle is None:
            raise ValueError("process handle is closed")
        try:
            name = self._handle.name()
        except psutil.Error as exc:
            raise _as_os_error(exc, self.pid) from exc
        if not name:
            raise OSError(f"process {self.pid} has no module name")
        return name[:_NAME_CAPACITY]

    def close(self) -> None:
        """Release the handle; further queries raise ValueError."""
        self._handle = None

    def __enter__(self) -> "Process":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Process(pid={self.pid}, name={self.name!r})"