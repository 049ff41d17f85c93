"""Per-path permission checks.

Each probe (existence, read, write) runs off the event loop and is
independent of the others: a path can exist, be readable and still not be
writable. Probes report their outcome as a :class:`ProbeResult` value, and
:func:`check_permissions` folds them into a :class:`PermissionResult`
without ever raising.
"""

from __future__ import annotations

import asyncio
import os
import stat

from .types import PathType, PermissionResult, ProbeResult

PATH_NOT_FOUND_MESSAGE = "Path does not exist."


async def _probe_access(path: str, mode: int, label: str) -> ProbeResult:
    try:
        allowed = await asyncio.to_thread(os.access, path, mode)
    except (OSError, ValueError) as e:
        return ProbeResult(success=False, message=f"Cannot check {label} access: {e}")
    if not allowed:
        return ProbeResult(success=False, message=f"No {label} access: {path}")
    return ProbeResult(success=True, message=f"{label.capitalize()} access granted: {path}")


async def probe_read(path: str) -> ProbeResult:
    """Check whether the current process may read *path*."""
    return await _probe_access(path, os.R_OK, "read")


async def probe_write(path: str) -> ProbeResult:
    """Check whether the current process may write *path*."""
    return await _probe_access(path, os.W_OK, "write")


async def check_permissions(path: str) -> PermissionResult:
    """Probe existence, type and read/write access for *path*.

    Relative paths are resolved against the current working directory.
    Failures are encoded in the returned result; ``error`` is only set when
    the existence probe itself fails.
    """
    path = os.path.abspath(path)

    try:
        st = await asyncio.to_thread(os.stat, path)
    except FileNotFoundError:
        return PermissionResult(path=path, error=PATH_NOT_FOUND_MESSAGE)
    except (OSError, ValueError) as e:
        return PermissionResult(path=path, error=f"Error accessing path: {e}")

    path_type = PathType.FOLDER if stat.S_ISDIR(st.st_mode) else PathType.FILE

    read = await probe_read(path)
    write = await probe_write(path)

    return PermissionResult(
        path=path,
        type=path_type,
        exists=True,
        can_read=read.success,
        can_write=write.success,
    )
