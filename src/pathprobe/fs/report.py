"""Concurrent permission report over a fixed set of paths."""

from __future__ import annotations

import asyncio
import logging
import os
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pathprobe.exceptions import ReportError
from .permissions import check_permissions
from .types import PermissionReport

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from .types import PermissionResult

logger = logging.getLogger(__name__)

REPORT_TITLE = "File System Permission Report"

# Working directory, project manifest, build output, a missing file and a
# path the running user normally cannot read.
DEFAULT_REPORT_PATHS: tuple[str, ...] = (
    ".",
    "pyproject.toml",
    "dist",
    "non-existent-file.txt",
    "/root/secret.txt",
)


def default_report_paths() -> list[str]:
    """Return :data:`DEFAULT_REPORT_PATHS` as absolute paths."""
    return [os.path.abspath(p) for p in DEFAULT_REPORT_PATHS]


async def run_report(
    paths: Sequence[str],
    *,
    title: str = REPORT_TITLE,
    checker: Callable[[str], Awaitable[PermissionResult]] = check_permissions,
) -> PermissionReport:
    """Check every path concurrently and collect the results in input order.

    Raises:
        ReportError: if the checks cannot complete as a group.
    """
    logger.debug("Checking permissions for %d paths", len(paths))
    try:
        results = await asyncio.gather(*(checker(p) for p in paths))
    except Exception as e:
        raise ReportError("Failed to generate permission report.", details=str(e)) from e

    return PermissionReport(
        report_title=title,
        generated_at=datetime.now(UTC),
        results=list(results),
    )
