"""Result types: PermissionResult, PermissionReport, ProbeResult."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class PathType(str, Enum):
    """Kind of filesystem entry found at a probed path."""

    FILE = "File"
    FOLDER = "Folder"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a single filesystem probe."""

    success: bool
    message: str


@dataclass(frozen=True)
class PermissionResult:
    """Existence, type and access flags for one path."""

    path: str
    type: PathType = PathType.UNKNOWN
    exists: bool = False
    can_read: bool = False
    can_write: bool = False
    error: str | None = None


@dataclass
class PermissionReport:
    """Permission results for a set of paths, in input order."""

    report_title: str
    generated_at: datetime
    results: list[PermissionResult] = field(default_factory=list)
