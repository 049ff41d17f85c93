"""Filesystem layer: permission probes, report aggregation, result types."""

from pathprobe.exceptions import ConfigurationError, PathProbeError, ReportError
from pathprobe.fs.permissions import (
    PATH_NOT_FOUND_MESSAGE,
    check_permissions,
    probe_read,
    probe_write,
)
from pathprobe.fs.report import (
    DEFAULT_REPORT_PATHS,
    REPORT_TITLE,
    default_report_paths,
    run_report,
)
from pathprobe.fs.types import PathType, PermissionReport, PermissionResult, ProbeResult

__all__ = [
    "DEFAULT_REPORT_PATHS",
    "PATH_NOT_FOUND_MESSAGE",
    "REPORT_TITLE",
    "ConfigurationError",
    "PathProbeError",
    "PathType",
    "PermissionReport",
    "PermissionResult",
    "ProbeResult",
    "ReportError",
    "check_permissions",
    "default_report_paths",
    "probe_read",
    "probe_write",
    "run_report",
]
