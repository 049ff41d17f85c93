"""pathprobe: a small HTTP service that reports file system permissions.

Concurrent permission probes on a fixed path set, plus a CPU-bound route
that shows what blocking the event loop does to everything else.
"""

__version__ = "0.1.0"

from pathprobe.app import create_app
from pathprobe.config import Settings
from pathprobe.exceptions import ConfigurationError, PathProbeError, ReportError
from pathprobe.fs.permissions import check_permissions
from pathprobe.fs.report import DEFAULT_REPORT_PATHS, run_report
from pathprobe.fs.types import PathType, PermissionReport, PermissionResult, ProbeResult
from pathprobe.load import LoadResult, run_synthetic_load

__all__ = [
    "DEFAULT_REPORT_PATHS",
    "ConfigurationError",
    "LoadResult",
    "PathProbeError",
    "PathType",
    "PermissionReport",
    "PermissionResult",
    "ProbeResult",
    "ReportError",
    "Settings",
    "__version__",
    "check_permissions",
    "create_app",
    "run_report",
    "run_synthetic_load",
]
