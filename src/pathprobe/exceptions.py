"""Custom exception hierarchy for pathprobe."""


class PathProbeError(Exception):
    """Base exception for all pathprobe errors."""


class ReportError(PathProbeError):
    """Raised when a permission report cannot be assembled as a whole.

    Individual path failures never raise; they are recorded on the
    per-path result. This covers faults in the aggregation step itself.
    """

    def __init__(self, message: str, details: str = "") -> None:
        super().__init__(message)
        self.details = details


class ConfigurationError(PathProbeError):
    """Raised when an environment setting has an invalid value."""
