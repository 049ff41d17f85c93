"""Pydantic response schemas for the HTTP routes.

Fields are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pathprobe.fs.types import PathType, PermissionReport, PermissionResult
from pathprobe.load import LOAD_MESSAGE, LoadResult


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EndpointsInfo(CamelModel):
    demo: str
    cpu: str


class WelcomeResponse(CamelModel):
    message: str
    endpoints: EndpointsInfo


class PermissionResultResponse(CamelModel):
    """One path's entry in the report. ``error`` is omitted when unset."""

    path: str
    type: PathType
    exists: bool
    can_read: bool
    can_write: bool
    error: str | None = None

    @classmethod
    def from_result(cls, result: PermissionResult) -> PermissionResultResponse:
        return cls(
            path=result.path,
            type=result.type,
            exists=result.exists,
            can_read=result.can_read,
            can_write=result.can_write,
            error=result.error,
        )


class ReportResponse(CamelModel):
    report_title: str
    generated_at: datetime
    results: list[PermissionResultResponse]

    @classmethod
    def from_report(cls, report: PermissionReport) -> ReportResponse:
        return cls(
            report_title=report.report_title,
            generated_at=report.generated_at,
            results=[PermissionResultResponse.from_result(r) for r in report.results],
        )


class LoadResponse(CamelModel):
    message: str = LOAD_MESSAGE
    duration_seconds: float
    calculation_result: float

    @classmethod
    def from_load(cls, result: LoadResult) -> LoadResponse:
        return cls(
            duration_seconds=result.duration_seconds,
            calculation_result=result.calculation_result,
        )


class ErrorResponse(CamelModel):
    error: str
    details: str
