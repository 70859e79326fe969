from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.dependencies import get_report_service
from src.reporting.application.services import ReportService
from src.shared.http.responses import ok
from src.shared.validation import month_query, year_query

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats")
async def stats(
    month: Optional[str] = Query(default=None),
    service: ReportService = Depends(get_report_service),
):
    """Income, expenses and head-counts for one month (current month by default)."""
    return ok(await service.stats(month_query(month)))


@router.get("/monthly-chart")
async def monthly_chart(
    year: Optional[str] = Query(default=None),
    service: ReportService = Depends(get_report_service),
):
    """Twelve zero-filled months of income, expenses and profit."""
    return ok(await service.monthly_chart(year_query(year)))


@router.get("/unpaid-students")
async def unpaid_students(service: ReportService = Depends(get_report_service)):
    students = await service.unpaid_students()
    return ok([s.to_dict() for s in students])


@router.get("/top-groups")
async def top_groups(service: ReportService = Depends(get_report_service)):
    return ok(await service.top_groups())
