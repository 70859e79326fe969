from .report_service import ReportService, payment_rate

__all__ = ["ReportService", "payment_rate"]
