from .entities import Group, GroupDetail, GroupSummary, PaymentStatus, Student

__all__ = ["Group", "GroupDetail", "GroupSummary", "PaymentStatus", "Student"]
