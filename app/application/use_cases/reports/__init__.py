"""Use cases for violation reports."""

from .create_report import create_report
from .list_reports import list_reports
from .update_report_status import update_report_status

__all__ = ["create_report", "list_reports", "update_report_status"]
