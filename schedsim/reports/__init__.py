"""Report formatting and output."""

from .report_writer import format_report, write_report

__all__ = ["format_report", "write_report"]
