"""Output sinks.

This package provides:
- render_report: pretty JSON rendering of a Report
- write_report: write a Report to a file or stdout
"""

from solacc.storage.report import render_report, write_report

__all__ = [
    "render_report",
    "write_report",
]
