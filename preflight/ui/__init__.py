"""
Report rendering for the speedtest preflight check.
"""

from .report import render_report, print_report

__all__ = [
    "render_report",
    "print_report",
]
