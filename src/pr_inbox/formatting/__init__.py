"""
Formatting Layer

Renders the inbox report for the console.
"""

from .console import ConsoleReportFormatter, short_body

__all__ = ['ConsoleReportFormatter', 'short_body']
