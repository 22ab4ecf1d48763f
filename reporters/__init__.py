"""
Reporters package for the ND Exposure Table.
"""

from .table_reporter import TableReporter, REPORT_FORMATS

__all__ = ['TableReporter', 'REPORT_FORMATS']
