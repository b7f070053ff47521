"""
Bulk upload processing.
"""

from .pipeline import BulkUploadPipeline
from .readers import read_rows
from .reporting import BatchReporter
from .row_processor import RowProcessor

__all__ = [
    "BulkUploadPipeline",
    "RowProcessor",
    "BatchReporter",
    "read_rows",
]
