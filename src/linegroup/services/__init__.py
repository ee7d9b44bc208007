from .reader_service import RecordReaderService
from .grouping_service import GroupingService
from .report_service import ReportService
from .processing_service import ProcessingService


__all__ = [
    'RecordReaderService',
    'GroupingService',
    'ReportService',
    'ProcessingService',
]
