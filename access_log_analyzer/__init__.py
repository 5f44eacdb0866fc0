"""Access Log Analyzer package"""

from .patterns import VERSION, LOG_URL, TOP_N, ACCESS_LOG_PATTERN
from .models import LogEntry, RankedItem
from .parser import parse_line
from .analyzer import FrequencyAnalyzer
from .fetch import FetchError, download_log, read_log_file
from .output import print_report, print_results

__all__ = [
    'VERSION', 'LOG_URL', 'TOP_N', 'ACCESS_LOG_PATTERN',
    'LogEntry', 'RankedItem', 'parse_line', 'FrequencyAnalyzer',
    'FetchError', 'download_log', 'read_log_file',
    'print_report', 'print_results'
]
