"""Access Log Analyzer - Line parser"""

from typing import Optional

from .models import LogEntry
from .patterns import ACCESS_LOG_PATTERN


def parse_line(line: str) -> Optional[LogEntry]:
    """Extract ip, path, status and user agent from one log line.

    Returns None when the line is empty or does not follow the combined
    log format. Malformed lines never raise.
    """
    if not line:
        return None

    match = ACCESS_LOG_PATTERN.match(line)
    if not match:
        return None

    groups = match.groups()
    if len(groups) != 4 or not all(groups):
        return None

    ip, path, status, user_agent = groups
    return LogEntry(ip=ip, path=path, status_code=status, user_agent=user_agent)
