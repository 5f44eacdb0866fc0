"""Access Log Analyzer - Frequency analysis engine"""

import logging
from collections import Counter
from contextlib import nullcontext
from typing import Dict, List, Sequence

from rich.progress import Progress, SpinnerColumn, TextColumn

from .models import RankedItem
from .parser import parse_line
from .patterns import TOP_N

logger = logging.getLogger(__name__)


class FrequencyAnalyzer:
    """Counts ip, path, status and user agent values over access log lines"""

    def __init__(self, console=None):
        self.console = console
        self.ip_stats: Counter = Counter()
        self.path_stats: Counter = Counter()
        self.status_stats: Counter = Counter()
        self.agent_stats: Counter = Counter()
        self.lines_processed = 0
        self.lines_matched = 0

    def observe(self, line: str) -> bool:
        """Count one line. Returns False if the line did not parse."""
        self.lines_processed += 1
        entry = parse_line(line)
        if entry is None:
            logger.debug("Skipping unparseable line: %r", line[:120])
            return False

        self.ip_stats[entry.ip] += 1
        self.path_stats[entry.path] += 1
        self.status_stats[entry.status_code] += 1
        self.agent_stats[entry.user_agent] += 1
        self.lines_matched += 1
        return True

    def analyze(self, lines: Sequence[str]) -> None:
        progress = None
        if self.console is not None:
            progress = Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console,
                transient=True
            )

        with progress if progress is not None else nullcontext():
            task = progress.add_task("Analyzing logs...", total=len(lines)) if progress is not None else None

            for line in lines:
                if line:
                    self.observe(line)
                if progress is not None:
                    progress.update(task, advance=1)

    def analyze_text(self, text: str) -> None:
        # newline only; other separators may appear inside quoted fields
        lines = [line.rstrip("\r") for line in text.split("\n")]
        logger.info("Processing %d log lines...", len(lines))
        self.analyze(lines)
        logger.info("Matched %d of %d non-empty lines",
                    self.lines_matched, self.lines_processed)

    @staticmethod
    def top_n(table: Dict[str, int], n: int) -> List[RankedItem]:
        """Highest counts first, equal counts ordered by value."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        ranked = sorted(table.items(), key=lambda item: (-item[1], item[0]))
        return [RankedItem(value=value, count=count) for value, count in ranked[:n]]

    def top_ips(self, n: int = TOP_N) -> List[RankedItem]:
        return self.top_n(self.ip_stats, n)

    def top_paths(self, n: int = TOP_N) -> List[RankedItem]:
        return self.top_n(self.path_stats, n)

    def top_status_codes(self, n: int = TOP_N) -> List[RankedItem]:
        return self.top_n(self.status_stats, n)

    def top_user_agents(self, n: int = TOP_N) -> List[RankedItem]:
        return self.top_n(self.agent_stats, n)

    def summary(self) -> Dict[str, int]:
        return {
            'lines_processed': self.lines_processed,
            'lines_matched': self.lines_matched,
            'lines_skipped': self.lines_processed - self.lines_matched,
            'unique_ips': len(self.ip_stats),
            'unique_paths': len(self.path_stats)
        }
