"""Access Log Analyzer - Report output"""

from typing import Sequence

from rich.console import Console

from .models import RankedItem
from .patterns import REPORT_TITLES, TOP_N


def print_results(title: str, items: Sequence[RankedItem], console: Console):
    # one line per item whatever the console width; values printed verbatim
    console.print(f"\n{title}:", style="bold cyan", markup=False, emoji=False, soft_wrap=True)
    for item in items:
        console.print(f"{item.value} - {item.count} requests",
                      markup=False, emoji=False, highlight=False, soft_wrap=True)


def print_report(analyzer, console: Console, top: int = TOP_N):
    sections = [
        ('ip', analyzer.top_ips(top)),
        ('path', analyzer.top_paths(top)),
        ('status', analyzer.top_status_codes(top)),
        ('user_agent', analyzer.top_user_agents(top)),
    ]
    for key, items in sections:
        print_results(REPORT_TITLES[key].format(n=top), items, console)

    console.print("\nAnalysis complete.", style="green")
