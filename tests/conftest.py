from collections import Counter

from rich.console import Console
from rich.table import Table

# Markers declared in pyproject.toml
SUITE_MARKERS = ("unit_ui", "unit_common")
OUTCOMES = ("passed", "failed", "skipped")


def _counted(report) -> bool:
    return report.when == "call" or (report.when == "setup" and report.skipped)


def _tally(terminalreporter) -> tuple[Counter, Counter]:
    counts: Counter = Counter()
    durations: Counter = Counter()
    for outcome in OUTCOMES:
        for report in terminalreporter.stats.get(outcome, []):
            if not _counted(report):
                continue
            for marker in SUITE_MARKERS:
                if marker in report.keywords:
                    counts[marker, outcome] += 1
                    durations[marker] += getattr(report, "duration", 0.0)
    return counts, durations


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Print a per-marker outcome table once the session ends."""
    _ = (exitstatus, config)
    counts, durations = _tally(terminalreporter)
    if not counts:
        return

    table = Table(title="Menu test suites", header_style="bold magenta")
    table.add_column("Suite", style="cyan")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Seconds", justify="right", style="blue")
    for marker in SUITE_MARKERS:
        row = [counts[marker, outcome] for outcome in OUTCOMES]
        if sum(row):
            table.add_row(marker, *map(str, row), f"{durations[marker]:.2f}")

    Console().print(table)
