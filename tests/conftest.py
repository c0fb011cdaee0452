from collections import defaultdict
from datetime import datetime

import pytest
from rich.console import Console
from rich.table import Table

from cumulus_common.config.settings import SelectorSettings
from cumulus_ui.resources.models import VM

KNOWN_MARKERS = {"unit_ui", "unit_common"}


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Print pass/fail statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)
    marker_stats = defaultdict(
        lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0}
    )

    for outcome in ["passed", "failed", "skipped"]:
        for report in terminalreporter.stats.get(outcome, []):
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(marker_stats):
        stats = marker_stats[marker]
        table.add_row(
            marker,
            str(stats["total"]),
            str(stats["passed"]),
            str(stats["failed"]),
            str(stats["skipped"]),
            f"{stats['duration']:.2f}",
        )

    console = Console()
    console.print("\n")
    console.print(table)


def _make_vm(index: int, name: str | None = None, state: str = "running") -> VM:
    return VM(
        id=f"i-{index:017x}",
        name=name or f"web-{index:02d}",
        state=state,
        private_ip=f"10.0.0.{index}",
        type="t3.micro",
        zone="us-east-1a",
        launched_at=datetime(2024, 1, 2, 3, 4, 5),
        provider="aws",
    )


@pytest.fixture
def vms() -> list[VM]:
    return [_make_vm(i) for i in range(1, 21)]


@pytest.fixture
def vm_factory():
    return _make_vm


@pytest.fixture
def settings() -> SelectorSettings:
    return SelectorSettings()
