"""Default reporter used when the config does not list any."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Reporter:
    """Handle for a reporter consumed by the test runner."""
    name: str
    options: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.name


def default_reporter(
    report_test_results: bool = True,
    report_test_progress: bool = True,
) -> Reporter:
    """Create the default terminal reporter.

    Args:
        report_test_results: Print failed tests and browser logs.
        report_test_progress: Print a progress bar while tests run.
    """
    return Reporter(
        name="default",
        options={
            "report_test_results": report_test_results,
            "report_test_progress": report_test_progress,
        },
    )
