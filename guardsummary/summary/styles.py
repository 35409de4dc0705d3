"""
Text styling collaborators for summary reports.

The renderer never colors text itself; it is handed a TextStyle and calls it
for every status word and group header.
"""

from dataclasses import dataclass
from typing import Callable

import typer

from guardsummary.summary.models.model import Status

UNKNOWN_STATUS = "unknown"


@dataclass(frozen=True)
class TextStyle:
    status: Callable[[Status | None], str]
    """Renders a rule or overall status, None meaning not computed."""
    header: Callable[[str], str]
    """Renders a group header such as `PASS rules`."""


def plain_status(status: Status | None) -> str:
    if status is None:
        return UNKNOWN_STATUS
    return status.value


def colored_status(status: Status | None) -> str:
    if status is None:
        return typer.style(UNKNOWN_STATUS, fg=typer.colors.YELLOW)
    if status == Status.PASS:
        return typer.style(status.value, fg=typer.colors.GREEN)
    if status == Status.SKIP:
        return typer.style(status.value, fg=typer.colors.YELLOW)
    return typer.style(status.value, fg=typer.colors.RED, bold=True)


def plain_header(text: str) -> str:
    return text


def bold_header(text: str) -> str:
    return typer.style(text, bold=True)


PLAIN = TextStyle(status=plain_status, header=plain_header)
COLORED = TextStyle(status=colored_status, header=bold_header)
