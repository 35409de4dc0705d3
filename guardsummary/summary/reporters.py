"""
Reporters that write the summary of an evaluation run to a text sink.
"""

import logging
from abc import ABC
from abc import abstractmethod
from typing import Sequence
from typing import TextIO

from guardsummary.summary.aggregate import aggregate_eval
from guardsummary.summary.aggregate import aggregate_flat
from guardsummary.summary.exceptions import SinkWriteError
from guardsummary.summary.formatters import summary_to_document
from guardsummary.summary.models.model import EventRecord
from guardsummary.summary.models.model import ReportConfig
from guardsummary.summary.models.model import Status
from guardsummary.summary.models.model import StatusContext
from guardsummary.summary.models.model import SummaryType
from guardsummary.summary.models.result import RunSummary
from guardsummary.summary.models.result import StatusGroup
from guardsummary.summary.styles import COLORED
from guardsummary.summary.styles import TextStyle

logger = logging.getLogger(__name__)

GROUP_HEADERS = {
    SummaryType.SKIP: "SKIP rules",
    SummaryType.PASS: "PASS rules",
    SummaryType.FAIL: "FAILED rules",
}

SEPARATOR = "---"

# Gap between the longest rule name and the status column
NAME_PADDING = 4


def _write_line(writer: TextIO, line: str) -> None:
    try:
        writer.write(line + "\n")
    except (OSError, ValueError) as e:
        raise SinkWriteError(f"Failed to write summary line: {e}") from e


class Reporter(ABC):
    """
    A Reporter renders one evaluation run, either from flat pass/fail lists or
    from the evaluation trace.
    """

    def __init__(self, config: ReportConfig):
        self.config = config

    @abstractmethod
    def report(
        self,
        writer: TextIO,
        status: Status | None,
        failed_rules: Sequence[StatusContext],
        passed_or_skipped: Sequence[StatusContext],
        longest_rule_name: int,
    ) -> None:
        """
        Report a flat run.

        :param writer: The text sink to write to.
        :param status: The overall status, None when unknown.
        :param failed_rules: Entries that failed.
        :param passed_or_skipped: Entries that passed or were skipped.
        :param longest_rule_name: Length of the longest rule name in the run.
        :raises SinkWriteError: If the writer fails.
        """

    @abstractmethod
    def report_eval(self, writer: TextIO, status: Status, root: EventRecord) -> None:
        """
        Report a run from its evaluation trace.

        :param writer: The text sink to write to.
        :param status: The overall status.
        :param root: The root record of the evaluation trace.
        :raises SinkWriteError: If the writer fails.
        """

    def _selected_groups(self, summary: RunSummary) -> list[StatusGroup]:
        """Groups to print, in SKIP, PASS, FAIL order."""
        return [
            group
            for group in summary.groups()
            if self.config.selector.includes(group.summary_type) and group.rows
        ]


class SummaryTable(Reporter):
    """
    Writes the aligned text summary table:

        data.json Status = FAIL
        FAILED rules
        rules.guard/rule1    FAIL
        ---
    """

    def __init__(self, config: ReportConfig, style: TextStyle = COLORED):
        super().__init__(config)
        self.style = style

    def report(
        self,
        writer: TextIO,
        status: Status | None,
        failed_rules: Sequence[StatusContext],
        passed_or_skipped: Sequence[StatusContext],
        longest_rule_name: int,
    ) -> None:
        summary = aggregate_flat(
            status, failed_rules, passed_or_skipped, longest_rule_name
        )
        self._write_summary(writer, summary)

    def report_eval(self, writer: TextIO, status: Status, root: EventRecord) -> None:
        summary = aggregate_eval(status, root)
        self._write_summary(writer, summary)

    def _write_summary(self, writer: TextIO, summary: RunSummary) -> None:
        status_text = self.style.status(summary.status)
        _write_line(writer, f"{self.config.data_file_name} Status = {status_text}")
        width = summary.longest_rule_name + NAME_PADDING
        for group in self._selected_groups(summary):
            _write_line(writer, self.style.header(GROUP_HEADERS[group.summary_type]))
            for name, rule_status in group.rows:
                rule_text = self.style.status(rule_status)
                _write_line(
                    writer,
                    f"{self.config.rules_file_name}/{name:<{width}}{rule_text}",
                )
        _write_line(writer, SEPARATOR)


class JsonSummary(Reporter):
    """
    Writes the summary as a single JSON document, applying the same category
    selection as the text table.
    """

    def report(
        self,
        writer: TextIO,
        status: Status | None,
        failed_rules: Sequence[StatusContext],
        passed_or_skipped: Sequence[StatusContext],
        longest_rule_name: int,
    ) -> None:
        summary = aggregate_flat(
            status, failed_rules, passed_or_skipped, longest_rule_name
        )
        self._write_document(writer, summary)

    def report_eval(self, writer: TextIO, status: Status, root: EventRecord) -> None:
        summary = aggregate_eval(status, root)
        self._write_document(writer, summary)

    def _write_document(self, writer: TextIO, summary: RunSummary) -> None:
        document = summary_to_document(
            summary, self.config, self._selected_groups(summary)
        )
        _write_line(writer, document.model_dump_json(indent=2))
