"""
Output formatting utilities for summary reports.
"""

from typing import Iterable

from guardsummary.summary.models.model import ReportConfig
from guardsummary.summary.models.output import GroupOutput
from guardsummary.summary.models.output import RuleOutput
from guardsummary.summary.models.output import SummaryDocument
from guardsummary.summary.models.result import RunSummary
from guardsummary.summary.models.result import StatusGroup


def summary_to_document(
    summary: RunSummary,
    config: ReportConfig,
    groups: Iterable[StatusGroup],
) -> SummaryDocument:
    """Build the JSON output document for the given groups of a summary."""
    return SummaryDocument(
        data_file=config.data_file_name,
        rules_file=config.rules_file_name,
        status=summary.status,
        groups=[
            GroupOutput(
                type=group.summary_type,
                rules=[
                    RuleOutput(name=name, status=rule_status)
                    for name, rule_status in group.rows
                ],
            )
            for group in groups
        ],
    )
