"""
Grouping of evaluation results into SKIP, PASS and FAIL summary groups.
"""

import logging
from typing import Sequence

from guardsummary.summary.models.model import EventRecord
from guardsummary.summary.models.model import Status
from guardsummary.summary.models.model import StatusContext
from guardsummary.summary.models.model import SummaryType
from guardsummary.summary.models.result import RunSummary
from guardsummary.summary.models.result import StatusGroup

logger = logging.getLogger(__name__)


def aggregate_flat(
    status: Status | None,
    failed_rules: Sequence[StatusContext],
    passed_or_skipped: Sequence[StatusContext],
    longest_rule_name: int,
) -> RunSummary:
    """
    Group the pre-partitioned results of a flat evaluation run.

    Entries of `passed_or_skipped` whose status is exactly SKIP go to the SKIP
    group; all others, including entries without a status, go to the PASS
    group. Input order is preserved within each group.

    :param status: Overall run status, None when it was not computed.
    :param failed_rules: Entries already known to have failed.
    :param passed_or_skipped: Entries that either passed or were skipped.
    :param longest_rule_name: Length of the longest rule name in the run.
    :return: The grouped RunSummary.
    """
    skipped = StatusGroup(SummaryType.SKIP)
    passed = StatusGroup(SummaryType.PASS)
    for entry in passed_or_skipped:
        if entry.status == Status.SKIP:
            skipped.rows.append((entry.context, entry.status))
        else:
            passed.rows.append((entry.context, entry.status))

    failed = StatusGroup(
        SummaryType.FAIL,
        [(entry.context, entry.status) for entry in failed_rules],
    )

    logger.debug(
        "Flat summary: %d skipped, %d passed, %d failed",
        len(skipped),
        len(passed),
        len(failed),
    )
    return RunSummary(
        status=status,
        skipped=skipped,
        passed=passed,
        failed=failed,
        longest_rule_name=longest_rule_name,
    )


def aggregate_eval(status: Status, root: EventRecord) -> RunSummary:
    """
    Group the top-level rule checks of an evaluation trace.

    Only direct children of `root` carrying a rule check are considered.
    A SKIP for a rule name that also appears as PASS or FAIL is dropped; a
    name recorded as both PASS and FAIL is kept in both groups.

    :param status: Overall run status.
    :param root: Root record of the evaluation trace.
    :return: The grouped RunSummary.
    """
    by_status: dict[Status, dict[str, Status]] = {
        Status.PASS: {},
        Status.FAIL: {},
        Status.SKIP: {},
    }
    longest = 0
    for child in root.children:
        rule_check = child.rule_check
        if rule_check is None:
            continue
        by_status[rule_check.status][rule_check.name] = rule_check.status
        longest = max(longest, len(rule_check.name))

    passed = by_status[Status.PASS]
    failed = by_status[Status.FAIL]
    skipped = {
        name: rule_status
        for name, rule_status in by_status[Status.SKIP].items()
        if name not in passed and name not in failed
    }
    superseded = len(by_status[Status.SKIP]) - len(skipped)
    if superseded:
        logger.debug(
            "Dropped %d skipped rule(s) that were also evaluated", superseded
        )

    logger.debug(
        "Trace summary: %d skipped, %d passed, %d failed",
        len(skipped),
        len(passed),
        len(failed),
    )
    return RunSummary(
        status=status,
        skipped=StatusGroup(SummaryType.SKIP, list(skipped.items())),
        passed=StatusGroup(SummaryType.PASS, list(passed.items())),
        failed=StatusGroup(SummaryType.FAIL, list(failed.items())),
        longest_rule_name=longest,
    )
