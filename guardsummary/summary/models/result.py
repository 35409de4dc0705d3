# Aggregation result classes
from dataclasses import dataclass
from dataclasses import field

from guardsummary.summary.models.model import Status
from guardsummary.summary.models.model import SummaryType


@dataclass
class StatusGroup:
    """
    Rule rows for one summary category, in display order.
    """

    summary_type: SummaryType
    rows: list[tuple[str, Status | None]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)


@dataclass
class RunSummary:
    """
    The grouped outcome of one evaluation run, ready to be rendered.
    """

    status: Status | None
    skipped: StatusGroup
    passed: StatusGroup
    failed: StatusGroup
    longest_rule_name: int = 0

    def groups(self) -> tuple[StatusGroup, StatusGroup, StatusGroup]:
        """Return the groups in display order: SKIP, PASS, FAIL."""
        return (self.skipped, self.passed, self.failed)
