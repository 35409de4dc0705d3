import logging
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Iterable

logger = logging.getLogger(__name__)


class Status(str, Enum):
    """Outcome of a single rule check."""

    PASS = "PASS"
    """The rule was evaluated and every clause held."""

    FAIL = "FAIL"
    """The rule was evaluated and at least one clause did not hold."""

    SKIP = "SKIP"
    """The rule was not applicable to the data, e.g. its `when` guard was false."""


class SummaryType(str, Enum):
    """Categories that can be selected for display in a summary report."""

    PASS = "PASS"
    FAIL = "FAIL"
    SKIP = "SKIP"


@dataclass(frozen=True)
class StatusSelector:
    """The set of summary categories a report prints."""

    types: frozenset[SummaryType] = frozenset()
    """Selected categories. An empty set prints no groups at all."""

    @classmethod
    def of(cls, *types: SummaryType) -> "StatusSelector":
        return cls(frozenset(types))

    @classmethod
    def all(cls) -> "StatusSelector":
        return cls(frozenset(SummaryType))

    @classmethod
    def none(cls) -> "StatusSelector":
        return cls(frozenset())

    def includes(self, summary_type: SummaryType) -> bool:
        return summary_type in self.types


def parse_summary_types(values: Iterable[str]) -> StatusSelector:
    """
    Build a StatusSelector from user supplied category names.

    Each value may itself be a comma separated list. Names are matched
    case-insensitively against `pass`, `fail` and `skip`; `all` selects every
    category and `none` selects nothing.

    :param values: Category names, e.g. ["pass,fail"] or ["all"].
    :return: The matching StatusSelector.
    :raises ValueError: On an unknown name, or when `none` is combined with
        other names.
    """
    names = [
        name.strip().lower()
        for value in values
        for name in value.split(",")
        if name.strip()
    ]
    if "none" in names:
        if len(set(names)) > 1:
            raise ValueError("'none' cannot be combined with other summary types")
        return StatusSelector.none()
    if "all" in names:
        return StatusSelector.all()

    selected: set[SummaryType] = set()
    for name in names:
        try:
            selected.add(SummaryType(name.upper()))
        except ValueError:
            valid = ", ".join(["all", "none"] + [t.value.lower() for t in SummaryType])
            raise ValueError(
                f"Unknown summary type '{name}'. Valid values: {valid}"
            ) from None
    return StatusSelector(frozenset(selected))


@dataclass(frozen=True)
class StatusContext:
    """One rule outcome as reported by the flat evaluation path."""

    context: str
    """The rule name."""
    status: Status | None = None
    """The rule status, or None when the rule was never evaluated."""


@dataclass(frozen=True)
class RuleCheck:
    """A named rule-check outcome attached to an evaluation trace node."""

    name: str
    status: Status


@dataclass
class EventRecord:
    """A node of the evaluation trace."""

    rule_check: RuleCheck | None = None
    """Set when this node records the outcome of a named rule."""
    children: list["EventRecord"] = field(default_factory=list)


@dataclass(frozen=True)
class ReportConfig:
    """Labels and category selection for one summary report."""

    rules_file_name: str
    """Label for the rules source, printed as the prefix of every rule line."""
    data_file_name: str
    """Label for the data source, printed in the overall status line."""
    selector: StatusSelector = field(default_factory=StatusSelector.all)
