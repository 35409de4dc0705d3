"""
Loader for results documents rendered by the CLI.

Flat form:
    {
        "status": "FAIL",
        "failed": [{"name": "rule1", "status": "FAIL"}],
        "passed_or_skipped": [{"name": "rule2", "status": "PASS"}],
        "longest_rule_name": 5
    }

Trace form:
    {
        "status": "FAIL",
        "root": {
            "rule_check": null,
            "children": [
                {"rule_check": {"name": "rule1", "status": "FAIL"}, "children": []}
            ]
        }
    }

`longest_rule_name` is optional in the flat form; when absent it is computed
from every entry name. `children` is optional on trace nodes.
"""

import logging
from dataclasses import dataclass
from typing import Any

from guardsummary.summary.exceptions import ResultsValidationError
from guardsummary.summary.models.model import EventRecord
from guardsummary.summary.models.model import RuleCheck
from guardsummary.summary.models.model import Status
from guardsummary.summary.models.model import StatusContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlatResults:
    status: Status | None
    failed: list[StatusContext]
    passed_or_skipped: list[StatusContext]
    longest_rule_name: int


@dataclass(frozen=True)
class TraceResults:
    status: Status
    root: EventRecord


def _parse_status(value: Any, where: str) -> Status:
    if value is None:
        raise ResultsValidationError(f"{where} 'status' is required")
    try:
        return Status(str(value).upper())
    except ValueError:
        raise ResultsValidationError(
            f"{where} has unknown status {value!r}, expected PASS, FAIL or SKIP"
        ) from None


def _parse_optional_status(value: Any, where: str) -> Status | None:
    if value is None:
        return None
    return _parse_status(value, where)


def _parse_name(value: Any, where: str) -> str:
    if not isinstance(value, str) or not value:
        raise ResultsValidationError(f"{where} 'name' must be a non-empty string")
    return value


def _parse_entries(data: dict[str, Any], key: str) -> list[StatusContext]:
    entries = data.get(key, [])
    if not isinstance(entries, list):
        raise ResultsValidationError(f"Results '{key}' field must be a list")

    parsed = []
    for idx, entry in enumerate(entries):
        where = f"{key}[{idx}]"
        if not isinstance(entry, dict):
            raise ResultsValidationError(f"{where} must be a dictionary")
        parsed.append(
            StatusContext(
                context=_parse_name(entry.get("name"), where),
                status=_parse_optional_status(entry.get("status"), where),
            )
        )
    return parsed


def _parse_node(node: Any, where: str) -> EventRecord:
    if not isinstance(node, dict):
        raise ResultsValidationError(f"{where} must be a dictionary")

    rule_check = None
    raw_check = node.get("rule_check")
    if raw_check is not None:
        check_where = f"{where}.rule_check"
        if not isinstance(raw_check, dict):
            raise ResultsValidationError(f"{check_where} must be a dictionary")
        rule_check = RuleCheck(
            name=_parse_name(raw_check.get("name"), check_where),
            status=_parse_status(raw_check.get("status"), check_where),
        )

    children = node.get("children", [])
    if not isinstance(children, list):
        raise ResultsValidationError(f"{where}.children must be a list")

    return EventRecord(
        rule_check=rule_check,
        children=[
            _parse_node(child, f"{where}.children[{idx}]")
            for idx, child in enumerate(children)
        ],
    )


def validate_results_json(data: dict[str, Any]) -> None:
    """
    Validate the top-level shape of a results document.

    Args:
        data: Dictionary parsed from the results JSON file

    Raises:
        ResultsValidationError: If the document is neither a flat nor a trace
            results document
    """
    if not isinstance(data, dict):
        raise ResultsValidationError("Results data must be a dictionary")

    is_trace = "root" in data
    is_flat = "failed" in data or "passed_or_skipped" in data
    if is_trace and is_flat:
        raise ResultsValidationError(
            "Results data cannot contain both 'root' and 'failed'/'passed_or_skipped'"
        )
    if not is_trace and not is_flat:
        raise ResultsValidationError(
            "Results data missing required 'root' or 'failed'/'passed_or_skipped' field"
        )

    if is_trace and "status" not in data:
        raise ResultsValidationError("Trace results missing required 'status' field")

    longest = data.get("longest_rule_name")
    if longest is not None and (
        not isinstance(longest, int) or isinstance(longest, bool) or longest < 0
    ):
        raise ResultsValidationError(
            "Results 'longest_rule_name' must be a non-negative integer"
        )


def load_results(data: dict[str, Any]) -> FlatResults | TraceResults:
    """
    Validate a results document and convert it to the report input types.

    Args:
        data: Dictionary parsed from the results JSON file

    Returns:
        FlatResults or TraceResults, depending on the form of the document

    Raises:
        ResultsValidationError: If the document is malformed
    """
    validate_results_json(data)

    if "root" in data:
        status = _parse_status(data["status"], "Results")
        root = _parse_node(data["root"], "root")
        logger.debug(
            "Loaded trace results with %d top-level records", len(root.children)
        )
        return TraceResults(status=status, root=root)

    status = _parse_optional_status(data.get("status"), "Results")
    failed = _parse_entries(data, "failed")
    passed_or_skipped = _parse_entries(data, "passed_or_skipped")
    longest = data.get("longest_rule_name")
    if longest is None:
        longest = max(
            (len(entry.context) for entry in failed + passed_or_skipped),
            default=0,
        )
    logger.debug(
        "Loaded flat results with %d failed and %d passed or skipped entries",
        len(failed),
        len(passed_or_skipped),
    )
    return FlatResults(
        status=status,
        failed=failed,
        passed_or_skipped=passed_or_skipped,
        longest_rule_name=longest,
    )
