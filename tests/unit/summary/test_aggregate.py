"""
Unit tests for guardsummary.summary.aggregate

These tests focus on how results are split into SKIP, PASS and FAIL groups
and on the removal of skipped rules that were also evaluated.
"""

from guardsummary.summary.aggregate import aggregate_eval
from guardsummary.summary.aggregate import aggregate_flat
from guardsummary.summary.models.model import EventRecord
from guardsummary.summary.models.model import RuleCheck
from guardsummary.summary.models.model import Status
from guardsummary.summary.models.model import StatusContext


def _record(name: str, status: Status, *children: EventRecord) -> EventRecord:
    return EventRecord(rule_check=RuleCheck(name, status), children=list(children))


class TestAggregateFlat:
    def test_partitions_passed_or_skipped(self):
        summary = aggregate_flat(
            Status.FAIL,
            [StatusContext("rule1", Status.FAIL)],
            [
                StatusContext("rule2", Status.PASS),
                StatusContext("rule3", Status.SKIP),
                StatusContext("rule4", Status.PASS),
            ],
            5,
        )

        assert summary.skipped.rows == [("rule3", Status.SKIP)]
        assert summary.passed.rows == [("rule2", Status.PASS), ("rule4", Status.PASS)]
        assert summary.failed.rows == [("rule1", Status.FAIL)]
        assert summary.longest_rule_name == 5

    def test_unset_status_is_grouped_as_pass(self):
        summary = aggregate_flat(
            None,
            [],
            [StatusContext("unevaluated")],
            11,
        )

        assert summary.status is None
        assert summary.passed.rows == [("unevaluated", None)]
        assert len(summary.skipped) == 0

    def test_failed_order_and_duplicates_preserved(self):
        failed = [
            StatusContext("b", Status.FAIL),
            StatusContext("a", Status.FAIL),
            StatusContext("b", Status.FAIL),
        ]

        summary = aggregate_flat(Status.FAIL, failed, [], 1)

        assert summary.failed.rows == [
            ("b", Status.FAIL),
            ("a", Status.FAIL),
            ("b", Status.FAIL),
        ]

    def test_longest_rule_name_is_taken_from_caller(self):
        summary = aggregate_flat(
            Status.PASS, [], [StatusContext("abc", Status.PASS)], 40
        )

        assert summary.longest_rule_name == 40

    def test_groups_are_in_display_order(self):
        summary = aggregate_flat(Status.PASS, [], [], 0)

        assert [g.summary_type.value for g in summary.groups()] == [
            "SKIP",
            "PASS",
            "FAIL",
        ]


class TestAggregateEval:
    def test_pass_supersedes_skip(self):
        root = EventRecord(
            children=[
                _record("ruleA", Status.SKIP),
                _record("ruleA", Status.PASS),
            ]
        )

        summary = aggregate_eval(Status.PASS, root)

        assert summary.skipped.rows == []
        assert summary.passed.rows == [("ruleA", Status.PASS)]

    def test_fail_supersedes_skip_recorded_later(self):
        root = EventRecord(
            children=[
                _record("ruleA", Status.FAIL),
                _record("ruleA", Status.SKIP),
                _record("ruleB", Status.SKIP),
            ]
        )

        summary = aggregate_eval(Status.FAIL, root)

        assert summary.skipped.rows == [("ruleB", Status.SKIP)]
        assert summary.failed.rows == [("ruleA", Status.FAIL)]

    def test_pass_and_fail_duplicates_are_both_kept(self):
        root = EventRecord(
            children=[
                _record("ruleA", Status.PASS),
                _record("ruleA", Status.FAIL),
            ]
        )

        summary = aggregate_eval(Status.FAIL, root)

        assert summary.passed.rows == [("ruleA", Status.PASS)]
        assert summary.failed.rows == [("ruleA", Status.FAIL)]

    def test_names_are_unique_within_a_group(self):
        root = EventRecord(
            children=[
                _record("first", Status.PASS),
                _record("second", Status.PASS),
                _record("first", Status.PASS),
            ]
        )

        summary = aggregate_eval(Status.PASS, root)

        assert summary.passed.rows == [("first", Status.PASS), ("second", Status.PASS)]

    def test_only_direct_children_are_considered(self):
        root = EventRecord(
            children=[
                _record(
                    "top",
                    Status.PASS,
                    _record("a_much_longer_nested_name", Status.FAIL),
                ),
                EventRecord(children=[_record("under_plain_node", Status.FAIL)]),
            ]
        )

        summary = aggregate_eval(Status.PASS, root)

        assert summary.passed.rows == [("top", Status.PASS)]
        assert summary.failed.rows == []
        assert summary.longest_rule_name == 3

    def test_longest_includes_superseded_skips(self):
        root = EventRecord(
            children=[
                _record("short", Status.PASS),
                _record("longer_name", Status.SKIP),
                _record("longer_name", Status.FAIL),
            ]
        )

        summary = aggregate_eval(Status.FAIL, root)

        assert summary.longest_rule_name == len("longer_name")

    def test_empty_root(self):
        summary = aggregate_eval(Status.SKIP, EventRecord())

        assert summary.status == Status.SKIP
        assert all(len(g) == 0 for g in summary.groups())
        assert summary.longest_rule_name == 0
