"""Tests for ExampleRunner application logic."""

import pytest

from by_example.example.domain.example import Example, this_code
from by_example.registry.domain.registry import Registry
from by_example.runner.application.runner import ExampleRunner, run_all
from by_example.runner.domain.outcome import OutcomeStatus
from by_example.runner.domain.report import RunReport
from tests.runner.fake_observer import FakeRunObserver


def _passing(value: object = 1) -> Example[object]:
    return this_code(lambda: value).returns(lambda: value)


def _failing() -> Example[int]:
    return this_code(lambda: 1).returns(lambda: 2)


def _raising() -> Example[int]:
    def produce() -> int:
        raise ValueError("boom")

    return this_code(produce).returns(lambda: 1)


def _run(registry: Registry) -> tuple[RunReport, FakeRunObserver]:
    observer = FakeRunObserver()
    report = ExampleRunner(observer=observer).run(registry)
    return report, observer


class TestEndToEndScenarios:
    def test_addition_examples_all_pass(self) -> None:
        registry = Registry()
        registry.for_example(
            "addition",
            this_code(lambda: 2 + 2).returns(lambda: 4),
            this_code(lambda: 5 - 8).returns(lambda: -3),
        )

        report, _ = _run(registry)

        assert report.total == 2
        assert report.passed == 2
        assert report.failure_count == 0

    def test_broken_example_reports_actual_and_expected(self) -> None:
        registry = Registry()
        registry.for_example("broken", this_code(lambda: 1).returns(lambda: 2))

        report, _ = _run(registry)

        assert report.total == 1
        assert report.failed == 1
        (failure,) = report.failures
        assert failure.actual == "1"
        assert failure.expected == "2"
        assert failure.identifier == "testbroken_0"
        assert failure.description == "broken"

    def test_raising_example_reported_as_error_and_run_continues(self) -> None:
        registry = Registry()
        registry.register("raises", [_raising()])
        registry.register("after", [_passing()])

        report, _ = _run(registry)

        assert report.total == 2
        assert report.outcomes[0].status is OutcomeStatus.ERRORED
        assert report.outcomes[0].error_type == "ValueError"
        assert report.outcomes[0].error == "boom"
        assert report.outcomes[1].status is OutcomeStatus.PASSED


class TestNoEarlyTermination:
    def test_pass_fail_pass(self) -> None:
        registry = Registry()
        registry.register("A", [_passing()])
        registry.register("B", [_failing()])
        registry.register("C", [_passing()])

        report, _ = _run(registry)

        assert report.total == 3
        assert report.failure_count == 1
        statuses = {o.identifier: o.status for o in report.outcomes}
        assert statuses["testA_0"] is OutcomeStatus.PASSED
        assert statuses["testB_0"] is OutcomeStatus.FAILED
        assert statuses["testC_0"] is OutcomeStatus.PASSED

    def test_every_example_executed_once(self) -> None:
        calls: list[str] = []

        def tracked(name: str) -> Example[str]:
            def produce() -> str:
                calls.append(name)
                return name

            return this_code(produce).returns(lambda: name)

        registry = Registry()
        registry.register("many", [tracked("a"), _raising(), tracked("b"), _failing()])
        registry.register("last", [tracked("c")])

        _run(registry)

        assert calls == ["a", "b", "c"]


class TestOutcomeSemantics:
    def test_equal_values_pass(self) -> None:
        registry = Registry()
        registry.register("eq", [_passing([1, 2]), _passing({"a": 1}), _passing(None)])

        report, _ = _run(registry)

        assert report.passed == 3

    def test_unequal_values_give_exactly_one_failure_entry(self) -> None:
        registry = Registry()
        registry.register("neq", [this_code(lambda: [1]).returns(lambda: [2])])

        report, _ = _run(registry)

        assert len(report.failures) == 1
        assert report.failures[0].actual == "[1]"
        assert report.failures[0].expected == "[2]"

    def test_type_mismatch_reported_as_error(self) -> None:
        registry = Registry()
        registry.register("types", [this_code(lambda: 1).returns(lambda: "1")])

        report, _ = _run(registry)

        (outcome,) = report.outcomes
        assert outcome.status is OutcomeStatus.ERRORED
        assert outcome.error_type == "TypeMismatchError"

    def test_equal_set_and_frozenset_pass(self) -> None:
        registry = Registry()
        registry.register(
            "sets", [this_code(lambda: {1, 2}).returns(lambda: frozenset({1, 2}))]
        )

        report, _ = _run(registry)

        assert report.passed == 1
        assert report.succeeded

    def test_type_mismatch_carries_rendered_values(self) -> None:
        registry = Registry()
        registry.register("types", [this_code(lambda: "1").returns(lambda: 1)])

        report, _ = _run(registry)

        (outcome,) = report.outcomes
        assert outcome.status is OutcomeStatus.ERRORED
        assert outcome.actual == "'1'"
        assert outcome.expected == "1"

    def test_report_order_matches_registration_order(self) -> None:
        registry = Registry()
        registry.register("z", [_passing(), _failing()])
        registry.register("a", [_raising()])
        registry.register("m", [_passing()])

        report, _ = _run(registry)

        assert [o.identifier for o in report.outcomes] == registry.identifiers

    def test_long_values_truncated_to_configured_length(self) -> None:
        registry = Registry()
        registry.register("long", [this_code(lambda: "x" * 100).returns(lambda: "y")])

        report = ExampleRunner(observer=FakeRunObserver(), max_repr_length=10).run(
            registry
        )

        assert report.failures[0].actual == "'xxxxxx..."

    def test_registry_can_be_run_twice(self) -> None:
        registry = Registry()
        registry.register("again", [_passing(), _failing()])

        first, _ = _run(registry)
        second, _ = _run(registry)

        assert first.run_id != second.run_id
        assert first.failure_count == second.failure_count == 1

    def test_empty_registry(self) -> None:
        report, _ = _run(Registry())

        assert report.total == 0
        assert report.succeeded


class TestObserverEvents:
    def test_run_started_and_completed_once(self) -> None:
        registry = Registry()
        registry.register("x", [_passing(), _failing(), _raising()])

        report, observer = _run(registry)

        assert len(observer.started) == 1
        assert observer.started[0].total_examples == 3
        assert len(observer.completed) == 1
        completed = observer.completed[0]
        assert (completed.total, completed.passed, completed.failed, completed.errored) == (
            3,
            1,
            1,
            1,
        )
        assert completed.run_id == report.run_id

    def test_one_terminal_event_per_example(self) -> None:
        registry = Registry()
        registry.register("x", [_passing(), _failing(), _raising()])

        _, observer = _run(registry)

        assert [e.identifier for e in observer.ex_passed] == ["testx_0"]
        assert [e.identifier for e in observer.ex_failed] == ["testx_1"]
        assert [e.identifier for e in observer.ex_errored] == ["testx_2"]

    def test_failed_event_carries_rendered_values(self) -> None:
        registry = Registry()
        registry.register("x", [_failing()])

        _, observer = _run(registry)

        assert observer.ex_failed[0].actual == "1"
        assert observer.ex_failed[0].expected == "2"

    def test_event_order(self) -> None:
        registry = Registry()
        registry.register("x", [_passing(), _failing()])

        _, observer = _run(registry)

        assert observer.order == [
            "run_started",
            "example_started",
            "example_passed",
            "example_started",
            "example_failed",
            "run_completed",
        ]


class TestRunAll:
    def test_without_observer(self) -> None:
        registry = Registry()
        registry.register("x", [_passing(), _failing()])

        report = run_all(registry)

        assert report.total == 2
        assert report.failure_count == 1

    def test_with_observer(self) -> None:
        registry = Registry()
        registry.register("x", [_passing()])
        observer = FakeRunObserver()

        run_all(registry, observer=observer)

        assert len(observer.ex_passed) == 1


class TestInterruptedRun:
    def test_run_completed_emitted_when_interrupted(self) -> None:
        def interrupt() -> int:
            raise KeyboardInterrupt

        registry = Registry()
        registry.register("first", [_passing()])
        registry.register("stop", [this_code(interrupt).returns(lambda: 1)])
        registry.register("never", [_passing()])
        observer = FakeRunObserver()

        with pytest.raises(KeyboardInterrupt):
            ExampleRunner(observer=observer).run(registry)

        assert len(observer.completed) == 1
        assert observer.completed[0].total == 1
        assert observer.completed[0].passed == 1
        assert observer.order[-1] == "run_completed"
