import pytest
from fakes import Outcome, observe

from callbackless import (
    InvalidStateError,
    Promise,
    State,
    chain,
    continue_,
    flat_map,
    get_error,
    is_failure,
    is_success,
    unit,
)
from callbackless.lift import TRUE, failure


def test_chain_forwards_success() -> None:
    source, target = Promise(), Promise()
    chain(source, target)
    source.resolve_success("data")
    assert observe(target) == Outcome(State.SUCCEEDED, data="data")


def test_chain_forwards_failure() -> None:
    source, target = Promise(), Promise()
    chain(source, target)
    source.resolve_failure("boom")
    assert observe(target) == Outcome(State.FAILED, error="boom")


def test_chain_into_settled_target_raises() -> None:
    target = Promise()
    target.resolve_success("first")
    with pytest.raises(InvalidStateError):
        chain(unit("second"), target)


def test_continue_runs_after_success() -> None:
    steps = []
    result = continue_(unit(1), lambda p: steps.append(p.data()) or unit("next"))
    assert steps == [1]
    assert observe(result) == Outcome(State.SUCCEEDED, data="next")


def test_continue_runs_after_failure() -> None:
    steps = []
    failed = failure("boom")

    def step(p: Promise) -> Promise:
        steps.append(p)
        return TRUE

    result = continue_(failed, step)
    assert steps == [failed]
    assert result.data() is True

    bound = []
    flat_map(lambda x: bound.append(x) or TRUE)(failure("boom"))
    assert bound == []


def test_continue_with_none_step_result() -> None:
    assert observe(continue_(failure("boom"), lambda p: None)) == Outcome(State.SUCCEEDED, data=None)


def test_continue_mirrors_step_failure() -> None:
    result = continue_(unit(1), lambda p: failure("step"))
    assert observe(result) == Outcome(State.FAILED, error="step")


def test_continue_waits_for_source() -> None:
    order = []
    first = Promise()

    second = continue_(first, lambda p: order.append("second") or unit("done"))
    third = continue_(second, lambda p: order.append("third") or None)
    assert order == []

    first.resolve_failure("first failed")
    assert order == ["second", "third"]
    assert third.state() is State.SUCCEEDED


@pytest.mark.parametrize(
    ("source", "succeeded"),
    [(unit("x"), True), (failure("boom"), False)],
)
def test_is_success_and_is_failure(source: Promise, succeeded: bool) -> None:
    assert observe(is_success(source)) == Outcome(State.SUCCEEDED, data=succeeded)
    assert observe(is_failure(source)) == Outcome(State.SUCCEEDED, data=not succeeded)


def test_get_error() -> None:
    assert observe(get_error(failure("boom"))) == Outcome(State.SUCCEEDED, data="boom")
    assert observe(get_error(unit("x"))) == Outcome(State.FAILED, error=None)


def test_inspection_waits_for_source() -> None:
    source = Promise()
    checked = is_success(source)
    assert checked.state() is State.PENDING
    source.resolve_success(None)
    assert checked.data() is True
