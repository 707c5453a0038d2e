import asyncio
import threading

import pytest
from fakes import Outcome, observe
from kungfu import Error, Ok

from callbackless import NotReadyError, Promise, State
from callbackless import lift as L


def test_unit_is_already_succeeded() -> None:
    assert observe(L.up.unit(5)) == Outcome(State.SUCCEEDED, data=5)


def test_failure_is_already_failed() -> None:
    assert observe(L.up.failure("boom")) == Outcome(State.FAILED, error="boom")


def test_constants() -> None:
    assert L.NONE.data() is None
    assert L.TRUE.data() is True
    assert L.FALSE.data() is False
    for constant in (L.NONE, L.TRUE, L.FALSE):
        assert constant.state() is State.SUCCEEDED


def test_from_result() -> None:
    assert observe(L.up.from_result(Ok(1))) == Outcome(State.SUCCEEDED, data=1)
    assert observe(L.up.from_result(Error("bad"))) == Outcome(State.FAILED, error="bad")


def test_catching_value() -> None:
    p = L.up.catching(lambda: int("12"), on_error=str)
    assert observe(p) == Outcome(State.SUCCEEDED, data=12)


def test_catching_exception() -> None:
    p = L.up.catching(lambda: int("twelve"), on_error=lambda e: type(e).__name__)
    assert observe(p) == Outcome(State.FAILED, error="ValueError")


def test_to_result() -> None:
    match L.down.to_result(L.up.unit("x")):
        case Ok(value):
            assert value == "x"
        case Error(_):
            pytest.fail("expected Ok")

    match L.down.to_result(L.up.failure("boom")):
        case Ok(_):
            pytest.fail("expected Error")
        case Error(error):
            assert error == "boom"


def test_to_result_on_pending_raises() -> None:
    with pytest.raises(NotReadyError):
        L.down.to_result(Promise())


def test_or_else_ignores_error_to_data() -> None:
    p = Promise(error_to_data=lambda e: "fallback")
    p.resolve_failure("boom")
    assert L.down.or_else(p, "default") == "default"
    assert L.down.or_else(L.up.unit("data"), "default") == "data"


def test_wait_on_settled_promise() -> None:
    async def run() -> None:
        result = await L.down.wait(L.up.unit(7))
        assert result.unwrap() == 7

    asyncio.run(run())


def test_wait_on_promise_settled_later() -> None:
    async def run() -> None:
        p = Promise()
        asyncio.get_running_loop().call_later(0.01, p.resolve_failure, "late")
        match await L.down.wait(p):
            case Error(error):
                assert error == "late"
            case Ok(_):
                pytest.fail("expected Error")

    asyncio.run(run())


def test_wait_on_promise_settled_from_thread() -> None:
    async def run() -> None:
        p = Promise()
        timer = threading.Timer(0.01, p.resolve_success, args=("threaded",))
        timer.start()
        result = await asyncio.wait_for(L.down.wait(p), timeout=5)
        timer.join()
        assert result.unwrap() == "threaded"

    asyncio.run(run())


def test_to_result_on_pending_leaves_no_listener() -> None:
    p = Promise()
    for _ in range(1000):
        with pytest.raises(NotReadyError):
            L.down.to_result(p)
        with pytest.raises(NotReadyError):
            L.down.or_else(p, "default")
    assert p._finish_listeners == []

    seen = []
    p.finish(lambda *args: seen.append(args))
    p.resolve_success("done")
    assert seen == [(State.SUCCEEDED, "done", None)]
    assert L.down.to_result(p).unwrap() == "done"


def test_abandoned_wait_does_not_break_producer() -> None:
    p = Promise()

    async def run() -> None:
        with pytest.raises(TimeoutError):
            await asyncio.wait_for(L.down.wait(p), timeout=0.01)

    asyncio.run(run())

    seen = []
    p.finish(lambda *args: seen.append(args))
    p.resolve_success(1)

    assert seen == [(State.SUCCEEDED, 1, None)]
    assert p.data() == 1
