from __future__ import annotations

import asyncio
import logging
import sys
import threading
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from callbackless import Promise  # noqa: E402


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


def timer_promise[T](delay_seconds: float, value: T) -> Promise[T, Failure]:
    """Producer: succeeds with value after delay_seconds on a timer thread."""
    p: Promise[T, Failure] = Promise()
    threading.Timer(delay_seconds, p.resolve_success, args=(value,)).start()
    return p


def fetch_user(user_id: int, *, delay_seconds: float = 0.01) -> Promise[User, Failure]:
    """Producer: fake lookup that fails for negative ids."""
    p: Promise[User, Failure] = Promise()

    def complete() -> None:
        if user_id < 0:
            p.resolve_failure(Failure(f"no user {user_id}"))
        else:
            p.resolve_success(User(id=user_id, name=f"user-{user_id}"))

    threading.Timer(delay_seconds, complete).start()
    return p


def banner(title: str) -> None:
    print(f"\n=== {title} ===")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
