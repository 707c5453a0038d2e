"""
Outcome inspection
==================

Promises about promises: whether one succeeded, and what its error was.
All three wait for the input to settle.
"""

from __future__ import annotations

import typing

from ..promise import Promise


def is_success(source: Promise[typing.Any, typing.Any]) -> Promise[bool, typing.Never]:
    """Succeeds with True if source succeeds, False if it fails. Never fails."""
    target: Promise[bool, typing.Never] = Promise()
    source.succeed(lambda _: target.resolve_success(True))
    source.fail(lambda _: target.resolve_success(False))
    return target


def is_failure(source: Promise[typing.Any, typing.Any]) -> Promise[bool, typing.Never]:
    """Succeeds with True if source fails, False if it succeeds. Never fails."""
    target: Promise[bool, typing.Never] = Promise()
    source.succeed(lambda _: target.resolve_success(False))
    source.fail(lambda _: target.resolve_success(True))
    return target


def get_error[E](source: Promise[typing.Any, E]) -> Promise[E, None]:
    """
    Promise of source's error.

    Succeeds with the error if source fails. If source succeeds there is no
    error to report, so the result fails with None.
    """
    target: Promise[E, None] = Promise()
    source.succeed(lambda _: target.resolve_failure(None))
    source.fail(target.resolve_success)
    return target


__all__ = ("is_success", "is_failure", "get_error")
