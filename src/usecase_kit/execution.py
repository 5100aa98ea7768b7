"""Async helpers that turn fallible work into ``Result`` values.

- ``safe_call``: contain failures of a single call as ``Error``.
- ``execute_parallelly``: fan out, join, then project outputs in input order.
- ``combined_call``: stream cached data first, then the remote outcome.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from usecase_kit.concurrency import resolve_concurrency
from usecase_kit.errors import ResultContractError
from usecase_kit.result import Error, ErrorResult, Running, is_result

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
    import contextvars

    from usecase_kit.config import Config
    from usecase_kit.result import Result

log = logging.getLogger(__name__)


async def safe_call[T](
    call: Callable[[], Awaitable[Result[T]]], error_message: str
) -> Result[T]:
    """Await ``call`` and convert any exception into an ``Error``.

    The returned Result is passed through unchanged. Cancellation is not an
    ``Exception`` and keeps propagating.

    Example:
        result = await safe_call(lambda: api.fetch_user(uid), "Loading user failed")
    """
    try:
        result = await call()
    except Exception as e:
        log.debug("safe_call converted failure: %s", error_message, exc_info=True)
        return Error(ErrorResult(error_message, e))
    if not is_result(result):
        log.debug("safe_call got non-Result %s", type(result).__name__)
        return Error(
            ErrorResult(
                error_message,
                ResultContractError(
                    f"Expected a Result, got {type(result).__name__}",
                    hint="safe_call wraps calls that return Running/Success/Error.",
                ),
            )
        )
    return result


async def execute_parallelly[I, R, O](
    inputs: Iterable[I],
    async_operation: Callable[[I], Awaitable[R]],
    projection: Callable[[R], O | None] | None = None,
    *,
    context: contextvars.Context | None = None,
    concurrency: int | None = None,
    config: Config | None = None,
) -> list[O]:
    """Run ``async_operation`` for every input concurrently, then project.

    All operations are awaited before any projection runs. Outputs are
    projected in input order regardless of completion order, and ``None``
    projections are dropped. ``projection=None`` keeps every non-``None``
    output as is.

    Children run in a ``TaskGroup`` owned by the caller: cancelling the
    caller cancels them, and the first failure cancels the rest and is
    re-raised unwrapped: the lowest-index failure among those that
    completed before the group was cancelled.

    Args:
        inputs: Items to fan out over.
        async_operation: Coroutine function applied to each input.
        projection: Maps each output to the returned value, or ``None`` to drop it.
        context: ``contextvars.Context`` the child tasks run in. Defaults to a
            copy of the caller's context.
        concurrency: Bound on simultaneously running operations.
        config: Fallback for ``concurrency`` via ``Config.max_concurrency``.

    Returns:
        Projected outputs in input order.
    """
    items = list(inputs)
    if not items:
        return []

    limit = resolve_concurrency(
        n_items=len(items), requested=concurrency, config=config
    )
    sem = asyncio.Semaphore(limit)
    log.debug("Fan-out over %d input(s) concurrency=%d", len(items), limit)

    async def _run(item: I) -> R:
        async with sem:
            return await async_operation(item)

    tasks: list[asyncio.Task[R]] = []
    failure: BaseException | None = None
    try:
        async with asyncio.TaskGroup() as tg:
            for item in items:
                # Each child gets its own copy, as asyncio does for context=None.
                child_ctx = None if context is None else context.copy()
                tasks.append(tg.create_task(_run(item), context=child_ctx))
    except BaseExceptionGroup as group:
        failure = _first_failure(tasks, group)
    if failure is not None:
        # Raised outside the handler so the group is not chained as context.
        raise failure

    outputs: list[O] = []
    for task in tasks:
        value = task.result()
        projected = value if projection is None else projection(value)
        if projected is not None:
            outputs.append(projected)
    return outputs


def _first_failure(
    tasks: list[asyncio.Task[Any]], group: BaseExceptionGroup
) -> BaseException:
    """Pick the lowest-index failure among tasks that finished before
    the group was cancelled."""
    for task in tasks:
        if task.done() and not task.cancelled():
            exc = task.exception()
            if exc is not None:
                return exc
    return group.exceptions[0]


async def combined_call[T](
    local_call: Callable[[], Awaitable[T | None]],
    remote_call: Callable[[], Awaitable[Result[T]]],
) -> AsyncIterator[Result[T]]:
    """Yield exactly three states: loading, cached, remote outcome.

    1. ``Running()`` before anything is loaded.
    2. ``Running(cached)`` once ``local_call`` returns (cached may be ``None``).
    3. The remote result; an ``Error`` carries the cached data instead of its own.

    The lookups run one after the other, and only as the consumer pulls
    values: stopping early leaves later lookups unexecuted. Wrap consumption
    in ``contextlib.aclosing`` to close the generator deterministically.
    Exceptions raised by either lookup propagate to the consumer; pre-wrap
    ``remote_call`` with ``safe_call`` to contain them.

    Example:
        async with aclosing(combined_call(cache.get, fetch_remote)) as states:
            async for state in states:
                render(state)
    """
    yield Running()

    # TODO: run local and remote lookups concurrently while keeping the
    # Running() -> Running(cached) -> remote emission order.
    cached = await local_call()
    log.debug("combined_call local lookup done (cached=%s)", cached is not None)
    yield Running(cached)

    remote = await remote_call()
    if isinstance(remote, Error):
        log.debug("combined_call remote failed; falling back to cached data")
        remote = remote.with_data(cached)
    yield remote


__all__ = ["combined_call", "execute_parallelly", "safe_call"]
