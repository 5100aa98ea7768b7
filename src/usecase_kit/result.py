"""Tri-state Result for use-case outcomes.

``Running`` reports an operation in flight, ``Success`` and ``Error`` are
terminal. ``Running`` and ``Error`` may carry data so a caller can show a
cached value while a fresher one loads, or keep the last known good value
after a failure.

Example:
    result = Success("Hello World!")
    error = Error(ErrorResult("Some error text"))

    match result:
        case Success(data=data):
            render(data)
        case Error(error=err, data=cached):
            render_error(err, cached)
        case Running(data=cached):
            render_loading(cached)
"""

from __future__ import annotations

import dataclasses
import typing

from usecase_kit.errors import ResultContractError

if typing.TYPE_CHECKING:
    from collections.abc import Callable

T = typing.TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class ErrorResult:
    """Failure description carried by :class:`Error`.

    ``message`` is caller-supplied free text, ``cause`` the originating
    exception if there is one.
    """

    message: str | None = None
    cause: BaseException | None = None


class _ResultOps[T]:
    """Queries shared by every Result variant."""

    __slots__ = ()

    if typing.TYPE_CHECKING:
        data: T | None

    def is_finished(self) -> bool:
        return isinstance(self, Success | Error)

    def is_running(self) -> bool:
        return isinstance(self, Running)

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_error(self) -> bool:
        return isinstance(self, Error)

    def get_or_none(self) -> T | None:
        """Return the data of any variant: the value of a ``Success`` or the
        cached data of ``Running``/``Error`` (which may be ``None``)."""
        return self.data

    def error_or_none(self) -> ErrorResult | None:
        """Return the ``ErrorResult`` if this is an ``Error``."""
        return self.error if isinstance(self, Error) else None


# Variants are not slotted so ``Success[int](5)`` survives typing setting
# ``__orig_class__`` on the frozen instance.
@dataclasses.dataclass(frozen=True)
class Running[T](_ResultOps[T]):
    """Operation in flight, optionally with cached data known so far."""

    data: T | None = None

    def map[R](self, transform: Callable[[T], R]) -> Running[R]:
        """Return a ``Running`` with ``transform`` applied to present data."""
        return Running(None if self.data is None else transform(self.data))

    def __str__(self) -> str:
        return f"Running[cachedData={self.data}]"


@dataclasses.dataclass(frozen=True)
class Success[T](_ResultOps[T]):
    """Operation finished with a value."""

    data: T

    def __post_init__(self) -> None:
        if self.data is None:
            raise ResultContractError(
                "Success requires data",
                hint="Use Running() or Error(...) when there is no value.",
            )

    def map[R](self, transform: Callable[[T], R]) -> Success[R]:
        """Return a ``Success`` holding ``transform(data)``."""
        return Success(transform(self.data))

    def __str__(self) -> str:
        return f"Success[data={self.data}]"


@dataclasses.dataclass(frozen=True)
class Error[T](_ResultOps[T]):
    """Operation failed; ``data`` may hold the last known good value."""

    error: ErrorResult
    data: T | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.error, ErrorResult):
            raise ResultContractError(
                f"Error requires an ErrorResult, got {type(self.error).__name__}",
                hint="Wrap the failure: Error(ErrorResult(message, cause)).",
            )

    def map[R](self, transform: Callable[[T], R]) -> Error[R]:
        """Return an ``Error`` with the same error and transformed data."""
        return Error(
            self.error, None if self.data is None else transform(self.data)
        )

    def with_data(self, data: T | None) -> Error[T]:
        """Return a copy of this ``Error`` carrying ``data`` instead."""
        return dataclasses.replace(self, data=data)

    def __str__(self) -> str:
        return f"Error[exception={self.error.cause}]"


Result = Running[T] | Success[T] | Error[T]

_VARIANTS = (Running, Success, Error)


def is_result(obj: object) -> typing.TypeGuard[Result[typing.Any]]:
    """Return True when ``obj`` is one of the three Result variants."""
    return isinstance(obj, _VARIANTS)


__all__ = [
    "Error",
    "ErrorResult",
    "Result",
    "Running",
    "Success",
    "is_result",
]
