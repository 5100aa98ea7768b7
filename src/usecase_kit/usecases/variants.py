"""Convenience specializations of :class:`UseCase`.

The no-params variants fix ``P`` to ``None`` so callers do not pass a unit
value; the result variants fix ``T`` to a :data:`~usecase_kit.result.Result`.
"""

from __future__ import annotations

from usecase_kit.result import Result
from usecase_kit.usecases.base import UseCase


class UseCaseNoParams[T](UseCase[T, None]):
    """Use case without parameters; ``invoke()`` equals ``invoke(None)``."""

    async def invoke(self, params: None = None) -> T:
        return await super().invoke(params)

    async def __call__(self, params: None = None) -> T:
        return await self.invoke(params)


class UseCaseResult[T, P](UseCase[Result[T], P]):
    """Use case taking ``P`` whose output is wrapped in a ``Result``."""


class UseCaseResultNoParams[T](UseCaseNoParams[Result[T]]):
    """Use case without parameters whose output is wrapped in a ``Result``.

    Example:
        class LoadProfile(UseCaseResultNoParams[Profile]):
            async def execute(self, params: None) -> Result[Profile]:
                return await safe_call(self.api.profile, "Loading profile failed")

        result = await LoadProfile()()
    """
