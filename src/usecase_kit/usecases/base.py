"""Use case contract (Interactor in Clean Architecture terms).

A use case is an execution unit of the domain layer: it takes typed
parameters and produces a typed value asynchronously. Every use case in an
application implements this contract, which makes use cases the entry
points to the domain layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
import time

log = logging.getLogger(__name__)


class UseCase[T, P](ABC):
    """Base class for use cases taking ``P`` and producing ``T``.

    Implementers override :meth:`execute`; callers use :meth:`invoke` or
    call the instance directly.

    Example:
        class GetActiveVehicleCode(UseCase[str, int]):
            async def execute(self, params: int) -> str:
                vehicle = await self.repository.active_vehicle(params)
                return vehicle.code

        code = await GetActiveVehicleCode()(driver_id)
    """

    @abstractmethod
    async def execute(self, params: P) -> T:
        """Run the use case."""
        ...

    async def invoke(self, params: P) -> T:
        """Execute the use case with ``params``."""
        name = type(self).__name__
        start = time.perf_counter()
        log.debug("Invoking %s", name)
        try:
            return await self.execute(params)
        finally:
            log.debug(
                "%s finished in %.3fs", name, time.perf_counter() - start
            )

    async def __call__(self, params: P) -> T:
        return await self.invoke(params)
