"""usecase-kit: Clean Architecture use cases with a tri-state Result.

Public API:
    - Result: Running / Success / Error outcome of an operation
    - safe_call(): contain a failing call as an Error
    - execute_parallelly(): ordered fan-out/join over async work
    - combined_call(): cached-then-remote stream of three Results
    - UseCase family: execution units of the domain layer
"""

from __future__ import annotations

import logging

from usecase_kit.config import Config
from usecase_kit.errors import (
    ConfigurationError,
    ResultContractError,
    UseCaseKitError,
)
from usecase_kit.execution import combined_call, execute_parallelly, safe_call
from usecase_kit.result import (
    Error,
    ErrorResult,
    Result,
    Running,
    Success,
    is_result,
)
from usecase_kit.usecases import (
    UseCase,
    UseCaseNoParams,
    UseCaseResult,
    UseCaseResultNoParams,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("usecase-kit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("usecase_kit").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Error",
    "ErrorResult",
    "Result",
    "ResultContractError",
    "Running",
    "Success",
    "UseCase",
    "UseCaseKitError",
    "UseCaseNoParams",
    "UseCaseResult",
    "UseCaseResultNoParams",
    "combined_call",
    "execute_parallelly",
    "is_result",
    "safe_call",
]
