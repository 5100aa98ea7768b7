"""Use case contracts: the entry points to the domain layer."""

from __future__ import annotations

from usecase_kit.usecases.base import UseCase
from usecase_kit.usecases.variants import (
    UseCaseNoParams,
    UseCaseResult,
    UseCaseResultNoParams,
)

__all__ = [
    "UseCase",
    "UseCaseNoParams",
    "UseCaseResult",
    "UseCaseResultNoParams",
]
