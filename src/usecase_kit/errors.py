"""Exception hierarchy for usecase-kit."""

from __future__ import annotations


class UseCaseKitError(Exception):
    """Base exception for all usecase-kit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(UseCaseKitError):
    """Configuration validation or resolution failed."""


class ResultContractError(UseCaseKitError):
    """A ``Result`` was built or returned in violation of its contract."""
