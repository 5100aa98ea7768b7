"""Configuration: frozen settings for fan-out helpers."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import find_dotenv, load_dotenv

from usecase_kit.errors import ConfigurationError

MAX_CONCURRENCY_ENV = "USECASE_KIT_MAX_CONCURRENCY"


@dataclass(frozen=True)
class Config:
    """Immutable configuration for usecase-kit helpers.

    Example:
        config = Config(max_concurrency=8)
        outputs = await execute_parallelly(ids, fetch, config=config)
    """

    #: Upper bound on simultaneously running operations; *None* is unbounded.
    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ConfigurationError(
                f"max_concurrency must be ≥ 1, got {self.max_concurrency}",
                hint="Use None for unbounded fan-out.",
            )

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from the environment (and a project ``.env`` file)."""
        load_dotenv(find_dotenv(usecwd=True))
        raw = os.environ.get(MAX_CONCURRENCY_ENV, "").strip()
        if not raw:
            return cls()
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(
                f"{MAX_CONCURRENCY_ENV} must be an integer, got {raw!r}",
                hint=f"Unset {MAX_CONCURRENCY_ENV} for unbounded fan-out.",
            ) from None
        return cls(max_concurrency=value)
