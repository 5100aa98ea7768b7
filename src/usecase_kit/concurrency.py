"""Concurrency resolution for fan-out helpers.

Keeps a single source of truth for how client-side fan-out is bounded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from usecase_kit.errors import ConfigurationError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from usecase_kit.config import Config


def resolve_concurrency(
    *,
    n_items: int,
    requested: int | None = None,
    config: Config | None = None,
) -> int:
    """Resolve effective concurrency for a fan-out over ``n_items`` inputs.

    Priority:
    1) Explicit ``requested`` bound.
    2) ``config.max_concurrency`` when set.
    3) Default to unbounded up to ``n_items``.

    The result is clamped to ``n_items`` and is at least 1.
    """
    if requested is not None and requested < 1:
        raise ConfigurationError(
            f"concurrency must be ≥ 1, got {requested}",
            hint="Pass None to fall back to Config.max_concurrency.",
        )
    if n_items <= 0:
        return 1
    bound = requested
    if bound is None and config is not None:
        bound = config.max_concurrency
    if bound is None:
        return n_items
    return min(bound, n_items)
