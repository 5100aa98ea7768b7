"""Configuration boundary tests."""

from __future__ import annotations

import os

import pytest

from usecase_kit.config import MAX_CONCURRENCY_ENV, Config
from usecase_kit.errors import ConfigurationError

pytestmark = pytest.mark.unit


def test_default_config_is_unbounded() -> None:
    assert Config().max_concurrency is None


@pytest.mark.parametrize("bad", [0, -1])
def test_non_positive_bound_raises_with_hint(bad: int) -> None:
    with pytest.raises(ConfigurationError, match="max_concurrency") as exc:
        Config(max_concurrency=bad)
    assert exc.value.hint is not None


def test_config_is_frozen() -> None:
    cfg = Config(max_concurrency=2)
    with pytest.raises(AttributeError):
        cfg.max_concurrency = 3  # type: ignore[misc]


def test_from_env_reads_bound(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_CONCURRENCY_ENV, " 4 ")

    assert Config.from_env().max_concurrency == 4


def test_from_env_unset_or_blank_is_unbounded(monkeypatch: pytest.MonkeyPatch) -> None:
    assert Config.from_env().max_concurrency is None
    monkeypatch.setenv(MAX_CONCURRENCY_ENV, "")
    assert Config.from_env().max_concurrency is None


def test_from_env_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_CONCURRENCY_ENV, "lots")

    with pytest.raises(ConfigurationError, match="must be an integer") as exc:
        Config.from_env()
    assert exc.value.hint is not None
    assert MAX_CONCURRENCY_ENV in exc.value.hint


def test_from_env_validates_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_CONCURRENCY_ENV, "0")

    with pytest.raises(ConfigurationError):
        Config.from_env()


@pytest.mark.allow_dotenv
def test_from_env_loads_dotenv_file(
    tmp_path, monkeypatch: pytest.MonkeyPatch, request: pytest.FixtureRequest
) -> None:
    (tmp_path / ".env").write_text(f"{MAX_CONCURRENCY_ENV}=3\n")
    monkeypatch.chdir(tmp_path)
    # load_dotenv writes os.environ directly, outside monkeypatch's undo log.
    request.addfinalizer(lambda: os.environ.pop(MAX_CONCURRENCY_ENV, None))

    assert Config.from_env().max_concurrency == 3
