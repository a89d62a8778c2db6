"""Tests for constats.common.settings."""

import os

import pytest

from constats.common.constants import DEFAULT_SAMPLE_SIZE
from constats.common.settings import Settings, load_dotenv, load_settings


# ---------------------------------------------------------------------------
# load_dotenv
# ---------------------------------------------------------------------------


def test_load_dotenv_sets_missing_vars(tmp_path, monkeypatch):
    env = tmp_path / ".env"
    env.write_text(
        "# comment\n\nCONSTATS_SEED=17\nCONSTATS_LOG_LEVEL='debug'\nnot a pair\n",
        encoding="utf-8",
    )
    load_dotenv(env)
    assert os.environ["CONSTATS_SEED"] == "17"
    assert os.environ["CONSTATS_LOG_LEVEL"] == "debug"


def test_load_dotenv_does_not_overwrite(tmp_path, monkeypatch):
    monkeypatch.setenv("CONSTATS_SEED", "1")
    env = tmp_path / ".env"
    env.write_text("CONSTATS_SEED=2\n", encoding="utf-8")
    load_dotenv(env)
    assert os.environ["CONSTATS_SEED"] == "1"


def test_load_dotenv_missing_file_is_noop(tmp_path):
    load_dotenv(tmp_path / "absent.env")
    assert "CONSTATS_SEED" not in os.environ


# ---------------------------------------------------------------------------
# load_settings
# ---------------------------------------------------------------------------


def test_load_settings_defaults():
    assert load_settings() == Settings()
    assert Settings().sample_size == DEFAULT_SAMPLE_SIZE


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("CONSTATS_LOG_LEVEL", "INFO")
    monkeypatch.setenv("CONSTATS_SAMPLE_SIZE", "1000")
    monkeypatch.setenv("CONSTATS_SEED", "42")
    assert load_settings() == Settings(log_level="INFO", sample_size=1000, seed=42)


def test_load_settings_blank_values_use_defaults(monkeypatch):
    monkeypatch.setenv("CONSTATS_LOG_LEVEL", "  ")
    monkeypatch.setenv("CONSTATS_SAMPLE_SIZE", "")
    assert load_settings() == Settings()


def test_load_settings_bad_int_raises(monkeypatch):
    monkeypatch.setenv("CONSTATS_SAMPLE_SIZE", "lots")
    with pytest.raises(ValueError, match="CONSTATS_SAMPLE_SIZE"):
        load_settings()
