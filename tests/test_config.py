"""Tests for environment-driven settings."""

from pathlib import Path

from freedom_calculators.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.period_cap == 600
    assert s.newton_tolerance == 1e-6
    assert s.newton_max_iterations == 100
    assert s.rpn_calculator_url == "https://mscottsewell.github.io/HP12c/"
    assert s.storage_dir == Path.home() / ".freedom_calculators"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("FREEDOM_PERIOD_CAP", "120")
    monkeypatch.setenv("FREEDOM_STORAGE_DIR", str(tmp_path))
    monkeypatch.setenv("FREEDOM_LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.period_cap == 120
    assert s.storage_dir == tmp_path
    assert s.log_level == "DEBUG"
