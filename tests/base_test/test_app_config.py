#!filepath: tests/base_test/test_app_config.py
from datetime import timedelta

import yaml
import pytest
from pydantic import ValidationError

from spaceloop.config import AppConfig
from spaceloop.config.log_config import LogConfig
from spaceloop.config.scheduler_config import SchedulerConfig
from spaceloop.config.demo_config import DemoConfig


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试，
    pytest 会自动清理该目录。
    """
    data = {
        "log": {
            "dir": "logs",
            "rotation": "1 day",
            "retention": "30 days",
            "level": "DEBUG"
        },
        "scheduler": {
            "budget_seconds": 3.5,
            "trace": False,
            "instrument": True
        },
        "demo": {
            "fib_range_low": 1,
            "fib_range_high": 12,
            "delay_seconds": 0
        }
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("SPACELOOP_BUDGET_SECONDS", raising=False)
    monkeypatch.delenv("SPACELOOP_LOG_LEVEL", raising=False)


def test_app_config_load(sample_config_file):
    """测试 AppConfig 是否能正确加载 YAML"""
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.scheduler, SchedulerConfig)
    assert isinstance(cfg.demo, DemoConfig)


def test_values_read(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "DEBUG"
    assert cfg.log.dir == "logs"
    assert cfg.scheduler.budget == timedelta(seconds=3.5)
    assert cfg.scheduler.trace is False
    assert cfg.scheduler.instrument is True
    assert cfg.demo.fib_range == (1, 12)
    assert cfg.demo.delay_seconds == 0


def test_packaged_default_config():
    """不传 path 时使用包内 base.yml"""
    cfg = AppConfig.load()

    assert cfg.scheduler.budget_seconds == 12
    assert cfg.demo.fib_range == (1, 100)
    assert cfg.demo.delay_seconds == 0.5
    assert cfg.log.dir is None


def test_env_overrides_yaml(sample_config_file, monkeypatch):
    monkeypatch.setenv("SPACELOOP_BUDGET_SECONDS", "0.25")
    monkeypatch.setenv("SPACELOOP_LOG_LEVEL", "WARNING")

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.scheduler.budget_seconds == 0.25
    assert cfg.log.level == "WARNING"


def test_missing_sections_use_defaults(tmp_path):
    f = tmp_path / "partial.yaml"
    f.write_text(yaml.safe_dump({"log": {"level": "ERROR"}}))

    cfg = AppConfig.load(path=str(f))

    assert cfg.log.level == "ERROR"
    assert cfg.scheduler == SchedulerConfig()
    assert cfg.demo == DemoConfig()


def test_missing_file_should_fail(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yaml"))


def test_negative_budget_should_fail(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"scheduler": {"budget_seconds": -1}}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))


def test_inverted_range_should_fail():
    with pytest.raises(ValidationError):
        DemoConfig(fib_range_low=50, fib_range_high=10)


def test_nan_budget_from_env_should_fail(sample_config_file, monkeypatch):
    monkeypatch.setenv("SPACELOOP_BUDGET_SECONDS", "nan")

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(sample_config_file))
