#!filepath: spaceloop/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .scheduler_config import SchedulerConfig
from .demo_config import DemoConfig

# 环境变量覆盖：ENV 名 → (section, field)
ENV_OVERRIDES = {
    "SPACELOOP_BUDGET_SECONDS": ("scheduler", "budget_seconds"),
    "SPACELOOP_LOG_LEVEL": ("log", "level"),
}


def default_config_path() -> str:
    """
    返回包内默认配置：
    spaceloop/config/app_config.py → spaceloop/config/base.yml
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    scheduler: SchedulerConfig = SchedulerConfig()
    demo: DemoConfig = DemoConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 spaceloop/config/base.yml
        - 不依赖当前工作目录的配置文件，但会读取当前目录的 .env
        - 环境变量优先于 YAML
        """
        # 1) 先加载 .env（不覆盖已存在的环境变量）
        load_dotenv()

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 环境变量注入
        for env, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env)
            if value is not None:
                raw.setdefault(section, {})[key] = value

        return cls(**raw)
