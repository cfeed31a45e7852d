from .app_config import AppConfig
from .log_config import LogConfig
from .scheduler_config import SchedulerConfig
from .demo_config import DemoConfig

__all__ = ["AppConfig", "LogConfig", "SchedulerConfig", "DemoConfig"]
