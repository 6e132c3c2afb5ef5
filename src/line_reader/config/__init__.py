from .loader import ConfigError, default_config, load_config
from .models import AppConfig, InputConfig, LoggingConfig, OutputConfig

# Config exports are intentionally small.
__all__ = ["AppConfig", "ConfigError", "InputConfig", "LoggingConfig", "OutputConfig", "default_config", "load_config"]
