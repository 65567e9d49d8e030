from .loader import load_config
from .types import BenchConfig, ConfigError, UnsupportedConfigFormatError

__all__ = ["load_config", "BenchConfig", "ConfigError", "UnsupportedConfigFormatError"]
