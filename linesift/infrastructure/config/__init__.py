from .config_manager import ConfigManager, DEFAULT_CONFIG
from .environment_config import EnvironmentConfig
from .config_validator import ConfigValidator

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG',
    'EnvironmentConfig',
    'ConfigValidator'
]
