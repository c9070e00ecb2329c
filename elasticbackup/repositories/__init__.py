from .config_repository import ConfigRepository, DEFAULT_CONFIG_PATH

__all__ = [
    'ConfigRepository',
    'DEFAULT_CONFIG_PATH',
]
