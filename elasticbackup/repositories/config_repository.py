import os
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from elasticbackup.models import BackupConfig
from elasticbackup.models.errors import PreconditionError
from elasticbackup.utils.yaml_loader import get_yaml_instance

DEFAULT_CONFIG_PATH = "/etc/elasticbackup.yaml"


class ConfigRepository:
    def __init__(self, file_path: str = DEFAULT_CONFIG_PATH):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def load(self) -> BackupConfig:
        config = self.read()
        self.validate(config)
        return config

    def read(self) -> BackupConfig:
        """Decode the file without checking required options."""
        if not os.path.isfile(path=Path(self.file_path)):
            raise PreconditionError(f"Configuration file {self.file_path} not found.")
        with open(self.file_path, "r") as f:
            try:
                data = self.yaml.load(f) or {}
            except YAMLError as e:
                raise PreconditionError(f"Invalid configuration file {self.file_path}: {e}") from e
        if not isinstance(data, dict):
            raise PreconditionError(f"Invalid configuration file {self.file_path}: expected a mapping")
        try:
            return BackupConfig(**data)
        except Exception as e:
            raise PreconditionError(f"Invalid configuration file {self.file_path}: {e}") from e

    @staticmethod
    def validate(config: BackupConfig) -> None:
        if not config.repository.name:
            raise PreconditionError("Missing configuration repository.name")
        if not config.snapshot_prefix:
            raise PreconditionError("Missing configuration snapshot_prefix")
        if config.preserve_count < 0:
            raise PreconditionError(f"Invalid configuration preserve_count: {config.preserve_count} (must be >= 0)")
