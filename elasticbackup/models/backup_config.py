from dataclasses import field

from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

from elasticbackup.models.repository_descriptor import RepositoryDescriptor

@dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class BackupConfig:
    cluster_url: str = "http://localhost:9200"
    webhook_url: str | None = ""
    snapshot_prefix: str | None = "elasticbackup"
    preserve_count: int = 48
    request_timeout: float = 30
    snapshot_timeout: float = 3600
    log_level: str = "INFO"
    syslog: bool = False
    repository: RepositoryDescriptor = field(default_factory=RepositoryDescriptor)
