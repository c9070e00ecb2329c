from .backup_config import BackupConfig
from .cluster_health import ClusterHealth, ClusterHealthStatus
from .outcome import BackupOutcome, PruneReport
from .repository_descriptor import RepositoryDescriptor
from .responses import Acknowledged
from .run_context import RunContext
from .snapshot import SnapshotCreated, SnapshotInfo, SnapshotList

__all__ = [
    "Acknowledged",
    "BackupConfig",
    "BackupOutcome",
    "ClusterHealth",
    "ClusterHealthStatus",
    "PruneReport",
    "RepositoryDescriptor",
    "RunContext",
    "SnapshotCreated",
    "SnapshotInfo",
    "SnapshotList",
]
