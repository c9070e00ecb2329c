import logging

from elasticbackup.clients.elasticsearch_client import ElasticsearchClient
from elasticbackup.models import SnapshotInfo
from elasticbackup.models.errors import ApiError, ElasticBackupError, SnapshotCreationError
from elasticbackup.models.snapshot import SUCCESS_STATE
from elasticbackup.utils.logging import setup_logger


class SnapshotCreator:
    def __init__(self, client: ElasticsearchClient):
        self.client: ElasticsearchClient = client
        self.logger: logging.Logger = setup_logger("SnapshotCreator")

    def exists(self, repository: str, name: str) -> bool:
        return any(s.snapshot == name for s in self.client.list_snapshots(repository))

    def create(self, repository: str, name: str) -> SnapshotInfo:
        try:
            snapshot = self.client.create_snapshot(repository, name)
        except ApiError as e:
            raise SnapshotCreationError(f"Failed to create snapshot '{name}' : {e.error}") from e
        except ElasticBackupError as e:
            raise SnapshotCreationError(f"Failed to create snapshot '{name}' : {e}") from e
        if snapshot.state != SUCCESS_STATE:
            raise SnapshotCreationError(f"Failed to create snapshot '{name}' : state {snapshot.state}")
        self.logger.info(f"Snapshot '{name}' created")
        return snapshot
