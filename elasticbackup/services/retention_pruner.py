import logging

from elasticbackup.clients.elasticsearch_client import ElasticsearchClient
from elasticbackup.models import PruneReport, SnapshotInfo
from elasticbackup.models.errors import ApiError, ElasticBackupError, SnapshotDeletionError
from elasticbackup.services.notifier import Notifier
from elasticbackup.utils.logging import setup_logger


def select_expired(snapshots: list[SnapshotInfo], prefix: str, preserve_count: int) -> list[SnapshotInfo]:
    """Oldest prefixed snapshots beyond ``preserve_count``, in listing order."""
    matching = [s for s in snapshots if s.snapshot.startswith(prefix)]
    excess = len(matching) - preserve_count
    if excess <= 0:
        return []
    return matching[:excess]


class RetentionPruner:
    def __init__(self, client: ElasticsearchClient, notifier: Notifier, prefix: str, preserve_count: int, dry_run: bool = False):
        self.client: ElasticsearchClient = client
        self.notifier: Notifier = notifier
        self.prefix: str = prefix
        self.preserve_count: int = preserve_count
        self.dry_run: bool = dry_run
        self.logger: logging.Logger = setup_logger("RetentionPruner")

    def prune(self, repository: str, snapshots: list[SnapshotInfo]) -> PruneReport:
        report = PruneReport()
        count = sum(1 for s in snapshots if s.snapshot.startswith(self.prefix))
        self.logger.info(f"Current snapshot count : {count}/{self.preserve_count}")

        expired = select_expired(snapshots, self.prefix, self.preserve_count)
        if not expired:
            return report

        self.logger.info(f"Start pruning {len(expired)} snapshot(s)")
        for snapshot in expired:
            if self.dry_run:
                self.logger.info(f"Dry run mode. Snapshot {snapshot.snapshot} has not been pruned")
                continue
            try:
                self.delete(repository, snapshot.snapshot)
                report.deleted.append(snapshot.snapshot)
                self.logger.info(f"Snapshot {snapshot.snapshot} pruned")
            except SnapshotDeletionError as e:
                report.failed.append(snapshot.snapshot)
                self.logger.error(str(e))
                self.notifier.notify(str(e))
        return report

    def delete(self, repository: str, name: str) -> None:
        try:
            response = self.client.delete_snapshot(repository, name)
        except ApiError as e:
            raise SnapshotDeletionError(f"Failed to remove snapshot {name} : {e.error}") from e
        except ElasticBackupError as e:
            raise SnapshotDeletionError(f"Failed to remove snapshot {name} : {e}") from e
        if not response.acknowledged:
            raise SnapshotDeletionError(f"Failed to remove snapshot {name} : not acknowledged")
