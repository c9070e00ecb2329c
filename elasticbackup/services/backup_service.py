import logging
import time
from typing import override

from elasticbackup.clients.elasticsearch_client import ElasticsearchClient
from elasticbackup.models import BackupConfig, BackupOutcome, PruneReport, RunContext
from elasticbackup.models.errors import ElasticBackupError
from elasticbackup.services.health_checker import HealthChecker
from elasticbackup.services.notifier import Notifier
from elasticbackup.services.repository_ensurer import RepositoryEnsurer
from elasticbackup.services.retention_pruner import RetentionPruner
from elasticbackup.services.service import Service
from elasticbackup.services.snapshot_creator import SnapshotCreator
from elasticbackup.utils.logging import setup_logger


class BackupService(Service):
    def __init__(self, config: BackupConfig, context: RunContext | None = None, dry_run: bool = False):
        self.config: BackupConfig = config
        self.context: RunContext = context or RunContext()
        self.dry_run: bool = dry_run
        self.logger: logging.Logger = setup_logger("BackupService")
        self.client: ElasticsearchClient = ElasticsearchClient(
            config.cluster_url,
            timeout=config.request_timeout,
            snapshot_timeout=config.snapshot_timeout,
        )
        self.notifier: Notifier = Notifier(config.webhook_url, self.context)
        self.health: HealthChecker = HealthChecker(self.client)
        self.repositories: RepositoryEnsurer = RepositoryEnsurer(self.client, dry_run)
        self.snapshots: SnapshotCreator = SnapshotCreator(self.client)
        self.pruner: RetentionPruner = RetentionPruner(
            self.client,
            self.notifier,
            config.snapshot_prefix,
            config.preserve_count,
            dry_run,
        )

    @property
    def snapshot_name(self) -> str:
        return self.context.snapshot_name(self.config.snapshot_prefix)

    @override
    def run(self) -> BackupOutcome:
        started = time.monotonic()
        try:
            outcome = self.backup()
        except ElasticBackupError as e:
            self.logger.error(str(e))
            self.notifier.notify(str(e))
            raise
        if outcome is not BackupOutcome.CREATED:
            return outcome

        duration = int(time.monotonic() - started)
        self.logger.info(f"Backup completed in {duration} seconds")
        self.notifier.notify(f"ES snapshot {self.snapshot_name} completed in {duration} second(s)")
        return outcome

    def backup(self) -> BackupOutcome:
        repository = self.config.repository.name
        name = self.snapshot_name

        self.health.ensure_healthy()
        missing = self.repositories.ensure(self.config.repository)
        if missing and self.dry_run:
            return BackupOutcome.DRY_RUN

        if self.snapshots.exists(repository, name):
            self.logger.info(f"Snapshot '{name}' already in progress/done, skip")
            return BackupOutcome.ALREADY_EXISTS

        if self.dry_run:
            self.logger.info(f"Dry run mode. Snapshot '{name}' has not been created")
            self.prune(repository)
            return BackupOutcome.DRY_RUN

        self.snapshots.create(repository, name)
        self.prune(repository)
        return BackupOutcome.CREATED

    def prune(self, repository: str) -> PruneReport:
        try:
            snapshots = self.client.list_snapshots(repository)
        except ElasticBackupError as e:
            message = f"Unable to refresh snapshot list, pruning skipped : {e}"
            self.logger.error(message)
            self.notifier.notify(message)
            return PruneReport()
        return self.pruner.prune(repository, snapshots)
