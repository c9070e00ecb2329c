import logging

from elasticbackup.clients.elasticsearch_client import ElasticsearchClient
from elasticbackup.models import RepositoryDescriptor
from elasticbackup.models.errors import ApiError, RepositoryError
from elasticbackup.utils.logging import setup_logger


class RepositoryEnsurer:
    def __init__(self, client: ElasticsearchClient, dry_run: bool = False):
        self.client: ElasticsearchClient = client
        self.logger: logging.Logger = setup_logger("RepositoryEnsurer")
        self.dry_run: bool = dry_run

    def exists(self, name: str) -> bool:
        return name in self.client.list_repositories()

    def ensure(self, descriptor: RepositoryDescriptor) -> bool:
        """Create the repository when the cluster does not know it yet.

        An existing repository is used as is: its type and settings are not
        compared with the configured ones. Returns True when the repository
        was missing, which in dry-run mode means it would have been created.
        """
        if self.exists(descriptor.name):
            return False

        self.logger.info(f"Repository {descriptor.name} not found, create it from settings")
        if not descriptor.type:
            raise RepositoryError("Missing configuration repository.type for repository creation")
        if not descriptor.settings:
            raise RepositoryError("Missing configuration repository.settings for repository creation")

        if self.dry_run:
            self.logger.info(f"Dry run mode. Repository [{descriptor.type}:{descriptor.name}] has not been created")
            return True

        label = f"[{descriptor.type}:{descriptor.name}]"
        try:
            response = self.client.create_repository(descriptor.name, descriptor.type, descriptor.settings)
        except ApiError as e:
            raise RepositoryError(f"Repository {label} creation failed : {e.error}") from e
        if not response.acknowledged:
            raise RepositoryError(f"Repository {label} creation failed : {response}")
        self.logger.info(f"Repository {label} created on ES")
        return True
