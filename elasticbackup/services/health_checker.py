import logging

from elasticbackup.clients.elasticsearch_client import ElasticsearchClient
from elasticbackup.models import ClusterHealthStatus
from elasticbackup.models.errors import ConnectivityError, ElasticBackupError
from elasticbackup.utils.logging import setup_logger


class HealthChecker:
    def __init__(self, client: ElasticsearchClient):
        self.client: ElasticsearchClient = client
        self.logger: logging.Logger = setup_logger("HealthChecker")

    def check(self) -> ClusterHealthStatus:
        try:
            health = self.client.cluster_health()
        except ElasticBackupError as e:
            self.logger.warning(f"Unable to read cluster health: {e}")
            return ClusterHealthStatus.UNKNOWN
        return ClusterHealthStatus.parse(health.status)

    def ensure_healthy(self) -> ClusterHealthStatus:
        status = self.check()
        if not status.is_available:
            raise ConnectivityError(f"Elasticsearch cluster {self.client.base_url} seems down")
        self.logger.info(f"Elasticsearch cluster {self.client.base_url} is up (status : {status.value})")
        return status
