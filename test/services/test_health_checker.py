from unittest.mock import MagicMock

import pytest
from elasticbackup.models import ClusterHealth, ClusterHealthStatus
from elasticbackup.models.errors import ConnectivityError, ResponseDecodeError
from elasticbackup.services.health_checker import HealthChecker


@pytest.fixture
def client():
    client = MagicMock()
    client.base_url = "http://es:9200"
    return client


@pytest.mark.parametrize("status,expected", [
    ("green", ClusterHealthStatus.GREEN),
    ("yellow", ClusterHealthStatus.YELLOW),
    ("red", ClusterHealthStatus.RED),
    ("purple", ClusterHealthStatus.UNKNOWN),
])
def test_check(client, status, expected):
    client.cluster_health.return_value = ClusterHealth(status=status)
    assert HealthChecker(client).check() is expected


def test_check_unreachable(client):
    client.cluster_health.side_effect = ConnectivityError("connection refused")
    assert HealthChecker(client).check() is ClusterHealthStatus.UNKNOWN


def test_check_undecodable(client):
    client.cluster_health.side_effect = ResponseDecodeError("garbage")
    assert HealthChecker(client).check() is ClusterHealthStatus.UNKNOWN


@pytest.mark.parametrize("status", ["green", "yellow"])
def test_ensure_healthy_accepts(client, status):
    client.cluster_health.return_value = ClusterHealth(status=status)
    assert HealthChecker(client).ensure_healthy().value == status


@pytest.mark.parametrize("status", ["red", "", "unknown"])
def test_ensure_healthy_rejects(client, status):
    client.cluster_health.return_value = ClusterHealth(status=status)
    with pytest.raises(ConnectivityError, match="Elasticsearch cluster http://es:9200 seems down"):
        HealthChecker(client).ensure_healthy()
