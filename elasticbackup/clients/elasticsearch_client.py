import logging
from typing import Any

import requests
from pydantic import ValidationError

from elasticbackup.models import Acknowledged, ClusterHealth, SnapshotCreated, SnapshotInfo, SnapshotList
from elasticbackup.models.errors import ApiError, ConnectivityError, ResponseDecodeError

logger = logging.getLogger(__name__)


class ElasticsearchClient:
    def __init__(self, base_url: str = "http://localhost:9200", timeout: float = 30, snapshot_timeout: float = 3600):
        self.base_url: str = base_url.rstrip("/")
        self.timeout: float = timeout
        self.snapshot_timeout: float = snapshot_timeout

    def cluster_health(self) -> ClusterHealth:
        return self._decode(ClusterHealth, self._request("GET", "/_cluster/health"))

    def list_repositories(self) -> dict[str, Any]:
        payload = self._request("GET", "/_snapshot/")
        if not isinstance(payload, dict):
            raise ResponseDecodeError(f"Unexpected repository listing: {payload!r}")
        return payload

    def create_repository(self, name: str, repo_type: str, settings: dict[str, Any]) -> Acknowledged:
        body = {"type": repo_type, "settings": settings}
        return self._decode(Acknowledged, self._request("PUT", f"/_snapshot/{name}", json=body))

    def list_snapshots(self, repository: str) -> list[SnapshotInfo]:
        payload = self._request("GET", f"/_snapshot/{repository}/_all")
        return self._decode(SnapshotList, payload).snapshots

    def create_snapshot(self, repository: str, name: str) -> SnapshotInfo:
        payload = self._request(
            "PUT",
            f"/_snapshot/{repository}/{name}",
            params={"wait_for_completion": "true"},
            timeout=self.snapshot_timeout,
        )
        return self._decode(SnapshotCreated, payload).snapshot

    def delete_snapshot(self, repository: str, name: str) -> Acknowledged:
        return self._decode(Acknowledged, self._request("DELETE", f"/_snapshot/{repository}/{name}"))

    def _request(self, method: str, path: str, json: Any = None, params: dict | None = None, timeout: float | None = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            response = requests.request(
                method,
                url,
                json=json,
                params=params,
                timeout=timeout or self.timeout,
            )
        except requests.RequestException as e:
            raise ConnectivityError(f"{method} {url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            if not response.ok:
                raise ApiError(response.status_code, response.text) from e
            raise ResponseDecodeError(f"{method} {url} returned a non-JSON body: {response.text!r}") from e

        if not response.ok:
            error = payload.get("error", payload) if isinstance(payload, dict) else payload
            raise ApiError(response.status_code, error)
        return payload

    @staticmethod
    def _decode(model: type, payload: Any) -> Any:
        if not isinstance(payload, dict):
            raise ResponseDecodeError(f"Expected a JSON object for {model.__name__}, got {payload!r}")
        try:
            return model(**payload)
        except (ValidationError, TypeError) as e:
            raise ResponseDecodeError(f"Invalid {model.__name__} response: {e}") from e
