from unittest.mock import MagicMock, call

import pytest
from elasticbackup.models import Acknowledged, SnapshotInfo
from elasticbackup.models.errors import ApiError, ConnectivityError
from elasticbackup.services.retention_pruner import RetentionPruner, select_expired


def snapshots(*names):
    return [SnapshotInfo(snapshot=n, state="SUCCESS") for n in names]


@pytest.fixture
def client():
    client = MagicMock()
    client.delete_snapshot.return_value = Acknowledged(acknowledged=True)
    return client


@pytest.fixture
def notifier():
    return MagicMock()


def test_select_expired_oldest_first():
    listing = snapshots("eb-1", "manual-1", "eb-2", "eb-3", "eb-4")
    assert [s.snapshot for s in select_expired(listing, "eb", 2)] == ["eb-1", "eb-2"]


def test_select_expired_does_not_resort():
    listing = snapshots("eb-c", "eb-a", "eb-b")
    assert [s.snapshot for s in select_expired(listing, "eb", 1)] == ["eb-c", "eb-a"]


@pytest.mark.parametrize("count,preserve", [(0, 0), (3, 3), (3, 5), (10, 4), (7, 0)])
def test_select_expired_bound(count, preserve):
    listing = snapshots(*[f"eb-{i}" for i in range(count)])
    expired = select_expired(listing, "eb", preserve)
    assert len(expired) == max(0, count - preserve)
    assert expired == listing[:len(expired)]


def test_select_expired_no_matching_prefix():
    assert select_expired(snapshots("manual-1", "manual-2"), "eb", 0) == []


def test_prune_deletes_expired(client, notifier):
    pruner = RetentionPruner(client, notifier, "eb", 2)
    report = pruner.prune("backup", snapshots("eb-1", "eb-2", "eb-3", "eb-4"))
    assert report.deleted == ["eb-1", "eb-2"]
    assert report.failed == []
    assert client.delete_snapshot.call_args_list == [call("backup", "eb-1"), call("backup", "eb-2")]
    notifier.notify.assert_not_called()


def test_prune_preserve_zero_deletes_all(client, notifier):
    pruner = RetentionPruner(client, notifier, "eb", 0)
    report = pruner.prune("backup", snapshots("eb-1", "other", "eb-2", "eb-3"))
    assert report.deleted == ["eb-1", "eb-2", "eb-3"]
    assert client.delete_snapshot.call_count == 3


def test_prune_below_threshold(client, notifier):
    pruner = RetentionPruner(client, notifier, "eb", 48)
    report = pruner.prune("backup", snapshots("eb-1", "eb-2"))
    assert report.deleted == []
    client.delete_snapshot.assert_not_called()


def test_prune_continues_after_failures(client, notifier):
    def delete_side_effect(repository, name):
        if name == "eb-2":
            return Acknowledged(acknowledged=False)
        if name == "eb-3":
            raise ApiError(404, {"reason": "snapshot missing"})
        if name == "eb-4":
            raise ConnectivityError("connection reset")
        return Acknowledged(acknowledged=True)

    client.delete_snapshot.side_effect = delete_side_effect
    pruner = RetentionPruner(client, notifier, "eb", 1)
    report = pruner.prune("backup", snapshots("eb-1", "eb-2", "eb-3", "eb-4", "eb-5", "eb-6"))

    assert client.delete_snapshot.call_count == 5
    assert report.deleted == ["eb-1", "eb-5"]
    assert report.failed == ["eb-2", "eb-3", "eb-4"]
    assert notifier.notify.call_count == 3
    assert "Failed to remove snapshot eb-3" in notifier.notify.call_args_list[1].args[0]


def test_prune_dry_run(client, notifier):
    pruner = RetentionPruner(client, notifier, "eb", 1, dry_run=True)
    report = pruner.prune("backup", snapshots("eb-1", "eb-2"))
    assert report.deleted == []
    client.delete_snapshot.assert_not_called()
