from pydantic.dataclasses import dataclass

SUCCESS_STATE = "SUCCESS"

@dataclass(frozen=True)
class SnapshotInfo:
    snapshot: str
    state: str | None = None #SUCCESS, IN_PROGRESS, PARTIAL, FAILED...


@dataclass(frozen=True)
class SnapshotList:
    snapshots: list[SnapshotInfo]


@dataclass(frozen=True)
class SnapshotCreated:
    snapshot: SnapshotInfo
