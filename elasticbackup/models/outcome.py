from dataclasses import dataclass, field
from enum import Enum


class BackupOutcome(str, Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    DRY_RUN = "dry_run"


@dataclass
class PruneReport:
    deleted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
