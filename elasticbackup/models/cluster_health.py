from enum import Enum

from pydantic.dataclasses import dataclass


class ClusterHealthStatus(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "ClusterHealthStatus":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_available(self) -> bool:
        return self in (ClusterHealthStatus.GREEN, ClusterHealthStatus.YELLOW)


@dataclass(frozen=True)
class ClusterHealth:
    status: str
