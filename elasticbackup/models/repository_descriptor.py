from dataclasses import field
from typing import Any

from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

@dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class RepositoryDescriptor:
    name: str | None = "backup"
    type: str | None = "fs"
    settings: dict[str, Any] | None = field(default_factory=dict)
