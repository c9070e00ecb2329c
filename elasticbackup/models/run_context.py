import socket
from dataclasses import dataclass, field
from datetime import datetime

RUN_DATE_FORMAT = "%Y-%m-%d_%H-%M"

@dataclass(frozen=True)
class RunContext:
    host: str = field(default_factory=socket.gethostname)
    started_at: datetime = field(default_factory=datetime.now)

    @property
    def run_date(self) -> str:
        return self.started_at.strftime(RUN_DATE_FORMAT)

    def snapshot_name(self, prefix: str) -> str:
        return f"{prefix}-{self.run_date}"
