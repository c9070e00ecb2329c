from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class Acknowledged:
    acknowledged: bool
