from dataclasses import dataclass, asdict


@dataclass
class CellLogEntry:
    timestamp: int
    id: int
    row: int
    col: int
    state: int
    burn_duration: int

    def to_dict(self):
        return asdict(self)
