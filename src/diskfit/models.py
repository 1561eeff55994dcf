# src/diskfit/models.py
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class FileRecord:
    """Immutable (size, path) pair produced by the collector."""
    size: int
    path: str


@dataclass
class Disk:
    """
    A fixed-capacity container of files.

    Files keep their arrival order. A disk only ever gains files, and
    `free + used == capacity` holds after every successful `add`.
    """
    id: int
    capacity: int
    free: int = field(init=False)
    files: List[FileRecord] = field(default_factory=list, init=False)

    def __post_init__(self):
        self.free = self.capacity

    def add(self, record: FileRecord) -> bool:
        """Places `record` on this disk if it fits, returns whether it did."""
        if self.free - record.size < 0:
            return False

        self.files.append(record)
        self.free -= record.size
        return True

    @property
    def used(self) -> int:
        return self.capacity - self.free

    @property
    def percent_free(self) -> int:
        return self.free * 100 // self.capacity
