# src/diskfit/config.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

# Disk directories are named with a fixed 4 digit width (0001 .. 9999)
DISK_DIR_WIDTH = 4
MAX_DISKS = 10 ** DISK_DIR_WIDTH - 1

# Decimal scale, not 1024
KB = 1000
UNIT_FACTORS = {
    "b": 1,
    "k": KB,
    "m": KB ** 2,
    "g": KB ** 3,
    "t": KB ** 4,
}
UNIT_LABELS = ["B", "K", "M", "G", "T"]

DEFAULT_EXCLUDE_PATTERNS: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FitConfig:
    """Run configuration, built once by the CLI and passed down explicitly."""
    capacity: int
    paths: Tuple[str, ...]
    recursive: bool = False
    count_only: bool = False
    destdir: Optional[Path] = None
    verbose: bool = False
    excludes: Tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    exclude_file: Optional[Path] = None

    @property
    def link_mode(self) -> bool:
        return self.destdir is not None
