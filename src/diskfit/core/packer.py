# src/diskfit/core/packer.py
"""
First-fit-decreasing placement of files onto disks.

Files are sorted by size, largest first, then each one goes onto the first
disk (in creation order) that still has room for it. When none has room a
new disk is opened. The big files rapidly fill the disks while the smaller
remaining ones usually make a good final fit. This is an approximation;
it does not search for the minimum number of disks.
"""
import itertools
from typing import Iterable, Iterator, List, Optional

from diskfit.config import MAX_DISKS
from diskfit.errors import CapacityOverflowError, PackingError
from diskfit.models import Disk, FileRecord


def sort_by_size(records: Iterable[FileRecord]) -> List[FileRecord]:
    """Largest first. The sort is stable, equal sizes keep collection order."""
    return sorted(records, key=lambda r: r.size, reverse=True)


def fit_files(records: Iterable[FileRecord], capacity: int,
              ids: Optional[Iterator[int]] = None) -> List[Disk]:
    """
    Distributes `records` over as many disks of `capacity` bytes as needed.

    `ids` supplies the disk numbers. Without it each call numbers its disks
    from 1 again; pass one shared iterator to keep numbering going across
    several calls in the same process.
    """
    if ids is None:
        ids = itertools.count(1)

    disks: List[Disk] = []
    for record in sort_by_size(records):
        for disk in disks:
            if disk.add(record):
                break
        else:
            disk = Disk(id=next(ids), capacity=capacity)
            if not disk.add(record):
                raise PackingError(
                    f"'{record.path}' ({record.size} bytes) does not fit an empty disk of {capacity} bytes."
                )
            disks.append(disk)

    return disks


def check_disk_count(disks: List[Disk]) -> None:
    """Rejects results that need more disks than the directory names allow."""
    if len(disks) > MAX_DISKS:
        raise CapacityOverflowError(f"Fitting takes too many ({len(disks)}) disks.")
