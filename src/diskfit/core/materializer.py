# src/diskfit/core/materializer.py
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from diskfit.config import DISK_DIR_WIDTH, MAX_DISKS
from diskfit.errors import CapacityOverflowError, MaterializeError
from diskfit.models import Disk
from diskfit.utils.sizes import format_size


def count_message(count: int) -> str:
    return f"{count} disk{'s' if count != 1 else ''}."


def render_disk(disk: Disk) -> str:
    """A framed header with the free space, then one line per file."""
    header = f"Disk #{disk.id}, {disk.percent_free}% ({format_size(disk.free)}) free:"
    rule = "-" * len(header)

    lines = [rule, header, rule]
    for record in disk.files:
        lines.append(f"{format_size(record.size):>10} {record.path}")
    return "\n".join(lines) + "\n"


def print_report(disks: List[Disk], out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    for disk in disks:
        print(render_disk(disk), file=out)


def print_count(disks: List[Disk], out: Optional[TextIO] = None) -> None:
    print(count_message(len(disks)), file=out or sys.stdout)


def disk_dir(destdir: Path, disk: Disk) -> Path:
    return destdir / f"{disk.id:0{DISK_DIR_WIDTH}d}"


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError as e:
        raise MaterializeError(f"'{path}' is not a directory.") from e
    except OSError as e:
        raise MaterializeError(f"Can't make directory '{path}': {e.strerror}") from e


def link_disks(disks: List[Disk], destdir: Path, verbose: bool = False,
               out: Optional[TextIO] = None) -> None:
    """
    Hard links every disk's files into `destdir/NNNN/`.

    Disk numbers are validated before anything is created. After that the
    first failing mkdir or link aborts the run; links made so far stay.
    """
    out = out or sys.stdout

    for disk in disks:
        if disk.id > MAX_DISKS:
            raise CapacityOverflowError(f"Disk number {disk.id} is too big for the directory name format.")

    for disk in disks:
        target_dir = disk_dir(destdir, disk)
        for record in disk.files:
            _ensure_dir(target_dir)

            target = target_dir / os.path.basename(record.path)
            try:
                os.link(record.path, target)
            except OSError as e:
                raise MaterializeError(f"Can't link '{record.path}' to '{target}': {e.strerror}") from e

            if verbose:
                print(f"{record.path} -> {target}", file=out)
