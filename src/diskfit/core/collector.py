# src/diskfit/core/collector.py
import os
import stat
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import pathspec

from diskfit.core.ignore import is_excluded
from diskfit.errors import AccessError, NotRegularFileError, OversizeError
from diskfit.models import FileRecord
from diskfit.utils.sizes import format_size


class FileCollector:
    def __init__(self, capacity: int, recursive: bool = False,
                 exclude_spec: Optional[pathspec.PathSpec] = None):
        self.capacity = capacity
        self.recursive = recursive
        self.exclude_spec = exclude_spec

    def _stat(self, path: str) -> os.stat_result:
        # Follows symlinks, a dangling link is an access error
        try:
            return os.stat(path)
        except OSError as e:
            raise AccessError(f"Can't access '{path}': {e.strerror}") from e

    def _record(self, path: str, st: os.stat_result) -> FileRecord:
        if not stat.S_ISREG(st.st_mode):
            raise NotRegularFileError(f"'{path}' is not a regular file.")

        if st.st_size > self.capacity:
            raise OversizeError(f"Can never fit '{path}' ({format_size(st.st_size)}).")

        return FileRecord(size=st.st_size, path=path)

    def _check_listable(self, path: str) -> None:
        try:
            with os.scandir(path):
                pass
        except OSError as e:
            raise AccessError(f"Can't access '{path}': {e.strerror}") from e

    def _walk_error(self, error: OSError):
        raise AccessError(f"Can't access '{error.filename}': {error.strerror}") from error

    def collect(self, root: str) -> Iterator[FileRecord]:
        """
        Yields a record for every regular file under `root`.

        A plain file root yields itself. Directory entries are visited in
        name order; without `recursive` only the root's direct children
        are considered.
        """
        st = self._stat(root)
        if not stat.S_ISDIR(st.st_mode):
            yield self._record(root, st)
            return

        root_path = Path(root)
        # Symlinks are followed, so every directory is walked once by (device, inode)
        walked = {(st.st_dev, st.st_ino)}
        for dirpath, dirs, files in os.walk(root, onerror=self._walk_error, followlinks=True):
            rel_dir = Path(dirpath).relative_to(root_path)

            if not self.recursive:
                # Depth 1 directories are not entered but must still be readable
                for d in sorted(dirs):
                    if not is_excluded(self.exclude_spec, (rel_dir / d).as_posix(), is_directory=True):
                        self._check_listable(os.path.join(dirpath, d))
                dirs[:] = []

            # Prune in place so os.walk never enters excluded or already walked directories
            keep = []
            for d in sorted(dirs):
                if is_excluded(self.exclude_spec, (rel_dir / d).as_posix(), is_directory=True):
                    continue
                dir_st = self._stat(os.path.join(dirpath, d))
                key = (dir_st.st_dev, dir_st.st_ino)
                if key not in walked:
                    walked.add(key)
                    keep.append(d)
            dirs[:] = keep

            for name in sorted(files):
                if is_excluded(self.exclude_spec, (rel_dir / name).as_posix()):
                    continue

                path = os.path.join(dirpath, name)
                yield self._record(path, self._stat(path))


def collect_files(paths: Iterable[str], capacity: int, recursive: bool = False,
                  exclude_spec: Optional[pathspec.PathSpec] = None) -> List[FileRecord]:
    """Collects records from every root, in argument order."""
    collector = FileCollector(capacity, recursive, exclude_spec)
    records: List[FileRecord] = []
    for root in paths:
        records.extend(collector.collect(root))
    return records
