# src/diskfit/core/ignore.py
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from diskfit.errors import UsageError


def read_exclude_file(exclude_file: Path) -> List[str]:
    """Reads gitignore-style patterns, one per line."""
    try:
        with open(exclude_file, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except OSError as e:
        raise UsageError(f"Can't read exclude file '{exclude_file}': {e.strerror}") from e


def load_exclude_spec(
    patterns: Iterable[str], exclude_file: Optional[Path] = None
) -> Optional[pathspec.PathSpec]:
    """
    Builds a PathSpec from command line patterns and an optional file.
    Returns None when there is nothing to exclude.
    """
    lines = list(patterns)
    if exclude_file is not None:
        lines.extend(read_exclude_file(exclude_file))

    lines = [line for line in lines if line.strip()]
    if not lines:
        return None

    try:
        return pathspec.GitIgnoreSpec.from_lines(lines)
    except Exception as e:
        raise UsageError(f"Invalid exclude pattern: {e}") from e


def is_excluded(spec: Optional[pathspec.PathSpec], rel_path: str, is_directory: bool = False) -> bool:
    """Checks a root-relative POSIX path against the exclude rules."""
    if spec is None:
        return False
    # A trailing slash lets "build/" style patterns match the directory itself
    if is_directory and not rel_path.endswith("/"):
        rel_path += "/"
    return spec.match_file(rel_path)
