# src/diskfit/errors.py
"""Typed errors for diskfit.

Core code raises these; only the CLI entry point turns them into an
error message and a process exit status.
"""

EXIT_OK = 0
EXIT_FAILURE = 1


class FitError(Exception):
    """Base error for diskfit."""

    exit_code: int = EXIT_FAILURE


class UsageError(FitError):
    pass


class SizeSyntaxError(UsageError):
    pass


class AccessError(FitError):
    """A path could not be stat'ed or listed."""


class NotRegularFileError(FitError):
    pass


class OversizeError(FitError):
    """A single file is larger than a whole disk."""


class NoFilesError(FitError):
    pass


class PackingError(FitError):
    """Internal invariant violation while placing files."""


class CapacityOverflowError(FitError):
    """More disks are needed than the directory naming supports."""


class MaterializeError(FitError):
    """Creating a disk directory or a hard link failed."""
