# src/diskfit/cli.py
import sys
import argparse
import os
from pathlib import Path
from typing import List, Optional, TextIO

# Module imports
from diskfit.config import FitConfig
from diskfit.core.collector import collect_files
from diskfit.core.ignore import load_exclude_spec
from diskfit.core.materializer import link_disks, print_count, print_report
from diskfit.core.packer import check_disk_count, fit_files
from diskfit.errors import EXIT_FAILURE, FitError, NoFilesError, UsageError
from diskfit.models import Disk
from diskfit.utils.sizes import parse_size


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # Usage errors exit 1 like every other fatal condition
        self.print_usage(sys.stderr)
        raise UsageError(message)


def create_arg_parser():
    parser = _ArgumentParser(
        prog="diskfit",
        description="Fit files onto as few fixed-size disks as possible, then list them or hard link them per disk."
    )
    parser.add_argument("paths", nargs="+", metavar="path", help="Files or directories to fit")
    parser.add_argument("-s", "--size", required=True, help="Disk size, optionally suffixed with b, k, m, g or t")
    parser.add_argument(
        "-l", "--link",
        dest="destdir",
        default=None,
        help="Directory to link files into; if omitted just print the disks"
    )
    parser.add_argument("-n", "--count", action="store_true", help="Only show the number of disks it takes")
    parser.add_argument("-r", "--recursive", action="store_true", help="Search directories recursively")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show every link made (link mode)")
    parser.add_argument(
        "-x", "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Skip paths matching a gitignore-style pattern (repeatable)"
    )
    parser.add_argument("--exclude-from", type=Path, default=None, metavar="FILE", help="Read exclude patterns from a file")
    return parser


def build_config(args: argparse.Namespace) -> FitConfig:
    """Validates parsed arguments into a run configuration."""
    capacity = parse_size(args.size)
    if capacity <= 0:
        raise UsageError(f"Disk size must be positive, got '{args.size}'.")

    destdir = Path(os.path.normpath(args.destdir)) if args.destdir else None

    return FitConfig(
        capacity=capacity,
        paths=tuple(args.paths),
        recursive=args.recursive,
        count_only=args.count,
        destdir=destdir,
        verbose=args.verbose,
        excludes=tuple(args.exclude),
        exclude_file=args.exclude_from,
    )


def run(config: FitConfig, out: Optional[TextIO] = None) -> List[Disk]:
    """Collects, fits and materializes. Raises FitError on any fatal condition."""
    out = out or sys.stdout

    exclude_spec = load_exclude_spec(config.excludes, config.exclude_file)
    records = collect_files(config.paths, config.capacity, config.recursive, exclude_spec)
    if not records:
        raise NoFilesError("no files found.")

    disks = fit_files(records, config.capacity)
    check_disk_count(disks)

    if config.count_only:
        print_count(disks, out)
    elif config.link_mode:
        link_disks(disks, config.destdir, verbose=config.verbose, out=out)
    else:
        print_report(disks, out)

    return disks


def main(argv: Optional[List[str]] = None):
    try:
        parser = create_arg_parser()
        args = parser.parse_args(argv)
        config = build_config(args)
        run(config)

    except FitError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(e.exit_code)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
