#!/usr/bin/env python3
"""
dupetree CLI — Command line interface for duplicate file detection.
Walks a directory tree once, hashing only a window of files whose sizes collide.
Reports duplicates or unique files, or copies unique files to a destination tree.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from dupetree.core.models import ScanParams, ScanResult, ReportMode, UniqueBy, WindowMode
from dupetree.core.hasher import get_algorithm
from dupetree.commands import ScanCommand, FindMatchesCommand
from dupetree.utils.convert_utils import ConvertUtils
from dupetree.services.copy_service import CopyService
from dupetree.aliases import (
    WINDOW_MODE_ALIASES, WINDOW_MODE_CHOICES, WINDOW_MODE_HELP_TEXT,
    ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    UNIQUE_BY_ALIASES, UNIQUE_BY_CHOICES, UNIQUE_BY_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupetree",
            description="dupetree — Find duplicate files by size and partial content hash",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            type=str,
            help="Directory to scan for duplicate files"
        )

        # Hashing options
        parser.add_argument(
            "--window",
            choices=WINDOW_MODE_CHOICES,
            default="prefix",
            type=str,
            help=WINDOW_MODE_HELP_TEXT
        )
        parser.add_argument(
            "--window-size", "-w",
            default="4K",
            type=str,
            metavar='',
            help="Bytes hashed by prefix/suffix windows (e.g., 4096, 4K, 8KB). Default: 4K"
        )
        parser.add_argument(
            "--fraction",
            default=0.10,
            type=float,
            metavar='',
            help="Share of the file length hashed by the proportional window. Default: 0.10"
        )
        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="md5",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )

        # Reporting options
        parser.add_argument(
            "--report",
            choices=["duplicates", "unique"],
            default="duplicates",
            type=str,
            help="What to print: duplicate files (default) or unique files"
        )
        parser.add_argument(
            "--include-size-duplicates",
            action="store_true",
            help="Also list files that only share a size with another file (printed first)"
        )
        parser.add_argument(
            "--unique-by",
            choices=UNIQUE_BY_CHOICES,
            default="size",
            type=str,
            help=UNIQUE_BY_HELP_TEXT
        )

        # Actions
        parser.add_argument(
            "--copy-to", "-c",
            type=str,
            metavar='',
            dest="copy_to",
            help="Copy unique files to this directory, preserving paths relative to --input"
        )
        parser.add_argument(
            "--find",
            type=str,
            metavar='',
            help="Only report copies of this file found under --input"
        )
        parser.add_argument(
            "--time", "-t",
            action="store_true",
            help="Display the current time and exit"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show statistics, per-file copy progress and elapsed time"
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Log every classification decision"
        )

        return parser.parse_args(args)

    @staticmethod
    def configure_logging(args: argparse.Namespace) -> None:
        if args.debug:
            level = logging.DEBUG
        elif args.verbose:
            level = logging.INFO
        elif args.quiet:
            level = logging.ERROR
        else:
            level = logging.WARNING
        logging.getLogger().setLevel(level)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if not args.input:
            self.error_exit("--input is required")

        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        root_path = Path(args.input).resolve()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.input}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.input}")

        try:
            window_size = ConvertUtils.human_to_bytes(args.window_size)
        except ValueError as e:
            self.error_exit(f"Invalid window size: {e}")
        if window_size <= 0:
            self.error_exit("Window size must be positive")

        if not 0 < args.fraction <= 1:
            self.error_exit("Fraction must be greater than 0 and at most 1")

        try:
            get_algorithm(args.algorithm)
        except ValueError as e:
            self.error_exit(str(e))

        if args.copy_to:
            dest_path = Path(args.copy_to).resolve()
            if dest_path.exists() and not dest_path.is_dir():
                self.error_exit(f"Destination is not a directory: {args.copy_to}")
            if dest_path == root_path:
                self.error_exit("Destination cannot be the scanned directory")

        if args.find:
            needle_path = Path(args.find)
            if not needle_path.is_file():
                self.error_exit(f"File not found: {args.find}")
            if args.copy_to:
                self.error_exit("--find cannot be combined with --copy-to")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                root_dir=str(Path(args.input).resolve()),
                window_size_str=args.window_size,
                mode=WINDOW_MODE_ALIASES.get(args.window, WindowMode.PREFIX),
                fraction=args.fraction,
                algorithm=args.algorithm,
                unique_by=UNIQUE_BY_ALIASES.get(args.unique_by, UniqueBy.SIZE),
                report_mode=ReportMode.COMBINED if args.include_size_duplicates else ReportMode.HASH,
                copy_to=str(Path(args.copy_to).resolve()) if args.copy_to else None,
                verbose=args.debug,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose or current % 1000:
            return
        sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> ScanResult:
        """Execute the scan workflow."""
        command = ScanCommand()
        if self.verbose:
            print(f"Finding duplicates (window: {params.config.window}, "
                  f"algorithm: {params.config.algorithm})...")

        try:
            result = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except (RuntimeError, ValueError) as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            print(result.stats.print_summary())

        return result

    @staticmethod
    def format_paths(paths: List[str]) -> str:
        """Newline-separated absolute paths, or 'Nothing found'."""
        if not paths:
            return "Nothing found"
        return "\n".join(paths)

    @staticmethod
    def write_paths(paths: List[str]) -> None:
        """
        Write paths to stdout as filesystem bytes.
        Undecodable filename bytes are written back unchanged.
        """
        sys.stdout.flush()
        sys.stdout.buffer.write(os.fsencode(CLIApplication.format_paths(paths) + "\n"))
        sys.stdout.buffer.flush()

    def output_results(self, result: ScanResult, params: ScanParams, report: str) -> None:
        """Print the requested list of paths to stdout."""
        if report == "unique":
            paths = result.unique_files
        else:
            paths = result.duplicate_report(params.report_mode)
        self.write_paths(paths)

        if result.failed_files:
            self.warning(f"{len(result.failed_files)} file(s) could not be hashed and were skipped")

    def execute_copy(self, result: ScanResult, params: ScanParams) -> None:
        """Copy unique files to the destination, reporting failures without aborting."""
        files = result.unique_files
        if not files:
            if not self.quiet:
                print("No unique files to copy.")
            return

        if not self.quiet:
            print(f"Copying {len(files)} unique files to {params.copy_to}...")

        report = CopyService.copy_unique_files(files, result.root_dir, params.copy_to)

        if report.failed:
            for path, error in report.failed[:5]:
                self.warning(f"Unable to copy: {path} ({error})")
            if len(report.failed) > 5:
                self.warning(f"...and {len(report.failed) - 5} more files")
            if not self.quiet:
                print(f"\n⚠️  Partial success: {len(report.copied)}/{len(files)} files copied.")
        elif not self.quiet:
            print(f"✅ Successfully copied {len(report.copied)} files.")

    def run_find(self, needle: str, params: ScanParams) -> None:
        """Print copies of a single file found under the scan root."""
        try:
            matches, stats = FindMatchesCommand().execute(needle, params)
        except (OSError, RuntimeError, ValueError) as e:
            self.error_exit(f"Search failed: {e}")

        self.write_paths(matches)
        if self.verbose:
            print(stats.print_summary())

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging(args)

        if args.time:
            print("The time is: " + ConvertUtils.timestamp_to_human(time.time()))
            return

        self.validate_args(args)
        params = self.create_params(args)

        if args.find:
            self.run_find(args.find, params)
        else:
            result = self.run_scan(params)
            if params.copy_to:
                self.execute_copy(result, params)
            else:
                self.output_results(result, params, args.report)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\nTime elapsed: {elapsed:.2f}(s)")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
