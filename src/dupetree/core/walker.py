"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Depth-first directory traversal driving per-file callbacks.
Features:
- Stable pre-order visitation (entries sorted by name)
- Directory and file counters
- Per-entry failures reported through a hook, never aborting the walk
- Symbolic links are not followed; a link to a directory is delivered as a file
"""

import os
import time
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)

FileCallback = Callable[[Path, os.stat_result], None]
DirectoryCallback = Callable[[Path], None]
FailureCallback = Callable[[Path, OSError], None]


@dataclass
class WalkStats:
    file_count: int = 0
    directory_count: int = 0
    failed_visits: int = 0
    elapsed: float = 0.0


def _log_visit_failure(path: Path, error: OSError) -> None:
    logger.warning(f"Unable to visit {path}: {error.strerror or error}")


def walk_tree(
        root_dir: str,
        on_file: FileCallback,
        on_directory: Optional[DirectoryCallback] = None,
        on_failure: Optional[FailureCallback] = None,
) -> WalkStats:
    """
    Visits every directory and file under `root_dir` exactly once.

    Args:
        root_dir: Directory to traverse
        on_file: Called with (path, lstat result) for every non-directory entry,
            symbolic links to directories included
        on_directory: Called with the path of every directory entered, root included
        on_failure: Called with (path, error) for entries that cannot be visited

    Returns:
        WalkStats with counters for the traversal

    Raises:
        RuntimeError: If root_dir does not exist or is not a directory
    """
    root_path = Path(root_dir)
    on_failure = on_failure or _log_visit_failure

    if not root_path.exists():
        error_msg = f"Directory does not exist: {root_dir}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)
    if not root_path.is_dir():
        error_msg = f"Not a directory: {root_dir}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    stats = WalkStats()
    start_time = time.time()

    def handle_walk_error(error: OSError) -> None:
        # Raised by os.walk when a directory cannot be listed
        stats.failed_visits += 1
        on_failure(Path(error.filename or root_dir), error)

    logger.debug(f"Walking directory tree: {root_dir}")
    for root, dirs, files in os.walk(str(root_path), onerror=handle_walk_error, followlinks=False):
        stats.directory_count += 1
        current = Path(root)
        if on_directory:
            on_directory(current)

        # Unfollowed directory links are leaves; pruning in place also fixes descent order
        linked_dirs = [d for d in dirs if os.path.islink(os.path.join(root, d))]
        dirs[:] = sorted(d for d in dirs if d not in linked_dirs)

        for filename in sorted(files + linked_dirs):
            path = current / filename
            try:
                stat_result = path.lstat()
            except OSError as e:
                stats.failed_visits += 1
                on_failure(path, e)
                continue

            try:
                on_file(path, stat_result)
            except OSError as e:
                logger.warning(f"Error processing {path}: {e}")
            stats.file_count += 1

    stats.elapsed = time.time() - start_time
    logger.debug(
        f"Walk completed: {stats.file_count} files, {stats.directory_count} directories "
        f"in {stats.elapsed:.2f} seconds"
    )
    return stats
