"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/matcher.py
Finds copies of one "needle" file inside a directory tree.
Same size filter first, then the windowed fingerprint of the survivors.
"""

import os
import logging
from pathlib import Path
from typing import List, Tuple

from dupetree.core.models import VisitedFile
from dupetree.core.interfaces import Hasher
from dupetree.core.walker import walk_tree, WalkStats

logger = logging.getLogger(__name__)


def find_matches(needle: str, root_dir: str, hasher: Hasher) -> Tuple[List[str], WalkStats]:
    """
    Returns absolute paths of files under `root_dir` that duplicate `needle`,
    in visit order, along with the walk counters. The needle itself is never reported.

    Raises:
        ValueError: If needle is not a regular file
        OSError: If the needle cannot be read
        RuntimeError: If root_dir is not a directory
    """
    needle_path = Path(needle)
    if not needle_path.is_file():
        raise ValueError(f"Not a regular file: {needle}")

    target = VisitedFile.from_stat(str(needle_path), needle_path.stat())
    target_fingerprint = hasher.compute_fingerprint(target) if target.size > 0 else None
    logger.debug(f"Needle {target.path}: {target.size} bytes, fingerprint {target_fingerprint}")

    matches: List[str] = []

    def on_file(path: Path, stat_result: os.stat_result) -> None:
        candidate = VisitedFile.from_stat(str(path), stat_result)
        if not candidate.is_regular or candidate.size != target.size:
            return
        if candidate.path == target.path:
            return
        if target_fingerprint is None or hasher.compute_fingerprint(candidate) == target_fingerprint:
            matches.append(candidate.path)

    stats = walk_tree(root_dir, on_file)
    return matches, stats
