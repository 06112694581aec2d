"""
Unified command orchestrator for duplicate detection.
This is the SINGLE source of truth for business logic — used by the CLI and library callers.
"""
import os
import time
from pathlib import Path
from typing import List, Optional, Callable, Tuple

from dupetree.core.models import ScanParams, ScanResult, ScanStats, VisitedFile
from dupetree.core.walker import walk_tree
from dupetree.core.classifier import DuplicateClassifierImpl
from dupetree.core.hasher import HasherImpl, get_algorithm
from dupetree.core.matcher import find_matches


class ScanCommand:
    """
    Orchestrates the whole scan:
    1. Build the classifier from params.config
    2. Walk the tree, feeding every file to the classifier
    3. Collect lists and counters into a ScanResult

    Usage:
        params = ScanParams.from_human_readable(root_dir, window_size_str="8K")
        result = ScanCommand().execute(params, progress_callback=cli_progress_printer)
        for path in result.duplicate_report(params.report_mode):
            print(path)
    """

    def __init__(self):
        self._classifier: Optional[DuplicateClassifierImpl] = None

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> ScanResult:
        """
        Execute a scan with the given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            ScanResult with duplicate lists, unique files and statistics

        Raises:
            ValueError: If the hash algorithm is unavailable
            RuntimeError: If the root directory is invalid
        """
        start_time = time.time()
        classifier = DuplicateClassifierImpl(params.config)
        self._classifier = classifier
        visited = 0

        def on_file(path: Path, stat_result: os.stat_result) -> None:
            nonlocal visited
            classifier.visit(VisitedFile.from_stat(str(path), stat_result))
            visited += 1
            if progress_callback:
                progress_callback("Classifying", visited, None)

        walk_stats = walk_tree(params.root_dir, on_file)

        stats = ScanStats(
            file_count=walk_stats.file_count,
            directory_count=walk_stats.directory_count,
            failed_visits=walk_stats.failed_visits,
            fingerprints_computed=classifier.hasher.fingerprints_computed,
            bytes_hashed=classifier.hasher.bytes_hashed,
            total_time=time.time() - start_time,
        )

        return ScanResult(
            root_dir=str(Path(params.root_dir).resolve()),
            size_duplicates=list(classifier.size_duplicates),
            hash_duplicates=list(classifier.hash_duplicates),
            unique_files=classifier.unique_files,
            failed_files=list(classifier.failed_files),
            stats=stats,
        )

    def get_classifier(self) -> Optional[DuplicateClassifierImpl]:
        """Classifier of the last execution (None before the first run)."""
        return self._classifier


class FindMatchesCommand:
    """Looks for copies of a single file inside the tree described by params."""

    def execute(self, needle: str, params: ScanParams) -> Tuple[List[str], ScanStats]:
        start_time = time.time()
        hasher = HasherImpl(get_algorithm(params.config.algorithm), params.config.window)
        matches, walk_stats = find_matches(needle, params.root_dir, hasher)
        stats = ScanStats(
            file_count=walk_stats.file_count,
            directory_count=walk_stats.directory_count,
            failed_visits=walk_stats.failed_visits,
            fingerprints_computed=hasher.fingerprints_computed,
            bytes_hashed=hasher.bytes_hashed,
            total_time=time.time() - start_time,
        )
        return matches, stats
