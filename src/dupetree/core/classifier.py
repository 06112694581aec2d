"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/classifier.py
Incremental duplicate classifier fed one file at a time by the tree walker.

PIPELINE (per file, in visit order)
-----------------------------------
1. Size      : a length never seen before marks the file unique. No I/O.
2. Window    : on a size collision the configured byte window is fingerprinted.
3. Hash set  : a fingerprint already seen for that length confirms a duplicate.
4. Verify    : a novel fingerprint is checked against every earlier file of the
               same length, re-fingerprinting them (they may never have been hashed).

STATE
-----
size_set         : lengths observed so far
hash_set         : (length, fingerprint) pairs observed so far
size_duplicates  : files whose length collided with an earlier file
hash_duplicates  : files confirmed duplicate by fingerprint (authoritative)
unique_files     : see UniqueBy

Empty files are never hashed: a second empty file is a duplicate by size alone.
The verification scan is quadratic when many files share a length but few
share content.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Set, Tuple

from dupetree.core.models import VisitedFile, ClassifierConfig, UniqueBy
from dupetree.core.hasher import HasherImpl, get_algorithm
from dupetree.core.interfaces import FileClassifier, Hasher

logger = logging.getLogger(__name__)


class DuplicateClassifierImpl(FileClassifier):
    """
    Classifies visited files as unique or duplicate with the least hashing possible.
    One instance holds the state of exactly one traversal.
    """

    def __init__(self, config: Optional[ClassifierConfig] = None, hasher: Optional[Hasher] = None):
        self.config = config or ClassifierConfig()
        self.hasher = hasher or HasherImpl(get_algorithm(self.config.algorithm), self.config.window)

        self.size_set: Set[int] = set()
        self.hash_set: Set[Tuple[int, str]] = set()
        self.size_duplicates: List[str] = []
        self.hash_duplicates: List[str] = []
        self.failed_files: List[str] = []

        self._by_size: Dict[int, List[VisitedFile]] = defaultdict(list)
        self._fingerprints: Dict[str, str] = {}
        self._unhashable: Set[str] = set()
        self._size_unique: Dict[str, None] = {}  # insertion-ordered set
        self._classified: List[str] = []
        self._hash_duplicate_set: Set[str] = set()
        self._trace_level = logging.INFO if self.config.verbose else logging.DEBUG

    def visit(self, file: VisitedFile) -> None:
        """Classify one file. Non-regular and unreadable files are ignored."""
        if not file.is_regular:
            logger.debug(f"Skipping non-regular file: {file.path}")
            return
        if not file.is_readable:
            logger.debug(f"Skipping unreadable file: {file.path}")
            return

        self._trace(f"(visit) Reading file: {file.path}")
        size = file.size

        if size not in self.size_set:
            self.size_set.add(size)
            self._size_unique[file.path] = None
            self._remember(file)
            return

        self._trace(f"(visit) {file.path} has the same size as something else ({size} bytes)")
        self.size_duplicates.append(file.path)
        for holder in self._by_size[size]:
            self._size_unique.pop(holder.path, None)

        if size == 0:
            self._mark_duplicate(file)
            self._remember(file)
            return

        fingerprint = self._fingerprint(file)
        if fingerprint is None:
            return

        key = (size, fingerprint)
        if key in self.hash_set:
            self._trace(f"(visit) {file.path} has the same hash as something else")
            self._mark_duplicate(file)
        else:
            self.hash_set.add(key)
            if self._verify_against_same_size(file, fingerprint):
                self._mark_duplicate(file)

        self._remember(file)

    @property
    def unique_files(self) -> List[str]:
        """Unique paths in visit order, according to config.unique_by."""
        if self.config.unique_by == UniqueBy.HASH:
            return [p for p in self._classified if p not in self._hash_duplicate_set]
        return list(self._size_unique)

    def _verify_against_same_size(self, file: VisitedFile, fingerprint: str) -> bool:
        """
        Re-fingerprints every earlier file of the same length.
        Each recomputed fingerprint joins hash_set so later files match directly.
        """
        matched = False
        for other in self._by_size[file.size]:
            if other.path == file.path:
                continue
            other_fingerprint = self._fingerprint(other)
            if other_fingerprint is None:
                continue
            self.hash_set.add((other.size, other_fingerprint))
            if other_fingerprint == fingerprint:
                self._trace(f"(verify) {file.path} matches {other.path}")
                matched = True
        return matched

    def _fingerprint(self, file: VisitedFile) -> Optional[str]:
        """
        Cached fingerprint of `file`, or None if it cannot be read.
        A read failure is recorded in failed_files once and never retried.
        """
        if file.path in self._unhashable:
            return None
        cached = self._fingerprints.get(file.path)
        if cached is not None:
            return cached
        try:
            fingerprint = self.hasher.compute_fingerprint(file)
        except OSError as e:
            logger.warning(f"Unable to hash {file.path}: {e.strerror or e}")
            self._unhashable.add(file.path)
            self.failed_files.append(file.path)
            return None
        self._fingerprints[file.path] = fingerprint
        self._trace(f"(visit) File: {file.path} has hash of: {fingerprint}")
        return fingerprint

    def _mark_duplicate(self, file: VisitedFile) -> None:
        self.hash_duplicates.append(file.path)
        self._hash_duplicate_set.add(file.path)

    def _remember(self, file: VisitedFile) -> None:
        self._by_size[file.size].append(file)
        self._classified.append(file.path)

    def _trace(self, message: str) -> None:
        logger.log(self._trace_level, message)
