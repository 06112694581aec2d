"""
Core duplicate detection engine — walker, hasher, classifier and models.

This package contains the performance-critical foundation of dupetree:
- walk_tree: stable depth-first traversal with per-file callbacks
- HasherImpl + get_algorithm: windowed fingerprints over hashlib/xxHash digests
- DuplicateClassifierImpl: incremental size → window hash → verification filter
- find_matches: duplicates of a single needle file inside a tree
- Models: VisitedFile, WindowPolicy, ClassifierConfig, ScanParams, ScanResult

All components are pure Python with no UI dependencies.
"""

from .walker import walk_tree, WalkStats
from .hasher import HasherImpl, HashlibAlgorithmImpl, XXHashAlgorithmImpl, get_algorithm
from .classifier import DuplicateClassifierImpl
from .matcher import find_matches
from .models import (
    VisitedFile, WindowMode, WindowPolicy, UniqueBy, ReportMode,
    ClassifierConfig, ClassifierDefaults, ScanParams, ScanResult, ScanStats)

__all__ = [
    "walk_tree",
    "WalkStats",
    "HasherImpl",
    "HashlibAlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "DuplicateClassifierImpl",
    "find_matches",
    "VisitedFile",
    "WindowMode",
    "WindowPolicy",
    "UniqueBy",
    "ReportMode",
    "ClassifierConfig",
    "ClassifierDefaults",
    "ScanParams",
    "ScanResult",
    "ScanStats",
]
