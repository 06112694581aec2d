"""
dupetree — duplicate file finder driven by file size and partial content hashes.

Core features:
- Single depth-first pass over a directory tree
- Files are hashed only when their size collides with an earlier file
- Prefix, suffix, proportional or whole-file hash windows over md5/sha1/sha256/xxHash
- Reports duplicate or unique files, or copies unique files to a destination tree
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupetree")
except Exception:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from dupetree.commands import ScanCommand, FindMatchesCommand
from dupetree.core import (
    ScanParams, ScanResult, ScanStats, ClassifierConfig, WindowPolicy, WindowMode,
    UniqueBy, ReportMode, VisitedFile, DuplicateClassifierImpl, walk_tree)
from dupetree.utils.convert_utils import ConvertUtils
from dupetree.services import CopyService

__all__ = [
    "ScanCommand",
    "FindMatchesCommand",
    "ScanParams",
    "ScanResult",
    "ScanStats",
    "ClassifierConfig",
    "WindowPolicy",
    "WindowMode",
    "UniqueBy",
    "ReportMode",
    "VisitedFile",
    "DuplicateClassifierImpl",
    "walk_tree",
    "ConvertUtils",
    "CopyService",
    "__version__",
]
