"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models, configuration objects and result containers for duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum
import os
import stat

from dupetree.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class WindowMode(Enum):
    """
    Which part of a file is fed into the digest when sizes collide.
    """
    PREFIX = "prefix"
    SUFFIX = "suffix"
    PROPORTIONAL = "proportional"
    WHOLE = "whole"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            WindowMode.PREFIX: "Prefix",
            WindowMode.SUFFIX: "Suffix",
            WindowMode.PROPORTIONAL: "Proportional",
            WindowMode.WHOLE: "Whole file",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            WindowMode.PREFIX:
                "First N bytes of the file (fastest)",
            WindowMode.SUFFIX:
                "Last N bytes of the file (trailers of archives/containers)",
            WindowMode.PROPORTIONAL:
                "A fraction of the file length, read from the start",
            WindowMode.WHOLE:
                "Entire file content (slowest, no sampling risk)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class UniqueBy(Enum):
    """
    Definition of a "unique" file.

    SIZE: no other visited file has the same byte length.
    HASH: not confirmed as a hash duplicate of an earlier file.
    """
    SIZE = "size"
    HASH = "hash"

    def __repr__(self) -> str:
        return self.value


class ReportMode(Enum):
    """Which duplicate lists make up the duplicate report."""
    HASH = "hash"
    COMBINED = "combined"  # size duplicates followed by hash duplicates

    def __repr__(self) -> str:
        return self.value


class ClassifierDefaults:
    WINDOW_SIZE = 4 * 1024
    FRACTION = 0.10
    ALGORITHM = "md5"
    READ_CHUNK_SIZE = 64 * 1024  # Streaming chunk for whole-file hashing


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class VisitedFile:
    """
    A file observed by the walker.
    Identity is the absolute path; the remaining attributes are fixed once observed.
    """
    path: str
    size: int  # in bytes
    is_regular: bool = True
    is_readable: bool = True

    @classmethod
    def from_stat(cls, path: str, stat_result: os.stat_result) -> "VisitedFile":
        """Build from an lstat() result, resolving the path to absolute form."""
        abs_path = os.path.abspath(path)
        is_regular = stat.S_ISREG(stat_result.st_mode)
        return cls(
            path=abs_path,
            size=stat_result.st_size,
            is_regular=is_regular,
            is_readable=is_regular and os.access(abs_path, os.R_OK),
        )

    def __repr__(self):
        return f"<VisitedFile path={self.path}, size={self.size}>"


@dataclass
class WindowPolicy:
    """Byte window sampled from a file for fingerprinting."""
    mode: WindowMode = WindowMode.PREFIX
    size_bytes: int = ClassifierDefaults.WINDOW_SIZE
    fraction: float = ClassifierDefaults.FRACTION

    def __post_init__(self):
        if self.size_bytes <= 0:
            raise ValueError("Window size must be positive")
        if not 0 < self.fraction <= 1:
            raise ValueError("Window fraction must be in (0, 1]")

    def bounds(self, file_size: int) -> Tuple[int, int]:
        """
        Returns (offset, length) of the window for a file of the given size.
        Length is 0 only for empty files.
        """
        if file_size <= 0:
            return 0, 0
        if self.mode == WindowMode.PREFIX:
            return 0, min(file_size, self.size_bytes)
        if self.mode == WindowMode.SUFFIX:
            length = min(file_size, self.size_bytes)
            return file_size - length, length
        if self.mode == WindowMode.PROPORTIONAL:
            return 0, max(1, int(file_size * self.fraction))
        return 0, file_size

    def __str__(self):
        if self.mode == WindowMode.PROPORTIONAL:
            return f"{self.mode.display_name} ({self.fraction:.0%})"
        if self.mode == WindowMode.WHOLE:
            return self.mode.display_name
        return f"{self.mode.display_name} ({ConvertUtils.bytes_to_human(self.size_bytes)})"


@dataclass
class ClassifierConfig:
    """Everything the classifier needs, passed in at construction."""
    algorithm: str = ClassifierDefaults.ALGORITHM
    window: WindowPolicy = field(default_factory=WindowPolicy)
    unique_by: UniqueBy = UniqueBy.SIZE
    verbose: bool = False

    def __post_init__(self):
        self.algorithm = self.algorithm.strip().lower()
        if not self.algorithm:
            raise ValueError("Hash algorithm cannot be empty")


@dataclass
class ScanStats:
    """
    Statistics collected during one traversal.
    """
    file_count: int = 0
    directory_count: int = 0
    failed_visits: int = 0
    fingerprints_computed: int = 0
    bytes_hashed: int = 0
    total_time: float = 0.0

    def print_summary(self) -> str:
        lines = [
            "📊 Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"📄 Number of files processed: {self.file_count}",
            f"📁 Number of directories processed: {self.directory_count}",
        ]
        if self.failed_visits:
            lines.append(f"⚠️ Unable to visit: {self.failed_visits}")
        lines.append(
            f"🔍 Fingerprints computed: {self.fingerprints_computed} "
            f"({ConvertUtils.bytes_to_human(self.bytes_hashed)} read)"
        )
        return "\n".join(lines)


@dataclass
class ScanResult:
    """Read-only view of a finished classification."""
    root_dir: str
    size_duplicates: List[str]
    hash_duplicates: List[str]
    unique_files: List[str]
    failed_files: List[str]
    stats: ScanStats

    def duplicate_report(self, mode: "ReportMode" = ReportMode.HASH) -> List[str]:
        """Duplicate paths in report order for the given mode."""
        if mode == ReportMode.COMBINED:
            return self.size_duplicates + self.hash_duplicates
        return list(self.hash_duplicates)


"""
DTO for scan parameters with built-in validation.
Interface-agnostic — used by the CLI and by library callers.
"""

@dataclass
class ScanParams:
    """Parameters for a scan with validation."""
    root_dir: str
    config: ClassifierConfig = field(default_factory=ClassifierConfig)
    report_mode: ReportMode = ReportMode.HASH
    copy_to: Optional[str] = None

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")
        if self.copy_to is not None and not self.copy_to.strip():
            raise ValueError("Destination directory cannot be empty")

    @staticmethod
    def from_human_readable(
            root_dir: str,
            window_size_str: str = "4K",
            mode: WindowMode = WindowMode.PREFIX,
            fraction: float = ClassifierDefaults.FRACTION,
            algorithm: str = ClassifierDefaults.ALGORITHM,
            unique_by: UniqueBy = UniqueBy.SIZE,
            report_mode: ReportMode = ReportMode.HASH,
            copy_to: Optional[str] = None,
            verbose: bool = False,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Useful for CLI argument parsing.
        """
        window = WindowPolicy(
            mode=mode,
            size_bytes=ConvertUtils.human_to_bytes(window_size_str),
            fraction=fraction,
        )
        return ScanParams(
            root_dir=root_dir,
            config=ClassifierConfig(
                algorithm=algorithm,
                window=window,
                unique_by=unique_by,
                verbose=verbose,
            ),
            report_mode=report_mode,
            copy_to=copy_to,
        )
