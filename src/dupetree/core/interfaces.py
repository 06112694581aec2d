"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detection system.

Key Components:
---------------
- HashAlgorithm: Standardized interface for digest functions (MD5, SHA-256, xxHash, ...).
- Hasher: Interface for fingerprinting the configured byte window of a file.
- FileClassifier: Interface for the per-file duplicate classifier fed by the walker.
"""

from typing import Protocol, List

from dupetree.core.models import VisitedFile


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different digest functions without affecting the
    classification logic. Implementations return a fresh incremental hasher
    exposing update() and hexdigest().
    """
    name: str

    def new(self): ...


class Hasher(Protocol):
    """Interface for fingerprinting a window of a file."""
    fingerprints_computed: int
    bytes_hashed: int

    def compute_fingerprint(self, file: VisitedFile) -> str: ...


class FileClassifier(Protocol):
    """
    Interface for the incremental duplicate classifier.

    Methods:
        visit: Classify one file observed by the walker.
    """
    size_duplicates: List[str]
    hash_duplicates: List[str]
    failed_files: List[str]

    def visit(self, file: VisitedFile) -> None:
        """
        Classify a single file in visit order.

        Args:
            file: File metadata captured by the walker.
        """
        ...

    @property
    def unique_files(self) -> List[str]:
        """Paths classified unique, in visit order."""
        ...
