"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements windowed file fingerprinting with pluggable digest algorithms.

Only the byte window selected by the WindowPolicy is read, so the cost of a
fingerprint is bounded by the window size rather than the file size (except
for WindowMode.WHOLE, which streams the file in chunks).
"""

import hashlib
import logging

import xxhash

from dupetree.core.models import VisitedFile, WindowPolicy, WindowMode, ClassifierDefaults
from dupetree.core.interfaces import HashAlgorithm

logger = logging.getLogger(__name__)


class HashlibAlgorithmImpl(HashAlgorithm):
    """Any algorithm hashlib can construct by name (md5, sha1, sha256, ...)."""

    def __init__(self, name: str):
        self.name = name
        # Fail at construction, not mid-walk, when the algorithm is unusable (e.g. md5 under FIPS)
        hashlib.new(name)

    def new(self):
        return hashlib.new(self.name)


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    _CONSTRUCTORS = {
        "xxh64": xxhash.xxh64,
        "xxh128": xxhash.xxh128,
    }

    def __init__(self, name: str = "xxh64"):
        if name not in self._CONSTRUCTORS:
            raise ValueError(f"Unsupported xxHash variant: {name}")
        self.name = name

    def new(self):
        return self._CONSTRUCTORS[self.name]()


def get_algorithm(name: str) -> HashAlgorithm:
    """
    Resolve an algorithm name to an implementation.
    Raises ValueError if the algorithm is unknown or unavailable on this system.
    """
    name = name.strip().lower()
    if name.startswith("xxh"):
        return XXHashAlgorithmImpl(name)
    try:
        return HashlibAlgorithmImpl(name)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Unable to get requested algorithm '{name}': {e}") from e


class HasherImpl:
    """
    Computes hex fingerprints of the configured window of a file.
    Counts fingerprints and bytes read so callers can observe I/O cost.
    """

    def __init__(self, algorithm: HashAlgorithm, window: WindowPolicy = None):
        self.algorithm = algorithm
        self.window = window or WindowPolicy()
        self.fingerprints_computed = 0
        self.bytes_hashed = 0

    def compute_fingerprint(self, file: VisitedFile) -> str:
        """
        Hashes the window of `file` and returns the hex digest.
        Raises OSError if the file cannot be opened or read, ValueError for empty files.
        """
        offset, length = self.window.bounds(file.size)
        if length <= 0:
            raise ValueError(f"Refusing to hash empty window of {file.path}")

        digest = self.algorithm.new()
        if self.window.mode == WindowMode.WHOLE:
            read = self._stream_into(digest, file.path)
        else:
            data = self._read_chunk(file.path, offset, length)
            digest.update(data)
            read = len(data)

        self.fingerprints_computed += 1
        self.bytes_hashed += read
        result = digest.hexdigest()
        logger.debug(f"{self.algorithm.name} of {file.path} [{offset}:{offset + read}] = {result}")
        return result

    @staticmethod
    def _read_chunk(path: str, offset: int, length: int) -> bytes:
        """Reads up to `length` bytes starting at `offset`."""
        with open(path, 'rb') as f:
            f.seek(offset)
            return f.read(length)

    @staticmethod
    def _stream_into(digest, path: str) -> int:
        """Feeds the whole file into `digest` chunk by chunk, returns bytes read."""
        total = 0
        with open(path, 'rb') as f:
            for chunk in iter(lambda: f.read(ClassifierDefaults.READ_CHUNK_SIZE), b''):
                digest.update(chunk)
                total += len(chunk)
        return total
