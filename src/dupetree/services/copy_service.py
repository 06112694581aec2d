"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/copy_service.py
Copies unique files into a destination tree, mirroring their location under the scan root.
Individual failures are logged and collected; the batch always runs to the end.
"""
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

logger = logging.getLogger(__name__)


@dataclass
class CopyReport:
    copied: List[Tuple[str, str]] = field(default_factory=list)  # (source, destination)
    failed: List[Tuple[str, str]] = field(default_factory=list)  # (source, error message)

    @property
    def ok(self) -> bool:
        return not self.failed


class CopyService:
    """
    Cross-platform copy of files from one root to another.
    Existing destination files are never overwritten.
    """

    @staticmethod
    def destination_for(file_path: str, source_root: str, dest_root: str) -> Path:
        """Maps a file under source_root to the same relative location under dest_root."""
        relative = Path(file_path).resolve().relative_to(Path(source_root).resolve())
        return Path(dest_root) / relative

    @staticmethod
    def copy_file(src: str, dst: Path) -> None:
        """Copies one file, creating parent directories as needed."""
        if dst.exists():
            raise FileExistsError(f"Destination already exists: {dst}")
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)

    @classmethod
    def copy_unique_files(cls, file_paths: List[str], source_root: str, dest_root: str) -> CopyReport:
        """Copies every file, aggregating errors instead of stopping at the first one."""
        report = CopyReport()
        for path in file_paths:
            try:
                dst = cls.destination_for(path, source_root, dest_root)
                logger.info(f"Copying: {path} to: {dst}")
                cls.copy_file(path, dst)
                report.copied.append((path, str(dst)))
            except (OSError, ValueError) as e:
                logger.warning(f"Unable to copy: {path} ({e})")
                report.failed.append((path, str(e)))
        return report
