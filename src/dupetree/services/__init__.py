"""File copy services for de-duplicated results."""

from .copy_service import CopyService, CopyReport

__all__ = ["CopyService", "CopyReport"]
