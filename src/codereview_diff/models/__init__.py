"""
Data Models

Diff viewer data models: classified diff lines, change pairs and
the GitHub file-change boundary object.
"""

from .diff_line import LineKind, DiffLine, ChangePair, DiffStats
from .file_change import FileChange, FileChangeRequest, InvalidFileChangeError

__all__ = [
    "LineKind",
    "DiffLine",
    "ChangePair",
    "DiffStats",
    "FileChange",
    "FileChangeRequest",
    "InvalidFileChangeError",
]
