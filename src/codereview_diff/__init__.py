"""
CodeReview Diff Viewer

Pull request diff parsing, line numbering and side-by-side pairing
for the CodeReview application.
"""

__version__ = "1.0.0"

from .viewer.diff_viewer import DiffViewer, DiffView
from .diff.filters import DisplayOptions
from .models.file_change import FileChange

__all__ = ["DiffViewer", "DiffView", "DisplayOptions", "FileChange"]
