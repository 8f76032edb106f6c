"""
Viewer Layer

Entry points used by the review UI: render a single file's diff and
organise the changed files of a pull request.
"""

from .diff_viewer import DiffViewer, DiffView
from .file_list import DirectoryGroup, group_files_by_directory, filter_files, status_code, display_name

__all__ = [
    'DiffViewer',
    'DiffView',
    'DirectoryGroup',
    'group_files_by_directory',
    'filter_files',
    'status_code',
    'display_name',
]
