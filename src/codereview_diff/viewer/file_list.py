"""
Changed Files List

Groups and filters the files of a pull request for the file picker.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..models.file_change import FileChange


STATUS_CODES = {
    'added': 'A',
    'modified': 'M',
    'removed': 'D',
    'renamed': 'R',
}


@dataclass
class DirectoryGroup:
    """Files sharing a parent directory; ``directory`` is '' for the root"""
    directory: str
    files: List[FileChange] = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"{self.directory}/" if self.directory else ''


def status_code(status: str) -> str:
    """One-letter badge for a file status, empty for unlisted statuses."""
    return STATUS_CODES.get(status, '')


def display_name(file_change: FileChange, directory: str) -> str:
    """File name relative to its group directory."""
    if directory and file_change.filename.startswith(directory + '/'):
        return file_change.filename[len(directory) + 1:]
    return file_change.filename


def group_files_by_directory(files: List[FileChange]) -> List[DirectoryGroup]:
    """
    Group files by parent directory.

    The root group comes first, the remaining directories are sorted
    case-insensitively. Files keep their original order within a group.
    """
    groups: Dict[str, DirectoryGroup] = {}
    for file_change in files:
        directory = file_change.directory
        if directory not in groups:
            groups[directory] = DirectoryGroup(directory=directory)
        groups[directory].files.append(file_change)

    ordered = sorted(groups, key=lambda d: (d != '', d.lower(), d))
    return [groups[directory] for directory in ordered]


def filter_files(files: List[FileChange], query: str) -> List[FileChange]:
    """Case-insensitive filename substring filter; a blank query keeps everything."""
    needle = (query or '').strip().lower()
    if not needle:
        return list(files)
    return [f for f in files if needle in f.filename.lower()]
