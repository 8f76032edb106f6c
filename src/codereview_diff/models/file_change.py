"""
File Change Data Models

GitHub pull request file objects as consumed by the diff viewer.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError, field_validator


VALID_STATUSES = {
    'added', 'modified', 'removed', 'renamed', 'copied', 'changed', 'unchanged'
}


class InvalidFileChangeError(ValueError):
    """Raised when a GitHub file object fails validation"""
    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


@dataclass
class FileChange:
    """파일 변경사항"""
    filename: str
    status: str
    additions: int = 0
    deletions: int = 0
    patch: Optional[str] = None

    def __post_init__(self):
        """데이터 검증"""
        if not self.filename:
            raise ValueError("Filename cannot be empty")
        if self.status not in VALID_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
        if self.additions < 0 or self.deletions < 0:
            raise ValueError("Addition and deletion counts must be non-negative")

    @property
    def has_patch(self) -> bool:
        return bool(self.patch)

    @property
    def is_binary(self) -> bool:
        """GitHub omits the patch for binary files"""
        return not self.has_patch

    @property
    def directory(self) -> str:
        """Parent directory of the file, empty for files at the root"""
        parts = self.filename.split('/')
        return '/'.join(parts[:-1]) if len(parts) > 1 else ''

    @classmethod
    def from_github(cls, data: Dict[str, Any]) -> "FileChange":
        """
        Build a FileChange from a GitHub pull request file object.

        Args:
            data: One entry of ``GET /repos/{owner}/{repo}/pulls/{n}/files``

        Returns:
            Validated FileChange

        Raises:
            InvalidFileChangeError: If the object is missing fields or has bad values
        """
        try:
            request = FileChangeRequest(**data)
        except ValidationError as e:
            raise InvalidFileChangeError(
                f"Invalid file change for {data.get('filename', '<unknown>')}: {e.error_count()} error(s)",
                errors=e.errors(),
            ) from e

        return cls(
            filename=request.filename,
            status=request.status,
            additions=request.additions,
            deletions=request.deletions,
            patch=request.patch,
        )


# Pydantic model for API validation
class FileChangeRequest(BaseModel):
    """API 요청용 FileChange 모델"""
    filename: str
    status: str
    additions: int = 0
    deletions: int = 0
    patch: Optional[str] = None

    @field_validator('filename')
    @classmethod
    def validate_filename(cls, v):
        if not v:
            raise ValueError('Filename cannot be empty')
        return v

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        if v not in VALID_STATUSES:
            raise ValueError('Invalid file status')
        return v

    @field_validator('additions', 'deletions')
    @classmethod
    def validate_counts(cls, v):
        if v < 0:
            raise ValueError('Counts must be non-negative')
        return v
