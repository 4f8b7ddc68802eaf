"""
Event Payload Models

Pydantic models for the parts of a GitHub ``pull_request`` event the labeler reads
"""

from typing import Optional

from pydantic import BaseModel, field_validator


class PullRequestRef(BaseModel):
    """Pull request object embedded in the event"""
    number: int

    @field_validator('number')
    @classmethod
    def validate_number(cls, v):
        if v <= 0:
            raise ValueError('PR number must be positive')
        return v


class RepositoryRef(BaseModel):
    """Repository object embedded in the event"""
    full_name: str

    @field_validator('full_name')
    @classmethod
    def validate_full_name(cls, v):
        if '/' not in v:
            raise ValueError('Repository must be in format "owner/repo"')
        return v


class PullRequestEvent(BaseModel):
    """GitHub pull_request event (Actions event file or webhook body)"""
    action: Optional[str] = None
    pull_request: Optional[PullRequestRef] = None
    repository: Optional[RepositoryRef] = None

    @property
    def pr_number(self) -> Optional[int]:
        if self.pull_request is None:
            return None
        return self.pull_request.number

    @property
    def repository_name(self) -> Optional[str]:
        if self.repository is None:
            return None
        return self.repository.full_name
