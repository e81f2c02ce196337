"""
Resume management services package.

This package contains services for handling resume-specific operations:
- Resume entity and its stored document format
- MongoDB repository
- File storage and the submission pipeline
- Insight projection for external consumers
"""

from .resume import (
    Resume,
    ResumePhase,
    ResumeError,
    ResumeIdentifierError,
    ResumeStateError,
    ResumeDecodeError,
)
from .resume_repository import ResumeRepository, ResumeNotFoundError
from .resume_storage_service import ResumeStorageService
from .resume_pipeline import ResumePipeline
from .insight import ResumeInsight

__all__ = [
    # Entity
    "Resume",
    "ResumePhase",
    "ResumeError",
    "ResumeIdentifierError",
    "ResumeStateError",
    "ResumeDecodeError",
    # Repository
    "ResumeRepository",
    "ResumeNotFoundError",
    # Storage and pipeline services
    "ResumeStorageService",
    "ResumePipeline",
    # Read model
    "ResumeInsight",
]
