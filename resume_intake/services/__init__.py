"""
Services package for Resume Intake.

This package contains all business logic services organized by domain:
- object_store: Google Cloud Storage client
- resume_management: Resume entity, repository, storage and pipeline
"""

from .object_store import ObjectStoreClient

from .resume_management import (
    Resume,
    ResumeRepository,
    ResumeStorageService,
    ResumePipeline,
    ResumeInsight,
)

__all__ = [
    "ObjectStoreClient",
    "Resume",
    "ResumeRepository",
    "ResumeStorageService",
    "ResumePipeline",
    "ResumeInsight",
]
