"""
Resume service for handling file uploads to object storage.
Separated from the API layer so routes never talk to the storage SDK.
"""

import logging

from resume_intake.services.object_store import ObjectStoreClient
from .resume import Resume, ResumeStateError

logger = logging.getLogger(__name__)


class ResumeStorageService:
    """Service class for uploading resume files to the configured bucket."""

    def __init__(self, object_store: ObjectStoreClient, bucket: str):
        self.object_store = object_store
        self.bucket = bucket

    def upload(self, resume: Resume) -> str:
        """
        Upload the resume's attached file under its generated name.

        Args:
            resume: Resume with a file attached

        Returns:
            str: Public URL, also stored on `resume.url`

        Raises:
            ResumeStateError: If no file is attached
            ObjectStoreUploadError: If the write fails
        """
        if not resume.has_file():
            raise ResumeStateError(f"Resume {resume.name} has no file to upload")

        url = self.object_store.upload_object(
            self.bucket,
            resume.name,
            resume.file,
            content_type=resume.content_type,
        )
        resume.mark_uploaded(url)
        logger.info(f"Uploaded resume {resume.name} for user_id={resume.user_id}")
        return url
