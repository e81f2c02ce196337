"""
Resume intake pipeline.

This file handles complete resume submissions:
1. Build the resume with a generated object name
2. Upload the file to object storage (ResumeStorageService)
3. Insert or update the metadata record (ResumeRepository)

The object write and the database write are independent. When the database
step fails after a successful upload the object stays in the bucket; the
failure is logged with the object name and re-raised.
"""

import logging
from typing import Any

from pymongo.errors import PyMongoError

from .resume import Resume
from .resume_repository import ResumeRepository
from .resume_storage_service import ResumeStorageService

logger = logging.getLogger(__name__)


class ResumePipeline:
    """Combines upload and persistence for one submission at a time."""

    def __init__(
        self, storage_service: ResumeStorageService, repository: ResumeRepository
    ):
        self.storage_service = storage_service
        self.repository = repository

    def process_uploaded_file(self, file: Any, user_id: str, email: str) -> Resume:
        """
        Store a new submission.

        Args:
            file: Uploaded file object
            user_id: User ID
            email: User email

        Returns:
            Resume: Uploaded and saved resume
        """
        resume = Resume.from_upload(user_id, email, file)
        self.storage_service.upload(resume)

        try:
            self.repository.save(resume)
        except PyMongoError as e:
            logger.error(
                f"Saving resume failed after upload; object {resume.name} "
                f"left in bucket {self.storage_service.bucket}: {str(e)}"
            )
            raise

        return resume

    def replace_file(self, user_id: str, file: Any) -> Resume:
        """
        Re-upload a user's resume under its existing object name and
        refresh the stored URL.

        Raises:
            ResumeNotFoundError: If the user has no stored resume
        """
        resume = self.repository.find_by_user_id(user_id)
        resume.attach_file(file)
        self.storage_service.upload(resume)

        try:
            self.repository.update(resume)
        except PyMongoError as e:
            logger.error(
                f"Updating resume failed after upload; record for user_id={user_id} "
                f"is stale for object {resume.name}: {str(e)}"
            )
            raise

        return resume
