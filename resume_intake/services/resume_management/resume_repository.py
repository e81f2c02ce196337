"""
MongoDB access layer for resume records.

Lookups, inserts and updates against a single collection. Driver errors
(`pymongo.errors.PyMongoError`) are passed to the caller as they are.
"""

import logging
from typing import List, Optional

from pymongo import MongoClient
from pymongo.collection import Collection

from .resume import (
    EMAIL_FIELD,
    LAST_MODIFIED_FIELD,
    URL_FIELD,
    USER_ID_FIELD,
    Resume,
    ResumeError,
)

logger = logging.getLogger(__name__)


class ResumeNotFoundError(ResumeError):
    """No stored resume matches the lookup."""


class ResumeRepository:
    """Repository class for reading and writing resume documents."""

    def __init__(self, collection: Collection, client: Optional[MongoClient] = None):
        self.collection = collection
        self._client = client

    @classmethod
    def from_uri(
        cls, uri: str, database: str, collection: str
    ) -> "ResumeRepository":
        """Connect to MongoDB and bind to `database.collection`."""
        client = MongoClient(uri)
        logger.info(f"Using MongoDB collection {database}.{collection}")
        return cls(client[database][collection], client=client)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed.")
            self._client = None

    def _find_one(self, field: str, value: str) -> Resume:
        document = self.collection.find_one({field: value})
        if document is None:
            raise ResumeNotFoundError(f"No resume found with {field}={value!r}")
        return Resume.from_document(document)

    def find_by_user_id(self, user_id: str) -> Resume:
        """
        Get the resume stored for a user.

        Raises:
            ResumeNotFoundError: If no document has this user ID
            ResumeDecodeError: If the stored document is malformed
        """
        return self._find_one(USER_ID_FIELD, user_id)

    def find_by_email(self, email: str) -> Resume:
        """Same as `find_by_user_id`, filtering on the email field."""
        return self._find_one(EMAIL_FIELD, email)

    def save(self, resume: Resume) -> None:
        """Insert the resume as a new document. Existing records are not checked."""
        result = self.collection.insert_one(resume.to_document())
        resume.mark_persisted()
        logger.info(
            f"Saved resume {resume.name} for user_id={resume.user_id} "
            f"(_id={result.inserted_id})"
        )

    def update(self, resume: Resume) -> int:
        """
        Set the stored URL for the resume's user and stamp lastModified.

        Nothing is inserted when the user has no document.

        Returns:
            int: Number of matched documents (0 or 1)
        """
        result = self.collection.update_one(
            {USER_ID_FIELD: resume.user_id},
            {
                "$set": {URL_FIELD: resume.url},
                "$currentDate": {LAST_MODIFIED_FIELD: True},
            },
        )
        if result.matched_count == 0:
            logger.warning(f"Update matched no resume for user_id={resume.user_id}")
        else:
            resume.mark_persisted()
        return result.matched_count

    def find_all(self) -> List[Resume]:
        """Every stored resume, in collection order."""
        resumes = []
        cursor = self.collection.find({})
        try:
            for document in cursor:
                resumes.append(Resume.from_document(document))
        finally:
            cursor.close()
        return resumes
