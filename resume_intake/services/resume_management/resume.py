"""Resume entity: one submission, its stored metadata and its upload handle."""

from __future__ import annotations

import os
import uuid
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, BinaryIO, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# Document field names in the resumes collection
USER_ID_FIELD = "userid"
NAME_FIELD = "name"
EMAIL_FIELD = "email"
URL_FIELD = "url"
LAST_MODIFIED_FIELD = "lastModified"


class ResumeError(Exception):
    """Base error for resume construction and lookup."""


class ResumeIdentifierError(ResumeError):
    """A unique object name could not be generated."""


class ResumeStateError(ResumeError):
    """The resume is not in a state that allows the requested operation."""


class ResumeDecodeError(ResumeError):
    """A stored document could not be decoded into a Resume."""


class ResumePhase(str, Enum):
    """Where a resume is in its lifecycle.

    Upload and persistence are independent steps sequenced by the caller; a
    resume may be saved before it has a URL.
    """

    CONSTRUCTED = "constructed"
    UPLOADED = "uploaded"
    PERSISTED = "persisted"


def generate_object_name(filename: str) -> str:
    """Random UUID4 name keeping the extension of `filename`."""
    try:
        identifier = uuid.uuid4()
    except (OSError, NotImplementedError) as e:
        raise ResumeIdentifierError(f"Failed to generate resume identifier: {e}") from e
    extension = os.path.splitext(filename or "")[1]
    return f"{identifier}{extension}"


@dataclass
class Resume:
    user_id: str = ""
    name: str = ""
    email: str = ""
    url: str = ""
    last_modified: Optional[datetime] = None
    phase: ResumePhase = ResumePhase.CONSTRUCTED
    file: Optional[BinaryIO] = field(default=None, repr=False, compare=False)
    content_type: Optional[str] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_upload(
        cls,
        user_id: str,
        email: str,
        file: Any,
        filename: Optional[str] = None,
    ) -> "Resume":
        """
        Build a resume for a fresh submission.

        Args:
            user_id: Submitting user
            email: Submitting user's email
            file: Uploaded file (a werkzeug FileStorage or any binary stream)
            filename: Original filename; defaults to `file.filename`

        Returns:
            Resume: With a generated name, the file attached and no URL
        """
        original_name = filename if filename is not None else getattr(file, "filename", "")
        resume = cls(
            user_id=user_id,
            name=generate_object_name(original_name),
            email=email,
        )
        resume.attach_file(file)
        logger.debug(f"Created resume {resume.name} for user_id={user_id}")
        return resume

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Resume":
        """Decode a stored document; missing fields decode as empty strings."""
        values = {}
        for attr, key in (
            ("user_id", USER_ID_FIELD),
            ("name", NAME_FIELD),
            ("email", EMAIL_FIELD),
            ("url", URL_FIELD),
        ):
            value = document.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ResumeDecodeError(
                    f"Field '{key}' must be a string, got {type(value).__name__}"
                )
            values[attr] = value

        last_modified = document.get(LAST_MODIFIED_FIELD)
        if last_modified is not None and not isinstance(last_modified, datetime):
            raise ResumeDecodeError(
                f"Field '{LAST_MODIFIED_FIELD}' must be a date, "
                f"got {type(last_modified).__name__}"
            )

        return cls(
            last_modified=last_modified,
            phase=ResumePhase.PERSISTED,
            **values,
        )

    def attach_file(self, file: Any) -> None:
        """Attach the byte source used by the next upload."""
        self.file = file
        self.content_type = getattr(file, "content_type", None) or None

    def has_file(self) -> bool:
        return self.file is not None

    def mark_uploaded(self, url: str) -> None:
        self.url = url
        self.phase = ResumePhase.UPLOADED

    def mark_persisted(self) -> None:
        self.phase = ResumePhase.PERSISTED

    def to_document(self) -> Dict[str, str]:
        """Fields written by an insert; lastModified is only set by updates."""
        return {
            USER_ID_FIELD: self.user_id,
            NAME_FIELD: self.name,
            EMAIL_FIELD: self.email,
            URL_FIELD: self.url,
        }

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "url": self.url,
        }
        if self.last_modified is not None:
            data["last_modified"] = self.last_modified.isoformat()
        return data
