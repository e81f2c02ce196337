from __future__ import annotations

import io
from typing import Dict, List, Optional

import mongomock
import pytest

from resume_intake.services.object_store import ObjectStoreUploadError, public_url
from resume_intake.services.resume_management import (
    ResumePipeline,
    ResumeRepository,
    ResumeStorageService,
)

TEST_BUCKET = "test-bucket"


class FakeObjectStore:
    """In-memory stand-in for ObjectStoreClient."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.objects: Dict[str, bytes] = {}
        self.content_types: Dict[str, Optional[str]] = {}
        self.calls: List[tuple] = []

    def upload_object(self, bucket, name, stream, content_type=None):
        self.calls.append((bucket, name))
        if self.fail:
            raise ObjectStoreUploadError(f"Failed to upload {name} to bucket {bucket}")
        self.objects[f"{bucket}/{name}"] = stream.read()
        self.content_types[f"{bucket}/{name}"] = content_type
        return public_url(bucket, name)


class NamedBytesIO(io.BytesIO):
    """Binary stream carrying a filename like an uploaded file."""

    def __init__(self, data: bytes, filename: str, content_type: Optional[str] = None):
        super().__init__(data)
        self.filename = filename
        self.content_type = content_type


@pytest.fixture
def collection():
    return mongomock.MongoClient()["resume_intake"]["resumes"]


@pytest.fixture
def repository(collection):
    return ResumeRepository(collection)


@pytest.fixture
def object_store():
    return FakeObjectStore()


@pytest.fixture
def storage_service(object_store):
    return ResumeStorageService(object_store, TEST_BUCKET)


@pytest.fixture
def pipeline(storage_service, repository):
    return ResumePipeline(storage_service, repository)


@pytest.fixture
def upload_file():
    def _make(data: bytes = b"%PDF-1.4 resume", filename: str = "cv.pdf"):
        return NamedBytesIO(data, filename, content_type="application/pdf")

    return _make
