"""
Tests for the MongoDB resume repository, backed by mongomock.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from resume_intake.services.resume_management import (
    Resume,
    ResumeDecodeError,
    ResumeNotFoundError,
    ResumePhase,
)


class TestLookups:
    def test_find_by_user_id(self, repository):
        repository.save(Resume(user_id="u1", name="a.pdf", email="u1@example.com"))

        found = repository.find_by_user_id("u1")

        assert found.name == "a.pdf"
        assert found.email == "u1@example.com"
        assert found.phase == ResumePhase.PERSISTED
        assert found.file is None

    def test_find_by_email(self, repository):
        repository.save(Resume(user_id="u1", name="a.pdf", email="u1@example.com"))

        assert repository.find_by_email("u1@example.com").user_id == "u1"

    def test_lookup_is_exact_match(self, repository):
        repository.save(Resume(user_id="u1", name="a.pdf", email="u1@example.com"))

        with pytest.raises(ResumeNotFoundError):
            repository.find_by_email("U1@example.com")

    def test_unknown_user_raises_not_found(self, repository):
        with pytest.raises(ResumeNotFoundError):
            repository.find_by_user_id("nonexistent")

    def test_malformed_document_raises_decode_error(self, repository, collection):
        collection.insert_one({"userid": "u9", "name": 42})

        with pytest.raises(ResumeDecodeError):
            repository.find_by_user_id("u9")


class TestWrites:
    def test_save_writes_document_schema(self, repository, collection):
        resume = Resume(user_id="u1", name="a.pdf", email="u1@example.com")
        repository.save(resume)

        stored = collection.find_one({"userid": "u1"}, {"_id": False})
        assert stored == {
            "userid": "u1",
            "name": "a.pdf",
            "email": "u1@example.com",
            "url": "",
        }
        assert resume.phase == ResumePhase.PERSISTED

    def test_save_does_not_deduplicate(self, repository, collection):
        repository.save(Resume(user_id="u1", name="a.pdf"))
        repository.save(Resume(user_id="u1", name="b.pdf"))

        assert collection.count_documents({"userid": "u1"}) == 2

    def test_update_sets_url_and_last_modified(self, repository, collection):
        repository.save(Resume(user_id="u1", name="a.pdf", email="u1@example.com"))

        matched = repository.update(Resume(user_id="u1", url="http://x/r1"))

        assert matched == 1
        stored = collection.find_one({"userid": "u1"})
        assert stored["url"] == "http://x/r1"
        assert isinstance(stored["lastModified"], datetime)
        # Only url and lastModified change
        assert stored["name"] == "a.pdf"

    def test_update_then_lookup_returns_latest_url(self, repository):
        repository.save(Resume(user_id="u1", name="a.pdf"))
        repository.update(Resume(user_id="u1", url="http://x/r1"))
        repository.update(Resume(user_id="u1", url="http://x/r2"))

        found = repository.find_by_user_id("u1")
        assert found.url == "http://x/r2"
        assert found.last_modified is not None

    def test_update_unknown_user_is_silent(self, repository, collection):
        resume = Resume(user_id="ghost", url="http://x/r1")

        assert repository.update(resume) == 0
        assert collection.count_documents({}) == 0
        assert resume.phase == ResumePhase.CONSTRUCTED


class TestFindAll:
    def test_empty_collection(self, repository):
        assert repository.find_all() == []

    def test_returns_every_saved_document(self, repository):
        for user_id, name in [("u1", "a.pdf"), ("u2", "b.pdf"), ("u1", "c.pdf")]:
            repository.save(Resume(user_id=user_id, name=name))

        resumes = repository.find_all()

        assert len(resumes) == 3
        assert sorted((r.user_id, r.name) for r in resumes) == [
            ("u1", "a.pdf"),
            ("u1", "c.pdf"),
            ("u2", "b.pdf"),
        ]

    def test_save_then_update_scenario(self, repository):
        repository.save(Resume(user_id="u1", url=""))
        repository.update(Resume(user_id="u1", url="http://x/r1"))

        resumes = repository.find_all()

        assert len(resumes) == 1
        assert resumes[0].user_id == "u1"
        assert resumes[0].url == "http://x/r1"

    def test_malformed_document_fails_listing(self, repository, collection):
        repository.save(Resume(user_id="u1", name="a.pdf"))
        collection.insert_one({"userid": "u2", "url": ["not", "a", "string"]})

        with pytest.raises(ResumeDecodeError):
            repository.find_all()
