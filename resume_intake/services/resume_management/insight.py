"""Reduced read-model of a resume for external consumers."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel

from .resume import Resume


class ResumeInsight(BaseModel):
    user_id: str = ""
    name: str = ""
    url: str = ""

    class Config:
        frozen = True

    @classmethod
    def from_resume(cls, resume: Resume) -> "ResumeInsight":
        return cls(user_id=resume.user_id, name=resume.name, url=resume.url)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, leaving out empty fields."""
        return {key: value for key, value in self.model_dump().items() if value}
