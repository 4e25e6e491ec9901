from __future__ import annotations

from pydantic import Field

from career_agent.schemas.base import WireModel


class LetterDraft(WireModel):
    recipient_name: str | None = None
    recipient_title: str | None = None
    company_name: str | None = None
    company_address: str | None = None
    job_title: str | None = None
    opening: str = Field(min_length=1)
    body: str = Field(min_length=1)
    closing: str = Field(min_length=1)
    signature: str = Field(min_length=1)
    detected_language: str = "en"
