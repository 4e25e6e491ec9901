from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, Field, field_validator

from career_agent.schemas.base import WireModel
from career_agent.schemas.jobs import RankedJobListing
from career_agent.schemas.letter import LetterDraft

LocaleCode = Literal["en", "nl", "de", "fr", "es"]
ArtifactType = Literal["jobs", "letter", "cv"]

# Heavy fields the web client sends along with the profile but no task reads.
_HEAVY_PROFILE_FIELDS = ("photos", "photo", "photoData")


class ConversationTurn(WireModel):
    role: Literal["user", "assistant"]
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)


class ChatRequest(WireModel):
    message: str = Field(default="", max_length=100000)
    candidate_profile: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("candidateProfile", "cvData", "candidate_profile"),
    )
    conversation_history: list[ConversationTurn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("conversationHistory", "conversation_history"),
    )
    language_preference: LocaleCode = Field(
        default="en",
        validation_alias=AliasChoices("languagePreference", "language", "language_preference"),
    )

    @field_validator("candidate_profile", mode="after")
    @classmethod
    def _drop_heavy_fields(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        if not value:
            return value
        return {key: item for key, item in value.items() if key not in _HEAVY_PROFILE_FIELDS}

    @field_validator("conversation_history", mode="before")
    @classmethod
    def _keep_known_roles(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [
            turn
            for turn in value
            if isinstance(turn, ConversationTurn)
            or (isinstance(turn, dict) and turn.get("role") in {"user", "assistant"})
        ]

    @field_validator("language_preference", mode="before")
    @classmethod
    def _normalize_language(cls, value: Any) -> Any:
        if isinstance(value, str):
            code = value.split(",")[0].split("-")[0].strip().lower()
            return code if code in {"en", "nl", "de", "fr", "es"} else "en"
        return value or "en"


class ChatReplyBase(WireModel):
    response: str
    artifact_type: ArtifactType
    cv_updates: dict[str, Any] = Field(default_factory=dict)


class JobSearchReply(ChatReplyBase):
    artifact_type: ArtifactType = "jobs"
    jobs: list[RankedJobListing] = Field(default_factory=list)


class LetterReply(ChatReplyBase):
    artifact_type: ArtifactType = "letter"
    letter_updates: LetterDraft


class ChatReply(ChatReplyBase):
    artifact_type: ArtifactType = "cv"
