from __future__ import annotations

from typing import Any, Sequence

from career_agent.ai.types import ChatMessage
from career_agent.core.config import settings
from career_agent.profile.sanitize import cap_context, sanitize_profile, serialize_profile
from career_agent.routing.locales import language_name
from career_agent.schemas.chat import ConversationTurn

DOCUMENT_EDITING_PROMPT = """You are an expert CV analyst, career assistant and document designer. You help users build, improve and style their CVs through natural conversation.

## WHAT YOU DO

1. Extract and structure CV information from what the user tells you
2. Modify, improve or rewrite CV content
3. Change templates, colors and visual design
4. Review a CV when asked: examine every section, name concrete strengths and weaknesses, and give actionable suggestions with examples
5. Give professional career advice
6. Job search is available in this assistant. Never say you cannot search for jobs.

## JSON RESPONSE FORMAT

Always return a JSON object with this structure:

{
  "response": "Your conversational reply. For review requests this holds the complete analysis.",
  "cvUpdates": {
    "fullName": "Full name",
    "professionalHeadline": "Job title or headline",
    "summary": "Professional summary paragraph",
    "contact": {"email": "", "phone": "", "location": "City, Country"},
    "social": {"linkedin": "", "github": "", "website": ""},
    "experience": [
      {"title": "", "company": "", "location": "", "dates": "Jan 2020 - Present", "achievements": ["Achievement with metrics"]}
    ],
    "education": [
      {"degree": "", "field": "", "institution": "", "dates": "2016 - 2020"}
    ],
    "technicalSkills": "Python, JavaScript, React",
    "languages": ["English (Native)"],
    "hobbies": ["Hiking"],
    "template": "modern",
    "layout": {"accentColor": "#2563eb", "photoPosition": "left"}
  }
}

Available templates: modern, executive, creative, minimal, professional, tech.

## RULES

1. Always return valid JSON, no markdown code blocks
2. Only include fields that need to change in cvUpdates; use {} when nothing changes
3. For styling requests always include template or layout.accentColor
4. Write achievement bullets with action verbs and metrics
5. Keep the professional summary to 2-3 impactful sentences
6. Confirm the changes you made in the response

Return ONLY the JSON object."""

PROFILE_CONTEXT_HEADER = "Current CV data (professional information only):"


def language_instruction(language: str) -> str:
    name = language_name(language)
    return (
        f"\n\nIMPORTANT: Always respond in {name}. "
        f"All your responses, questions and suggestions must be in {name}."
    )


def profile_context(profile: dict[str, Any] | None) -> str | None:
    sanitized = sanitize_profile(profile)
    if not sanitized:
        return None
    return f"{PROFILE_CONTEXT_HEADER}\n{cap_context(serialize_profile(sanitized))}"


def build_chat_messages(
    message: str,
    profile: dict[str, Any] | None,
    history: Sequence[ConversationTurn],
    language: str,
    *,
    history_window: int | None = None,
) -> list[ChatMessage]:
    """System instruction, recent turns, profile context, then the user message."""
    window = settings.chat_history_window if history_window is None else history_window
    messages = [ChatMessage(role="system", content=DOCUMENT_EDITING_PROMPT + language_instruction(language))]

    recent = list(history)[-window:] if window > 0 else []
    messages.extend(ChatMessage(role=turn.role, content=turn.content) for turn in recent if turn.content)

    context = profile_context(profile)
    if context:
        messages.append(ChatMessage(role="system", content=context))

    messages.append(ChatMessage(role="user", content=message))
    return messages
