from .chat import ChatReply, ChatRequest, ConversationTurn, JobSearchReply, LetterReply
from .jobs import JobListing, RankedJobListing, SearchOutcome, SearchParameters, SearchStrategy
from .letter import LetterDraft

__all__ = [
    "ChatRequest",
    "ConversationTurn",
    "ChatReply",
    "JobSearchReply",
    "LetterReply",
    "JobListing",
    "RankedJobListing",
    "SearchParameters",
    "SearchStrategy",
    "SearchOutcome",
    "LetterDraft",
]
