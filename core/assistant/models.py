from dataclasses import dataclass

from pydantic import BaseModel


NO_CONCLUSION = "No conclusion provided"
NO_BEHAVIOR_ANALYSIS = "No user behavior analysis provided"
NO_CHAT_STYLE = "No chat style analysis provided"


class ChatSummary(BaseModel):
    """
    Structured analysis of a conversation returned by the summarizer
    assistant. Every field is always a string; missing sections carry
    their placeholder text instead.
    """
    chat_conclusion: str = NO_CONCLUSION
    user_behavior_analysis: str = NO_BEHAVIOR_ANALYSIS
    chat_style: str = NO_CHAT_STYLE


@dataclass(frozen=True)
class AssistantReply:
    """Text produced by one completed run, plus the remote ids involved."""
    text: str
    thread_id: str
    run_id: str
    assistant_id: str
