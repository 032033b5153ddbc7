"""
Chat session around the symptom engine.

Keeps the per-session state (message history, turn counter, symptom diary)
that the shared, read-only engine must not hold.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from advisor.diary import SymptomDiary
from advisor.engine import SymptomEngine

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"


@dataclass
class ChatState:
    """Manages conversation state."""
    history: List[Dict[str, str]] = field(default_factory=list)
    turn: int = 0
    diary: SymptomDiary = field(default_factory=SymptomDiary)

    def add_message(self, role: str, content: str):
        self.history.append({"role": role, "content": content})

    def reset(self):
        """Reset the conversation state."""
        self.history = []
        self.turn = 0
        self.diary.clear()


class AdvisorChatbot:
    """One conversation with the symptom advisor."""

    def __init__(self, engine: SymptomEngine):
        self.engine = engine
        self.state = ChatState()

    def welcome(self) -> str:
        """Welcome message."""
        return (
            "Hello! I'm your medical health assistant. How can I help you today? "
            "You can ask about symptoms, track your health, or learn medical terms. "
            "Please note that I provide general health information only and am not a "
            "substitute for professional medical advice."
        )

    def process_message(self, text: str) -> str:
        """
        Process user message and return response.

        Args:
            text: User's message

        Returns:
            Bot's response
        """
        self.state.turn += 1
        text = text.strip()

        if not text:
            return "Could you describe your symptoms?"

        if text.lower() in ["restart", "start over"]:
            self.state.reset()
            return "Okay, let's start over. What symptoms are you experiencing?"

        self.state.add_message(ROLE_USER, text)
        response = self.engine.respond(text)
        self.state.add_message(ROLE_ASSISTANT, response)
        return response

    def transcript(self) -> str:
        """Plain-text export of the conversation."""
        labels = {ROLE_USER: "You", ROLE_ASSISTANT: "Assistant"}
        blocks = [f"{labels[m['role']]}:\n{m['content']}" for m in self.state.history]
        return "\n\n".join(blocks)
