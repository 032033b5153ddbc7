"""
Symptom engine: one free-text turn in, one formatted reply out.

Pipeline per turn: intent router -> normalizer -> matcher -> formatter.
The knowledge base is built once and only read afterwards, so a single engine
can serve any number of chat sessions.
"""

from dataclasses import dataclass
from typing import Dict, List

from advisor import formatter, intents
from advisor.knowledge_base import KnowledgeBase, load_knowledge_base
from advisor.matcher import Match, match
from advisor.normalizer import normalize


@dataclass(frozen=True)
class Analysis:
    canonical: str
    key: str
    matches: List[Match]


class SymptomEngine:
    """Answers small talk and symptom descriptions against a knowledge base."""

    def __init__(self, knowledge_base: KnowledgeBase = None):
        self.kb = knowledge_base if knowledge_base is not None else KnowledgeBase.empty()

    @classmethod
    async def create(cls, locations: Dict[str, str] = None) -> "SymptomEngine":
        """Load the knowledge base from the configured sources (empty on failure)."""
        return cls(await load_knowledge_base(locations))

    def analyze(self, text: str) -> Analysis:
        canonical, key = normalize(text)
        return Analysis(canonical, key, match(key, self.kb))

    def respond(self, text: str) -> str:
        """
        Produce the reply for one user turn.

        Args:
            text: Raw user input (assumed non-empty)

        Returns:
            Canned small-talk reply or formatted symptom report
        """
        reply = intents.route(text)
        if reply is not None:
            return reply

        analysis = self.analyze(text)
        return formatter.format_response(analysis.canonical, analysis.matches)
