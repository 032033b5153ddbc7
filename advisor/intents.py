"""
Intent Router

Small talk is answered with canned replies before symptom matching runs.
Phrase lists are checked in priority order by plain substring containment on
the lowercased input; the first list with a hit wins.
"""

from typing import NamedTuple, Optional, Tuple


class Intent(NamedTuple):
    name: str
    phrases: Tuple[str, ...]
    reply: str


INTENTS = (
    Intent(
        "greeting",
        ("hi", "hello", "hey", "good morning", "good afternoon", "good evening"),
        "Hello! I'm your medical assistant. How are you feeling today?",
    ),
    Intent(
        "farewell",
        ("bye", "goodbye", "see you", "thanks", "thank you"),
        "Take care! Remember to consult a healthcare professional for proper medical advice.",
    ),
    Intent(
        "how_are_you",
        ("how are you", "how are you doing", "how do you do", "whats up", "what's up"),
        "I'm doing well, thank you! I'm here to help you with any health concerns. "
        "How can I assist you today?",
    ),
    Intent(
        "identity",
        ("who are you", "what are you"),
        "I'm a medical health assistant designed to help you understand symptoms and provide "
        "general health information. While I can offer guidance, please remember to consult "
        "healthcare professionals for proper medical advice.",
    ),
    Intent(
        "help",
        ("can you help", "i need help"),
        "Of course! I can help you understand symptoms, provide general health information, "
        "or guide you through emergency situations. What would you like to know about?",
    ),
    Intent(
        "what_to_do",
        ("what should i do", "what can i do"),
        "I can help guide you better if you tell me specific symptoms or health concerns "
        "you're experiencing. What symptoms are you having?",
    ),
)


def detect_intent(text: str) -> Optional[Intent]:
    """Return the first intent with a phrase contained in `text`, or None."""
    lowered = text.lower()
    for intent in INTENTS:
        if any(phrase in lowered for phrase in intent.phrases):
            return intent
    return None


def route(text: str) -> Optional[str]:
    """Canned reply for small talk, or None when the input should go to symptom matching."""
    intent = detect_intent(text)
    return intent.reply if intent else None
