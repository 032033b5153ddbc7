#!/usr/bin/env python3
"""
Interactive command-line chat with the symptom advisor.
"""

import asyncio
import logging

import config
from advisor.chatbot import AdvisorChatbot
from advisor.engine import SymptomEngine


def main():
    """Interactive chatbot CLI."""
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s - %(message)s")

    print("=" * 60)
    print("Medical Health Assistant")
    print("=" * 60)
    print("Type 'quit' or 'exit' to stop\n")

    engine = asyncio.run(SymptomEngine.create())
    if engine.kb.is_empty():
        print("Warning: no conditions loaded, symptoms will not be recognized")
    else:
        print(f"✓ Loaded {len(engine.kb)} conditions")

    chatbot = AdvisorChatbot(engine)
    print(f"\nAssistant: {chatbot.welcome()}")

    while True:
        try:
            user_input = input("\nYou: ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\n\nTake care!")
            break

        if not user_input:
            continue

        if user_input.lower() in ["quit", "exit", "q"]:
            print("\nTake care!")
            break

        print(f"\nAssistant:\n{chatbot.process_message(user_input)}")


if __name__ == "__main__":
    main()
