"""
Response Formatter

Renders ranked matches as a fixed-layout plain-text report. The layout (bullets,
four-space indentation per level, blank lines between blocks) is consumed by a
whitespace-preserving renderer and by speech synthesis, so it must stay stable.
"""

from string import ascii_lowercase
from typing import List, Sequence

import config
from advisor.matcher import Match

BULLET = "•"
INDENT = "    "

NEXT_STEPS = (
    "Share any other symptoms you're experiencing",
    "Consult a healthcare professional for proper diagnosis",
)

DISCLAIMER = (
    "This is general guidance only",
    "Not a substitute for professional medical advice",
)

NOT_FOUND = (
    "Symptom not recognized",
    "Please try describing it differently",
    "Example: headache, fever, cough",
)


def _section(title: str, items: Sequence[str], depth: int = 0) -> List[str]:
    prefix = INDENT * depth
    lines = [f"{prefix}{BULLET} {title}:"]
    lines.extend(f"{prefix}{INDENT}- {item}" for item in items)
    return lines


def related_symptoms(match: Match, limit: int = config.RELATED_SYMPTOMS_LIMIT) -> List[str]:
    """Symptoms of the condition that were not matched, underscores shown as spaces."""
    others = [s for s in match.condition.symptoms if s not in match.matched_symptoms]
    return [s.replace("_", " ") for s in others[:limit]]


def format_condition(label: str, match: Match) -> List[str]:
    condition = match.condition
    lines = [f"{label}. {condition.name}", ""]

    if condition.description:
        lines += _section("Description", [condition.description.replace('"', "").strip()], depth=1)
        lines.append("")

    # Aggregate score of the matched symptoms; not rescaled to a 0-10 range
    lines += _section("Severity", [f"{match.score}/10"], depth=1)
    lines.append("")

    if condition.precautions:
        lines += _section("Precautions", condition.precautions, depth=1)
        lines.append("")

    related = related_symptoms(match)
    if related:
        lines += _section("Related Symptoms", related, depth=1)
        lines.append("")

    return lines


def format_not_found() -> str:
    return "\n".join(_section("Error", NOT_FOUND))


def format_response(canonical: str, matches: Sequence[Match]) -> str:
    """
    Render the report for `matches`, or the not-found message when there are none.

    Args:
        canonical: Canonical user input shown under "Symptom Detected"
        matches: Ranked matches from advisor.matcher.match

    Returns:
        Multi-line report text
    """
    if not matches:
        return format_not_found()

    lines = _section("Symptom Detected", [canonical])
    lines += ["", f"{BULLET} Possible Conditions:", ""]
    for label, match in zip(ascii_lowercase, matches):
        lines += format_condition(label, match)

    lines += _section("Next Steps", NEXT_STEPS)
    lines.append("")
    lines += _section("Disclaimer", DISCLAIMER)
    return "\n".join(lines)
