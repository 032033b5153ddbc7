"""
Matcher & Ranker

A condition is a candidate when any of its symptoms contains the input key or is
contained in it (after both go through the same comparison_key normalization).
Candidates are scored by the summed severity of their matched symptoms, sorted
highest first and truncated. Equal scores keep knowledge-base order.
"""

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Tuple

import config
from advisor.knowledge_base import ConditionRecord, KnowledgeBase
from advisor.normalizer import comparison_key


@dataclass(frozen=True)
class Match:
    condition: ConditionRecord
    matched_symptoms: Tuple[str, ...]
    score: int


def symptom_matches(symptom: str, key: str) -> bool:
    """Bidirectional substring test between a symptom and the input key."""
    symptom_key = comparison_key(symptom)
    return key in symptom_key or symptom_key in key


def score_symptoms(symptoms: Iterable[str], severity: Mapping[str, int]) -> int:
    """Sum severity weights; symptoms missing from the table weigh 0."""
    return sum(severity.get(symptom, 0) for symptom in symptoms)


def match(key: str, kb: KnowledgeBase, limit: int = config.MAX_RESULTS) -> List[Match]:
    """
    Rank the conditions of `kb` against a comparison key.

    Args:
        key: Normalized comparison key of the user input
        kb: Knowledge base to search
        limit: Maximum number of results

    Returns:
        Up to `limit` matches, highest score first
    """
    # an empty key is a substring of every symptom and would match every condition
    if not key:
        return []

    candidates = []
    for record in kb:
        matched = tuple(s for s in record.symptoms if symptom_matches(s, key))
        if matched:
            candidates.append(Match(record, matched, score_symptoms(matched, kb.severity)))

    # sorted() is stable, so ties stay in knowledge-base order
    candidates = sorted(candidates, key=lambda m: m.score, reverse=True)
    return candidates[:limit]
