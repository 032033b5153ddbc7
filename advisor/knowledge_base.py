"""
Knowledge Base Builder

Merges the four parsed tables into one ordered mapping of condition name -> ConditionRecord.
Rows repeating a condition name union their symptoms into the first record.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import requests

from advisor.loader import (
    TabularSources,
    fetch_sources,
    parse_dataset_rows,
    parse_description_rows,
    parse_precaution_rows,
    parse_severity_rows,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConditionRecord:
    """One condition with its symptoms, optional description/precautions and the shared severity table."""
    name: str
    symptoms: Tuple[str, ...]
    description: Optional[str]
    precautions: Optional[Tuple[str, ...]]
    severity: Mapping[str, int]


class KnowledgeBase:
    """Read-only, insertion-ordered collection of conditions."""

    def __init__(self, conditions: Dict[str, ConditionRecord] = None, severity: Mapping[str, int] = None):
        self._conditions = MappingProxyType(dict(conditions or {}))
        self.severity = severity if severity is not None else MappingProxyType({})

    @classmethod
    def empty(cls) -> "KnowledgeBase":
        return cls()

    def __len__(self) -> int:
        return len(self._conditions)

    def __iter__(self) -> Iterator[ConditionRecord]:
        return iter(self._conditions.values())

    def __contains__(self, name) -> bool:
        return name in self._conditions

    def __getitem__(self, name: str) -> ConditionRecord:
        return self._conditions[name]

    def get(self, name: str) -> Optional[ConditionRecord]:
        return self._conditions.get(name)

    @property
    def names(self) -> List[str]:
        return list(self._conditions)

    def is_empty(self) -> bool:
        return not self._conditions

    def symptom_vocabulary(self) -> List[str]:
        """Every distinct symptom, in order of first appearance."""
        seen = {}
        for record in self:
            for symptom in record.symptoms:
                seen.setdefault(symptom, None)
        return list(seen)


def build_knowledge_base(
    severity_rows: List[Tuple[str, int]],
    description_rows: List[Tuple[str, str]],
    precaution_rows: List[Tuple[str, Tuple[str, ...]]],
    dataset_rows: List[Tuple[str, Tuple[str, ...]]],
) -> KnowledgeBase:
    """
    Merge parsed rows into a KnowledgeBase.

    Dataset rows are visited in file order. A condition seen again has its symptoms
    unioned with the new row's; a new condition picks up its description and
    precautions by exact name and a reference to the single severity table.
    """
    severity = MappingProxyType(dict(severity_rows))
    descriptions = dict(description_rows)
    precautions = dict(precaution_rows)

    # name -> ordered symptom set (dict keys)
    merged: Dict[str, Dict[str, None]] = {}
    for condition, symptoms in dataset_rows:
        merged.setdefault(condition, {}).update(dict.fromkeys(symptoms))

    conditions = {
        name: ConditionRecord(
            name=name,
            symptoms=tuple(symptoms),
            description=descriptions.get(name),
            precautions=precautions.get(name),
            severity=severity,
        )
        for name, symptoms in merged.items()
    }
    return KnowledgeBase(conditions, severity)


def build_from_sources(sources: TabularSources) -> KnowledgeBase:
    """Parse the four raw texts and build the knowledge base."""
    kb = build_knowledge_base(
        parse_severity_rows(sources.severity),
        parse_description_rows(sources.description),
        parse_precaution_rows(sources.precaution),
        parse_dataset_rows(sources.dataset),
    )
    logger.info(
        "Built knowledge base: %d conditions, %d symptoms, %d severity weights",
        len(kb), len(kb.symptom_vocabulary()), len(kb.severity),
    )
    return kb


async def load_knowledge_base(locations: Dict[str, str] = None) -> KnowledgeBase:
    """
    Fetch the four sources and build the knowledge base.

    Any fetch failure yields an empty knowledge base instead of partial data.
    """
    try:
        sources = await fetch_sources(locations)
    except (OSError, requests.RequestException, UnicodeDecodeError) as e:
        logger.error("Error loading datasets, continuing with an empty knowledge base: %s", e)
        return KnowledgeBase.empty()
    return build_from_sources(sources)
