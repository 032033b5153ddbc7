"""
In-memory symptom diary.

Entries are kept for the lifetime of a chat session only and are never
consulted by the matcher.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import List

MIN_SEVERITY = 1
MAX_SEVERITY = 10


@dataclass
class SymptomLog:
    symptom: str
    severity: int = MIN_SEVERITY
    notes: str = ""
    date: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data


@dataclass
class SymptomDiary:
    logs: List[SymptomLog] = field(default_factory=list)

    def add(self, symptom: str, severity: int = MIN_SEVERITY, notes: str = "") -> SymptomLog:
        """Record a symptom with a 1-10 severity rating."""
        if not MIN_SEVERITY <= severity <= MAX_SEVERITY:
            raise ValueError(f"Severity must be between {MIN_SEVERITY} and {MAX_SEVERITY}, got {severity}")
        log = SymptomLog(symptom=symptom.strip(), severity=severity, notes=notes)
        self.logs.append(log)
        return log

    def entries(self) -> List[SymptomLog]:
        return list(self.logs)

    def clear(self):
        self.logs = []

    def __len__(self):
        return len(self.logs)
