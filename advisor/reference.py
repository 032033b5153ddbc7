# Static reference data: emergency keywords/contacts and the medical terms glossary.

from types import MappingProxyType
from typing import List, Optional, Tuple

EMERGENCY_KEYWORDS = (
    "chest pain", "difficulty breathing", "stroke", "unconscious",
    "severe bleeding", "head injury", "seizure", "heart attack",
    "severe allergic reaction", "anaphylaxis", "suicide", "overdose",
)

EMERGENCY_SIGNS = (
    "Chest pain or pressure (possible heart attack)",
    "Difficulty breathing or shortness of breath",
    "Sudden severe headache",
    "Sudden confusion or difficulty speaking",
    "Fainting or loss of consciousness",
    "Severe bleeding",
    "Severe burns",
    "Seizures",
)

EMERGENCY_CONTACTS = MappingProxyType({
    "Emergency Services": "911",
    "Poison Control": "1-800-222-1222",
})

MEDICAL_TERMS = MappingProxyType({
    "acute": "Sudden onset, usually severe, of short duration.",
    "chronic": "Persisting over a long period of time.",
    "benign": "Not cancerous, usually not harmful.",
    "malignant": "Cancerous, capable of spreading.",
    "diagnosis": "Identification of a medical condition or disease.",
    "prognosis": "Likely course of a medical condition.",
    "anemia": "Condition where blood lacks enough healthy red blood cells.",
    "biopsy": "Removal of tissue for examination.",
    "edema": "Swelling caused by excess fluid in body tissues.",
    "hypertension": "High blood pressure, a condition where the force of blood against "
                    "artery walls is consistently too high.",
    "tachycardia": "Abnormally rapid heart rate.",
    "arrhythmia": "Irregular heartbeat or abnormal heart rhythm.",
    "dyspnea": "Difficulty breathing or shortness of breath.",
    "lesion": "Area of damaged tissue.",
    "myalgia": "Muscle pain or muscle aches.",
    "nausea": "Sensation of unease in the stomach with urge to vomit.",
    "vertigo": "A sensation of dizziness where you feel like you or your surroundings are spinning.",
})


def check_for_emergency(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in EMERGENCY_KEYWORDS)


def define_term(text: str) -> Optional[str]:
    """Definition of the first word in `text` that is a glossary term."""
    for word in text.lower().split():
        if word in MEDICAL_TERMS:
            return f"{word}: {MEDICAL_TERMS[word]}"
    return None


def search_terms(query: str = "") -> List[Tuple[str, str]]:
    """Glossary entries whose term or definition contains `query` (case-insensitive)."""
    query = query.lower()
    return [
        (term, definition)
        for term, definition in MEDICAL_TERMS.items()
        if query in term or query in definition.lower()
    ]
