# tests/conftest.py
import pytest

from advisor.engine import SymptomEngine
from advisor.knowledge_base import build_from_sources
from advisor.loader import TabularSources

SEVERITY_CSV = """Symptom,weight
headache,5
high_fever,7
chills,3
vomiting,5
skin_rash,3
nausea,4
"""

DESCRIPTION_CSV = """Disease,Description
migraine,A migraine can cause severe throbbing pain, usually on one side of the head.
Malaria,An infectious disease caused by protozoan parasites.
Fungal infection,"In humans, fungal infections occur when a fungus takes over an area of the body."
"""

PRECAUTION_CSV = """Disease,Precaution_1,Precaution_2,Precaution_3,Precaution_4
migraine,meditation,reduce stress,,consult doctor
Malaria,Consult nearest hospital,avoid oily food,avoid non veg food,keep mosquitos out
"""

DATASET_CSV = """Disease,Symptom_1,Symptom_2,Symptom_3,Symptom_4
migraine, headache, nausea, blurred_and_distorted_vision, stiff_neck
Malaria, high_fever, vomiting, headache, sweating
Fungal infection, skin_rash, nodal_skin_eruptions,,
Fungal infection, skin_rash, dischromic _patches,,
Dengue, high_fever, vomiting, joint_pain, fatigue
"""


@pytest.fixture
def sources():
    return TabularSources(SEVERITY_CSV, DESCRIPTION_CSV, PRECAUTION_CSV, DATASET_CSV)


@pytest.fixture
def kb(sources):
    return build_from_sources(sources)


@pytest.fixture
def engine(kb):
    return SymptomEngine(kb)


@pytest.fixture
def source_files(tmp_path, sources):
    """Write the sample sources to disk and return their locations."""
    locations = {}
    for name, text in sources._asdict().items():
        path = tmp_path / f"{name}.csv"
        path.write_text(text, encoding="utf-8")
        locations[name] = str(path)
    return locations
