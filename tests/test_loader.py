# tests/test_loader.py
import asyncio

import pytest
import requests

from advisor import loader
from advisor.loader import (
    fetch_sources,
    parse_dataset_rows,
    parse_description_rows,
    parse_precaution_rows,
    parse_severity_rows,
)


def test_first_line_is_always_discarded():
    text = "itching,1\nskin_rash,3\n"
    assert parse_severity_rows(text) == [("skin_rash", 3)]


def test_blank_lines_are_skipped():
    text = "Symptom,weight\n\nitching,1\n   \nchills,3\n"
    assert parse_severity_rows(text) == [("itching", 1), ("chills", 3)]


def test_malformed_severity_rows_are_skipped_individually():
    text = "Symptom,weight\nitching,1\nbad_row,abc\nshort_row\n Chills ,3\n"
    assert parse_severity_rows(text) == [("itching", 1), ("chills", 3)]


def test_crlf_line_endings():
    text = "Symptom,weight\r\nitching,1\r\nchills,3\r\n"
    assert parse_severity_rows(text) == [("itching", 1), ("chills", 3)]


def test_only_newline_separates_rows():
    dataset = "Disease,S1,S2\nFlu, cough\x85 extra, fever\n"
    assert [condition for condition, _ in parse_dataset_rows(dataset)] == ["Flu"]

    descriptions = "Disease,Description\nFlu,Fever\x0cis common\n"
    assert parse_description_rows(descriptions) == [("Flu", "Fever\x0cis common")]


def test_description_is_cut_at_first_comma():
    text = "Disease,Description\nmigraine,Severe pain, usually on one side.\n"
    assert parse_description_rows(text) == [("migraine", "Severe pain")]


def test_description_row_without_value_is_skipped():
    text = "Disease,Description\nmigraine\nMalaria,A parasite infection.\n"
    assert parse_description_rows(text) == [("Malaria", "A parasite infection.")]


def test_precautions_drop_empty_fields_and_keep_order():
    text = "Disease,P1,P2,P3,P4\nAllergy,apply calamine,,use ice, \n"
    assert parse_precaution_rows(text) == [("Allergy", ("apply calamine", "use ice"))]


def test_dataset_symptoms_are_trimmed_and_lowercased():
    text = "Disease,S1,S2,S3,S4\nFungal infection, Itching , skin_rash,,\n"
    assert parse_dataset_rows(text) == [("Fungal infection", ("itching", "skin_rash"))]


def test_dataset_condition_name_keeps_case():
    text = "Disease,S1\n  Common Cold , cough\n"
    assert parse_dataset_rows(text)[0][0] == "Common Cold"


def test_rows_without_key_are_skipped():
    text = "Disease,S1\n, cough\nFlu, cough\n"
    assert parse_dataset_rows(text) == [("Flu", ("cough",))]


def test_fetch_sources_reads_local_files(source_files, sources):
    fetched = asyncio.run(fetch_sources(source_files))
    assert fetched == sources


def test_fetch_sources_missing_file_raises(source_files, tmp_path):
    source_files["precaution"] = str(tmp_path / "missing.csv")
    with pytest.raises(OSError):
        asyncio.run(fetch_sources(source_files))


class _FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_read_source_fetches_urls(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return _FakeResponse("Symptom,weight\nitching,1\n")

    monkeypatch.setattr(loader.requests, "get", fake_get)
    assert loader.read_source("https://example.org/Symptom-severity.csv") == "Symptom,weight\nitching,1\n"
    assert calls == ["https://example.org/Symptom-severity.csv"]


def test_read_source_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(loader.requests, "get", lambda url, timeout: _FakeResponse("", 404))
    with pytest.raises(requests.HTTPError):
        loader.read_source("http://example.org/dataset.csv")
