"""
Tabular Loader (data-driven)

- Parses the four comma-separated sources: condition -> symptoms, condition -> description,
  condition -> precautions and symptom -> severity weight
- Fetches the raw text of each source from a local path or an http(s) URL
- Parsing is row-tolerant: a malformed row is skipped, never the whole table
"""

import asyncio
import logging
from pathlib import Path
from typing import Dict, Iterator, List, NamedTuple, Tuple

import requests

import config

logger = logging.getLogger(__name__)

SOURCE_NAMES = ("severity", "description", "precaution", "dataset")


class TabularSources(NamedTuple):
    """Raw text of the four sources."""
    severity: str
    description: str
    precaution: str
    dataset: str


def _iter_rows(text: str) -> Iterator[List[str]]:
    """
    Yield the comma-split fields of every data line.
    The first line is a header and is always discarded; blank lines are skipped.
    """
    for line in text.split("\n")[1:]:
        line = line.rstrip("\r")
        if not line.strip():
            continue
        yield line.split(",")


def parse_severity_rows(text: str) -> List[Tuple[str, int]]:
    """Parse `symptom,weight` rows. Symptom names are trimmed and lowercased."""
    rows = []
    for fields in _iter_rows(text):
        symptom = fields[0].strip().lower()
        if not symptom or len(fields) < 2:
            logger.debug("Skipping short severity row: %r", fields)
            continue
        try:
            weight = int(fields[1])
        except ValueError:
            logger.debug("Skipping severity row with bad weight: %r", fields)
            continue
        rows.append((symptom, weight))
    return rows


def parse_description_rows(text: str) -> List[Tuple[str, str]]:
    """
    Parse `condition,description` rows.

    The line is split naively on commas: a description containing commas is cut at
    the first one and the rest of the text is dropped.
    """
    rows = []
    for fields in _iter_rows(text):
        condition = fields[0].strip()
        if not condition or len(fields) < 2:
            logger.debug("Skipping short description row: %r", fields)
            continue
        rows.append((condition, fields[1]))
    return rows


def parse_precaution_rows(text: str) -> List[Tuple[str, Tuple[str, ...]]]:
    """Parse `condition,precaution_1,...,precaution_n` rows, dropping empty fields."""
    rows = []
    for fields in _iter_rows(text):
        condition = fields[0].strip()
        if not condition:
            continue
        precautions = tuple(p.strip() for p in fields[1:] if p.strip())
        rows.append((condition, precautions))
    return rows


def parse_dataset_rows(text: str) -> List[Tuple[str, Tuple[str, ...]]]:
    """Parse `condition,symptom_1,...,symptom_n` rows. Symptoms are trimmed and lowercased."""
    rows = []
    for fields in _iter_rows(text):
        condition = fields[0].strip()
        if not condition:
            continue
        symptoms = tuple(s.strip().lower() for s in fields[1:] if s.strip())
        rows.append((condition, symptoms))
    return rows


def read_source(location: str) -> str:
    """Read one source from a local path or an http(s) URL."""
    if config.is_url(location):
        response = requests.get(location, timeout=config.FETCH_TIMEOUT)
        response.raise_for_status()
        return response.text
    return Path(location).read_text(encoding="utf-8")


async def fetch_sources(locations: Dict[str, str] = None) -> TabularSources:
    """
    Fetch all four sources concurrently.

    Args:
        locations: Mapping of source name to path or URL; names left out fall back to config.SOURCE_LOCATIONS

    Returns:
        TabularSources with the raw text of each source
    """
    locations = {**config.SOURCE_LOCATIONS, **(locations or {})}
    texts = await asyncio.gather(
        *(asyncio.to_thread(read_source, locations[name]) for name in SOURCE_NAMES)
    )
    return TabularSources(*texts)
