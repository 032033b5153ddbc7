#!/usr/bin/env python3
"""
Script to build the knowledge base from the configured CSV sources and save it as JSON.

Also prints a short summary table of the merged conditions, which is handy for
spotting conditions without a description or precautions.
"""

import asyncio
import json
import logging
import sys
from pathlib import Path

import pandas as pd

# Add the project root to the path to import config and the advisor package
sys.path.append(str(Path(__file__).resolve().parent.parent))

import config
from advisor.knowledge_base import load_knowledge_base

OUTPUT_FILE = config.DATA_DIR / "knowledge_base.json"


def knowledge_base_frame(kb):
    """One row per condition: symptom count, score ceiling and missing-data flags."""
    return pd.DataFrame(
        [
            {
                "condition": record.name,
                "symptoms": len(record.symptoms),
                "total_weight": sum(kb.severity.get(s, 0) for s in record.symptoms),
                "has_description": record.description is not None,
                "has_precautions": record.precautions is not None,
            }
            for record in kb
        ],
        columns=["condition", "symptoms", "total_weight", "has_description", "has_precautions"],
    )


def save_knowledge_base(kb, output_file=OUTPUT_FILE):
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    data = {
        record.name: {
            "symptoms": list(record.symptoms),
            "description": record.description,
            "precautions": list(record.precautions) if record.precautions is not None else None,
        }
        for record in kb
    }
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump({"conditions": data, "severity": dict(kb.severity)}, f, indent=2, ensure_ascii=False)
    return output_file


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s - %(message)s")

    print("Building knowledge base...")
    print("=" * 60)

    try:
        config.validate_paths()
    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)

    kb = asyncio.run(load_knowledge_base())
    if kb.is_empty():
        print("No conditions loaded; check the CSV sources in config.py")
        sys.exit(1)

    df = knowledge_base_frame(kb)
    print(df.to_string(index=False))
    print("=" * 60)
    print(f"Conditions:             {len(df)}")
    print(f"Distinct symptoms:      {len(kb.symptom_vocabulary())}")
    print(f"Avg symptoms/condition: {df['symptoms'].mean():.1f}")
    print(f"Missing descriptions:   {(~df['has_description']).sum()}")
    print(f"Missing precautions:    {(~df['has_precautions']).sum()}")

    output_file = save_knowledge_base(kb)
    print(f"\nSaved knowledge base to {output_file}")


if __name__ == "__main__":
    main()
