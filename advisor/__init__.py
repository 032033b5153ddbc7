"""Rule-based symptom-to-condition advisor."""

__version__ = "1.0.0"
