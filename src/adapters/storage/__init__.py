"""Storage adapter — JSON file survey state."""

from src.adapters.storage.json_store import JsonSurveyStore

__all__ = ["JsonSurveyStore"]
