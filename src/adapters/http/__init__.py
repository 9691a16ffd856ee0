"""HTTP adapter — plugin API client."""

from src.adapters.http.client import Client

__all__ = ["Client"]
