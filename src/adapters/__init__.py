"""Adapters — host-facing implementations of the ports."""
