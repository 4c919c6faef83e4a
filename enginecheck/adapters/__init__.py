"""Adapters — bindings to external processes."""
