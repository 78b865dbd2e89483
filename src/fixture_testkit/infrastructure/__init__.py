"""Adapters for logging, fixture files, persistence and HTTP."""
