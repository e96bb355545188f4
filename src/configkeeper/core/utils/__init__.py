"""Shared utilities: logging, paths, events, translation."""
