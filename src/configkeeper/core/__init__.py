"""Core registry and utilities."""
