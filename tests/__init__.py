"""
Test suite for ConfigKeeper.

Tests are organized by package:

- core/config/: registry, coercion, change pipeline, constraints, persistence
  and the location index
- core/utils/: event bus, translation, logging and path helpers
- cli/: Typer commands and the interactive settings editor
"""
