"""Command-line interface for ConfigKeeper."""
