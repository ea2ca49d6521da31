"""Command-line interface for the SubRip tools."""
