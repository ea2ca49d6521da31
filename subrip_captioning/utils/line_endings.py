"""Utility functions for detecting and normalizing line endings in subtitle content."""

def detect_line_ending(content: str) -> str:
    """Return the first line terminator found in the content, or '\\n' if there is none."""
    for i, char in enumerate(content):
        if char == '\r':
            return '\r\n' if content[i + 1:i + 2] == '\n' else '\r'
        if char == '\n':
            return '\n'
    return '\n'

def normalize_line_endings(content: str) -> str:
    """Convert Windows and classic Mac line endings to '\\n'."""
    return content.replace('\r\n', '\n').replace('\r', '\n')
