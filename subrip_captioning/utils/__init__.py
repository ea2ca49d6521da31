"""Utility helpers for the SubRip parser."""

from .config import ConfigManager
from .line_endings import detect_line_ending, normalize_line_endings

__all__ = ['ConfigManager', 'detect_line_ending', 'normalize_line_endings']
