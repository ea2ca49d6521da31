"""Cue text transforms used when building SubRip files."""

from .base import BaseTextTransform, PlainTextTransform
from .markup_transform import MarkupTextTransform
from .transform_factory import TransformFactory

__all__ = [
    'BaseTextTransform',
    'PlainTextTransform',
    'MarkupTextTransform',
    'TransformFactory',
]
