"""Markup-aware text transform for SubRip cue text."""

import logging
import re
from typing import Dict, Mapping

import pysubs2

from .base import BaseTextTransform, Replacements

logger = logging.getLogger(__name__)

HTML_TAG = re.compile(r'<[^>]+>')

BASIC_TAG = re.compile(r'</?(?:b|i|u|s|font)(?:\s[^>]*)?>', re.IGNORECASE)

DEFAULT_REPLACEMENTS: Dict[str, str] = {
    '<br>': '\n',
    '<br/>': '\n',
    '<br />': '\n',
    '&nbsp;': ' ',
    '&amp;': '&',
}

class MarkupTextTransform(BaseTextTransform):
    """Strips HTML-style tags and SSA override blocks, and applies text replacements.

    Replacements run before stripping, so a replaced '<br>' survives as a
    line break.
    """

    def transform(
        self,
        text: str,
        strip_tags: bool = False,
        strip_basic: bool = False,
        replacements: Replacements = False
    ) -> str:
        text = self._apply_replacements(text, replacements)

        if not strip_tags:
            return text

        if strip_basic:
            return BASIC_TAG.sub('', text)

        text = HTML_TAG.sub('', text)
        # pysubs2 drops {\...} override blocks and turns \N into a newline
        return pysubs2.SSAEvent(text=text).plaintext

    def _apply_replacements(self, text: str, replacements: Replacements) -> str:
        if not replacements:
            return text

        table: Mapping[str, str]
        if isinstance(replacements, Mapping):
            table = replacements
        else:
            table = self.config.get('replacements', DEFAULT_REPLACEMENTS)

        for search, replace in table.items():
            text = text.replace(search, replace)
        return text
