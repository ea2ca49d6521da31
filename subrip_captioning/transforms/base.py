"""Base text transform interface for rendering cue text."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)

Replacements = Union[bool, Mapping[str, str]]

class BaseTextTransform(ABC):
    """Abstract base class for cue text transforms.

    The builder calls a transform once per cue with the current build
    options; transforms never see timecodes or indices.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize the transform with the given configuration.

        Args:
            config: Configuration dictionary for the transform
        """
        self.config = config or {}

    @abstractmethod
    def transform(
        self,
        text: str,
        strip_tags: bool = False,
        strip_basic: bool = False,
        replacements: Replacements = False
    ) -> str:
        """Transform the text of a single cue.

        Args:
            text: Cue text as stored
            strip_tags: Remove markup from the text
            strip_basic: Limit stripping to basic formatting tags
            replacements: True for the default replacement table, a mapping
                for a custom one, False for none

        Returns:
            The text to write into the built file
        """
        pass

    def __call__(self, text: str, strip_tags: bool = False, strip_basic: bool = False,
                 replacements: Replacements = False) -> str:
        return self.transform(text, strip_tags, strip_basic, replacements)


class PlainTextTransform(BaseTextTransform):
    """Transform that returns cue text unchanged."""

    def transform(self, text, strip_tags=False, strip_basic=False, replacements=False):
        return text
