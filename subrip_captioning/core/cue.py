"""Cue record for SubRip files."""

from dataclasses import dataclass
from typing import Optional

from ..transforms import BaseTextTransform, MarkupTextTransform
from ..transforms.base import Replacements
from .timecode import ms_to_timecode, timecode_to_ms

_default_transform = MarkupTextTransform()

@dataclass
class Cue:
    """A single caption: start and end timecodes plus its text."""
    start: str
    end: str
    text: str
    line_ending: str = "\n"

    @property
    def start_ms(self) -> int:
        return timecode_to_ms(self.start)

    @property
    def end_ms(self) -> int:
        return timecode_to_ms(self.end)

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms

    def timecode_string(self) -> str:
        """Return the timeline line, e.g. '00:00:01,000 --> 00:00:02,500'."""
        return f"{ms_to_timecode(self.start_ms)} --> {ms_to_timecode(self.end_ms)}"

    def get_text(
        self,
        strip_tags: bool = False,
        strip_basic: bool = False,
        replacements: Replacements = False,
        transform: Optional[BaseTextTransform] = None
    ) -> str:
        """Return the cue text as it should be written out."""
        transform = transform or _default_transform
        return transform(self.text, strip_tags, strip_basic, replacements)

    def shift(self, offset_ms: int) -> None:
        """Move the cue by `offset_ms` milliseconds; times stop at zero."""
        self.start = ms_to_timecode(self.start_ms + offset_ms)
        self.end = ms_to_timecode(self.end_ms + offset_ms)
